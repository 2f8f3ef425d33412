"""Unit tests for link target resolution."""

import pytest

from mdlinks.api.link.convert_to_relative import convert_to_relative
from mdlinks.api.link.resolve_markdown_path import resolve_markdown_path
from mdlinks.api.link.resolve_markdown_path_auto import resolve_markdown_path_auto

FILE = "/dataset/docs/guide/intro.md"
DOCS = ["docs"]
ROOT = "/dataset"


@pytest.mark.parametrize(
    ("link_path", "expected"),
    [
        # docs folder prefix: already dataset-rooted
        ("docs/api/ref.md", "/dataset/docs/api/ref.md"),
        # explicit relative and bare filenames: host directory
        ("./setup.md", "/dataset/docs/guide/setup.md"),
        ("../api/ref.md#section", "/dataset/docs/api/ref.md"),
        ("setup.md", "/dataset/docs/guide/setup.md"),
        # query strings are kept
        ("setup.md?v=2", "/dataset/docs/guide/setup.md?v=2"),
        # anything else: under the host's position in the dataset
        ("other/x.md", "/dataset/docs/guide/other/x.md"),
        # a leading '/' does not discard the earlier segments
        ("/abs/x.md", "/dataset/docs/guide/abs/x.md"),
    ],
)
def test_resolve_markdown_path(link_path, expected):
    assert resolve_markdown_path(FILE, link_path, DOCS, ROOT) == expected


def test_resolve_markdown_path_empty_link_raises():
    with pytest.raises(ValueError, match="linkPath is undefined"):
        resolve_markdown_path(FILE, "", DOCS, ROOT)


def test_docs_folder_match_is_on_whole_first_segment():
    # 'docsextra' is not the 'docs' folder
    assert resolve_markdown_path(FILE, "docsextra/a.md", DOCS, ROOT) == "/dataset/docs/guide/docsextra/a.md"


def test_convert_to_relative():
    assert convert_to_relative("/a/b", "/a/b") == "./"
    assert convert_to_relative("/a/b", "/a/c/d.md") == "../c/d.md"
    assert convert_to_relative("/a/b", "/a/b/c.md") == "c.md"


def test_resolve_auto_detects_root_from_marker(memory_fs):
    fs = memory_fs({"/repo/.git/HEAD": "ref", "/repo/docs/a.md": "# A"})
    resolved = resolve_markdown_path_auto(
        file="/repo/docs/a.md",
        link_path="docs/b.md",
        docs_folders=DOCS,
        file_service=fs,
    )
    assert resolved == "/repo/docs/b.md"


def test_resolve_auto_falls_back_to_file_directory(memory_fs):
    fs = memory_fs({"/repo/docs/a.md": "# A"})
    resolved = resolve_markdown_path_auto(
        file="/repo/docs/a.md",
        link_path="docs/b.md",
        docs_folders=DOCS,
        file_service=fs,
    )
    assert resolved == "/repo/docs/docs/b.md"


def test_resolve_auto_explicit_root_wins(memory_fs):
    fs = memory_fs({"/repo/.git/HEAD": "ref"})
    resolved = resolve_markdown_path_auto(
        file="/other/docs/a.md",
        link_path="docs/b.md",
        docs_folders=DOCS,
        file_service=fs,
        dataset_root="/other",
    )
    assert resolved == "/other/docs/b.md"
