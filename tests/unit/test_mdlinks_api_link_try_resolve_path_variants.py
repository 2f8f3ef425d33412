"""Unit tests for mdlinks.api.link.try_resolve_path_variants."""

from mdlinks.api.link.try_resolve_path_variants import try_resolve_path_variants


def _variants(fs, file, link_path):
    return try_resolve_path_variants(
        file=file,
        link_path=link_path,
        docs_folders=["docs"],
        file_service=fs,
        dataset_root="/dataset",
    )


def test_original_wins_when_it_exists(memory_fs):
    fs = memory_fs({"/dataset/existing.md": "", "/dataset/docs/existing.md": ""})
    assert _variants(fs, "/dataset/docs/sub/deep/file.md", "../../../existing.md") == "../../../existing.md"


def test_first_shallower_variant_that_exists(memory_fs):
    fs = memory_fs({"/dataset/docs/guide.md": ""})
    assert _variants(fs, "/dataset/docs/a/b.md", "../../guide.md") == "../guide.md"


def test_all_parent_steps_dropped_gets_dot_prefix(memory_fs):
    fs = memory_fs({"/dataset/docs/a/c.md": ""})
    assert _variants(fs, "/dataset/docs/a/b.md", "../c.md") == "./c.md"


def test_no_variant_exists(memory_fs):
    fs = memory_fs({"/dataset/docs/a/b.md": ""})
    assert _variants(fs, "/dataset/docs/a/b.md", "../../nowhere.md") is None


def test_only_parent_relative_links_are_searched(memory_fs):
    fs = memory_fs({"/dataset/docs/a/c.md": ""})
    assert _variants(fs, "/dataset/docs/a/b.md", "./c.md") is None
    assert _variants(fs, "/dataset/docs/a/b.md", "c.md") is None
