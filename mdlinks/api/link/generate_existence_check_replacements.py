"""Existence check replacement generator."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.LinksConfig import LinksConfig
from ..file_service.FileService import FileService
from ._host_dir import _host_dir
from .convert_to_relative import convert_to_relative
from .ExistenceCheckResult import ExistenceCheckResult
from .LinkTargetError import LinkTargetError
from .ParsedLink import ParsedLink
from .Replacement import Replacement
from .ReplacementKind import PATCHED
from .resolve_markdown_path import resolve_markdown_path
from .should_skip_link import should_skip_link
from .split_link_parts import split_link_parts
from .strip_anchor import strip_anchor
from .try_resolve_path_variants import try_resolve_path_variants

logger = get_logger("link")


def generate_existence_check_replacements(
    *,
    links: list[ParsedLink],
    file: str | Path,
    config: LinksConfig,
    file_service: FileService,
    lines: list[str],
) -> ExistenceCheckResult:
    """Patch links whose target is missing, report the ones that cannot be patched.

    A missing ``../`` target is repaired with the closest existing variant (see
    try_resolve_path_variants). Anything else missing becomes a LinkTargetError
    carrying the offending source line; the scan always covers every link.
    """
    result = ExistenceCheckResult()
    host_dir = _host_dir(file)

    for link in links:
        href = link.href
        if should_skip_link(href, config.exclusion_list):
            continue

        abs_target = resolve_markdown_path(file, strip_anchor(href), config.docs_folders, config.dataset_root)
        if file_service.exists(abs_target):
            continue

        variant = try_resolve_path_variants(
            file=file,
            link_path=href,
            docs_folders=config.docs_folders,
            file_service=file_service,
            dataset_root=config.dataset_root,
        )
        if variant:
            path, query, anchor = split_link_parts(variant)
            resolved = resolve_markdown_path(file, path, config.docs_folders, config.dataset_root)
            rel = convert_to_relative(host_dir, resolved)
            if href.startswith(".") and not rel.startswith("."):
                rel = "./" + rel
            result.replacements.append(
                Replacement(
                    start=link.start,
                    end=link.end,
                    line=link.line,
                    old_href=href,
                    new_href=rel + query + anchor,
                    kind=PATCHED,
                )
            )
            continue

        logger.debug("%s:%d: link target not found: %s", file, link.line, href)
        idx = link.line - 1
        result.errors.append(
            LinkTargetError(
                file=str(file),
                line_number=link.line,
                line=lines[idx] if 0 <= idx < len(lines) else "",
            )
        )

    return result
