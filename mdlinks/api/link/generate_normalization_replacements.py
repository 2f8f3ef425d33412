"""Normalization replacement generator."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.LinksConfig import LinksConfig
from ..file_service.FileService import FileService
from ._host_dir import _host_dir
from .convert_to_relative import convert_to_relative
from .NormalizationStrategy import NormalizationStrategy
from .normalize_link_slashes import normalize_link_slashes
from .ParsedLink import ParsedLink
from .Replacement import Replacement
from .ReplacementKind import NORMALIZED_REL
from .resolve_markdown_path import resolve_markdown_path
from .should_skip_link import should_skip_link
from .split_link_parts import split_link_parts

logger = get_logger("link")


@dataclass(frozen=True)
class _Context:
    link: ParsedLink
    abs_target: str
    host_dir: str
    dataset_root: str
    query: str
    anchor: str
    file_service: FileService


# (handled, replacement): handled=False passes the link to the next strategy
_Outcome = tuple[bool, Replacement | None]


def _replacement(ctx: _Context, new_href: str) -> Replacement | None:
    if new_href == ctx.link.href:
        return None
    return Replacement(
        start=ctx.link.start,
        end=ctx.link.end,
        line=ctx.link.line,
        old_href=ctx.link.href,
        new_href=new_href,
        kind=NORMALIZED_REL,
    )


def _root_relative(ctx: _Context) -> str | None:
    """Target relative to the dataset root, or None when it lies outside."""
    rel = convert_to_relative(ctx.dataset_root, ctx.abs_target)
    if not rel or rel.startswith("..") or rel == "./":
        return None
    return rel


def _normalize_relative(ctx: _Context) -> _Outcome:
    rel_from_host = convert_to_relative(ctx.host_dir, ctx.abs_target)
    if rel_from_host.startswith(".."):
        return False, None
    if not ctx.file_service.exists(ctx.abs_target):
        return False, None
    # do not introduce a leading './' the author did not write
    if not ctx.link.href.startswith("./") and rel_from_host.startswith("./"):
        rel_from_host = rel_from_host[2:]
    return True, _replacement(ctx, rel_from_host + ctx.query + ctx.anchor)


def _normalize_single_file(ctx: _Context) -> _Outcome:
    rel = _root_relative(ctx)
    if rel is None or "/" in rel:
        return False, None
    if rel == "index.md" or not ctx.file_service.exists(ctx.abs_target):
        return True, None
    return True, _replacement(ctx, normalize_link_slashes(rel) + ctx.query + ctx.anchor)


def _normalize_full(ctx: _Context) -> _Outcome:
    return False, None


_STRATEGIES: dict[NormalizationStrategy, Callable[[_Context], _Outcome]] = {
    NormalizationStrategy.RELATIVE: _normalize_relative,
    NormalizationStrategy.SINGLE_FILE: _normalize_single_file,
    NormalizationStrategy.FULL: _normalize_full,
}


def generate_normalization_replacements(
    links: list[ParsedLink],
    file: str | Path,
    config: LinksConfig,
    file_service: FileService,
) -> list[Replacement]:
    """Rewrite links to the canonical relative form of their existing target.

    Only links whose target exists are touched, and a replacement is emitted
    only when the canonical form differs from what is written, so running the
    result through this generator again yields nothing.

    Raises:
        ValueError: If a non-skipped link has an empty path part (e.g. ``?q``)
    """
    replacements: list[Replacement] = []
    host_dir = _host_dir(file)

    for link in links:
        if should_skip_link(link.href, config.exclusion_list):
            continue

        path, query, anchor = split_link_parts(link.href)
        abs_target = resolve_markdown_path(file, path, config.docs_folders, config.dataset_root)
        ctx = _Context(
            link=link,
            abs_target=abs_target,
            host_dir=host_dir,
            dataset_root=config.dataset_root,
            query=query,
            anchor=anchor,
            file_service=file_service,
        )

        for strategy, apply_strategy in _STRATEGIES.items():
            handled, replacement = apply_strategy(ctx)
            if not handled:
                continue
            if replacement is not None:
                logger.debug("%s: %s -> %s (%s)", file, link.href, replacement.new_href, strategy.value)
                replacements.append(replacement)
            break

    return replacements
