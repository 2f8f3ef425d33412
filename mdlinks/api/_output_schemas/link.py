"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show command."""

    path: str = Field(..., description="File whose links were extracted")
    links: list[dict[str, Any]] = Field(..., description="Links with href, text, line, offsets, type and anchor")
    count: int = Field(..., description="Number of links found")


class _LinkBatchOutput(BaseOutputSchema):
    path: str = Field(..., description="File or directory that was processed")
    total_files: int = Field(..., description="Markdown files found under path")
    processed_files: int = Field(..., description="Files processed without error")
    total_replacements_applied: int = Field(..., description="Replacements applied across all files")
    by_kind: dict[str, int] = Field(..., description="Applied replacements per kind")
    modified_files: list[str] = Field(..., description="Files written (or that would be written)")


class LinkCheckOutput(_LinkBatchOutput):
    """Output schema for link check command."""

    fix: bool = Field(..., description="Whether repairable links were written back")
    broken_links: list[dict[str, Any]] = Field(..., description="Links whose target is missing and could not be repaired")


class LinkNormalizeOutput(_LinkBatchOutput):
    """Output schema for link normalize command."""

    dry_run: bool = Field(..., description="Whether writing was suppressed")


class LinkSubstituteOutput(_LinkBatchOutput):
    """Output schema for link substitute command."""

    old_base: str = Field(..., description="Prefix that was replaced")
    new_base: str = Field(..., description="Replacement prefix")
    dry_run: bool = Field(..., description="Whether writing was suppressed")


class LinkStyleOutput(BaseOutputSchema):
    """Output schema for link style command."""

    path: str = Field(..., description="Directory that was scanned")
    style: str = Field(..., description="Dominant link style: 'relative' or 'absolute'")


register_output_schema("link", "show", LinkShowOutput)
register_output_schema("link", "check", LinkCheckOutput)
register_output_schema("link", "normalize", LinkNormalizeOutput)
register_output_schema("link", "substitute", LinkSubstituteOutput)
register_output_schema("link", "style", LinkStyleOutput)
