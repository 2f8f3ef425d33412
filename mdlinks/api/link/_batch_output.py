"""Shared output fields of the batch link commands."""

from typing import Any

from .BatchResult import BatchResult


def _batch_output(path: str, batch: BatchResult) -> dict[str, Any]:
    return {
        "path": path,
        "total_files": batch.total_files,
        "processed_files": batch.processed_files,
        "total_replacements_applied": batch.total_replacements_applied,
        "by_kind": dict(batch.by_kind),
        "modified_files": list(batch.modified_files),
        "errors": [f"{error['file']}: {error['error']}" for error in batch.errors],
    }


def _empty_batch_output(path: str, errors: list[str]) -> dict[str, Any]:
    return {
        "path": path,
        "total_files": 0,
        "processed_files": 0,
        "total_replacements_applied": 0,
        "by_kind": {},
        "modified_files": [],
        "errors": errors,
    }
