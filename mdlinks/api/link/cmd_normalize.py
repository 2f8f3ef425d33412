"""Link normalize API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkNormalizeOutput
from ..file_service.get_file_service import get_file_service
from ..StageResult import StageResult
from ._batch_output import _batch_output, _empty_batch_output
from ._load_links_config import _load_links_config
from .process_normalization import process_normalization


def cmd_normalize(path: str, dry_run: bool = False, dataset_root: str | None = None) -> StageResult:
    """Rewrite links to the canonical relative form of their target."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        file_service = get_file_service("local")
        target = file_service.resolve(path)
        try:
            config = _load_links_config(dataset_root)
        except ValueError as e:
            result_obj.output = LinkNormalizeOutput(
                **_empty_batch_output(target, [str(e)]), dry_run=dry_run
            ).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.3, "Normalizing links...")
        try:
            batch = process_normalization(target, config, file_service, write=not dry_run)
        except FileNotFoundError as e:
            result_obj.output = LinkNormalizeOutput(
                **_empty_batch_output(target, [str(e)]), dry_run=dry_run
            ).model_dump(mode="python")
            result_obj.result = f"Path not found: {path}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkNormalizeOutput(**_batch_output(target, batch), dry_run=dry_run).model_dump(
            mode="python"
        )
        prefix = "Would normalize" if dry_run else "Normalized"
        result_obj.result = (
            f"{prefix} {batch.total_replacements_applied} link(s) in {len(batch.modified_files)} file(s)"
        )
        result_obj.success = not batch.errors

    return StageResult(announce=f"Normalizing links in {path}...", progress_callback=do_work)
