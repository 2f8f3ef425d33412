"""Link check API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkCheckOutput
from ..file_service.get_file_service import get_file_service
from ..StageResult import StageResult
from ._batch_output import _batch_output, _empty_batch_output
from ._load_links_config import _load_links_config
from .process_existence_check import process_existence_check


def cmd_check(path: str, fix: bool = False, dataset_root: str | None = None) -> StageResult:
    """Find links whose target does not exist.

    Links that can be repaired by dropping ``../`` segments are reported under
    by_kind["patched"] and written back when fix is true. Succeeds only when no
    broken link remains.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        file_service = get_file_service("local")
        target = file_service.resolve(path)
        try:
            config = _load_links_config(dataset_root)
        except ValueError as e:
            result_obj.output = LinkCheckOutput(
                **_empty_batch_output(target, [str(e)]), fix=fix, broken_links=[]
            ).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.3, "Checking links...")
        try:
            batch = process_existence_check(target, config, file_service, fix=fix)
        except FileNotFoundError as e:
            result_obj.output = LinkCheckOutput(
                **_empty_batch_output(target, [str(e)]), fix=fix, broken_links=[]
            ).model_dump(mode="python")
            result_obj.result = f"Path not found: {path}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkCheckOutput(
            **_batch_output(target, batch), fix=fix, broken_links=batch.link_errors
        ).model_dump(mode="python")

        patched = batch.by_kind.get("patched", 0)
        verb = "Patched" if fix else "Patchable"
        result_obj.result = (
            f"Checked {batch.processed_files} file(s): "
            f"{len(batch.link_errors)} broken link(s), {verb} {patched}"
        )
        result_obj.success = not batch.link_errors and not batch.errors

    announce = f"Checking and fixing links in {path}..." if fix else f"Checking links in {path}..."
    return StageResult(announce=announce, progress_callback=do_work)
