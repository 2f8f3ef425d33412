"""Link substitute API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkSubstituteOutput
from ..file_service.get_file_service import get_file_service
from ..StageResult import StageResult
from ._batch_output import _batch_output, _empty_batch_output
from ._load_links_config import _load_links_config
from .process_path_substitution import process_path_substitution


def cmd_substitute(path: str, old_base: str, new_base: str, dry_run: bool = False) -> StageResult:
    """Replace the old_base prefix of local links with new_base.

    The substitution is purely textual; configuration only supplies the
    exclusion list.
    """

    def _fail(result_obj: StageResult, target: str, error: str, message: str) -> None:
        result_obj.output = LinkSubstituteOutput(
            **_empty_batch_output(target, [error]),
            old_base=old_base,
            new_base=new_base,
            dry_run=dry_run,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        file_service = get_file_service("local")
        target = file_service.resolve(path)

        if not old_base:
            _fail(result_obj, target, "old_base must not be empty", "Nothing to substitute: old_base is empty")
            return
        try:
            config = _load_links_config()
        except ValueError as e:
            _fail(result_obj, target, str(e), f"Configuration error: {e}")
            return

        yield (0.4, "Substituting paths...")
        try:
            batch = process_path_substitution(
                target,
                old_base,
                new_base,
                file_service,
                exclusion_list=config.exclusion_list,
                write=not dry_run,
            )
        except FileNotFoundError as e:
            _fail(result_obj, target, str(e), f"Path not found: {path}")
            return

        yield (1.0, "Complete")
        result_obj.output = LinkSubstituteOutput(
            **_batch_output(target, batch),
            old_base=old_base,
            new_base=new_base,
            dry_run=dry_run,
        ).model_dump(mode="python")
        prefix = "Would substitute" if dry_run else "Substituted"
        result_obj.result = (
            f"{prefix} {batch.total_replacements_applied} link(s) in {len(batch.modified_files)} file(s)"
        )
        result_obj.success = not batch.errors

    return StageResult(
        announce=f"Substituting '{old_base}' with '{new_base}' in {path}...",
        progress_callback=do_work,
    )
