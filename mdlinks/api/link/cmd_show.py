"""Link show API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkShowOutput
from ..file_service.get_file_service import get_file_service
from ..StageResult import StageResult
from .extract_links_from_file import extract_links_from_file


def cmd_show(path: str) -> StageResult:
    """List the links of one markdown file with their type and anchor."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Resolving path...")
        file_service = get_file_service("local")
        file_path = file_service.resolve(path)

        yield (0.5, "Extracting links...")
        try:
            links = extract_links_from_file(file_path, file_service)
        except (OSError, ValueError) as e:
            result_obj.output = LinkShowOutput(
                path=file_path,
                links=[],
                count=0,
                errors=[str(e)],
            ).model_dump(mode="python")
            result_obj.result = f"Cannot read {path}: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkShowOutput(
            path=file_path,
            links=[link.to_dict() for link in links],
            count=len(links),
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links)} link(s) in {path}"
        result_obj.success = True

    return StageResult(announce=f"Showing links in {path}...", progress_callback=do_work)
