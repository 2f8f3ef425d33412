"""Link style API command."""

from collections.abc import Iterator

from .._output_schemas.link import LinkStyleOutput
from ..file_service.get_file_service import get_file_service
from ..StageResult import StageResult
from .detect_link_style import detect_link_style


def cmd_style(path: str) -> StageResult:
    """Report whether a tree mostly uses relative or '/'-rooted links."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Resolving path...")
        file_service = get_file_service("local")
        directory = file_service.resolve(path)

        yield (0.5, "Counting links...")
        try:
            style = detect_link_style(file_service, directory)
        except FileNotFoundError as e:
            result_obj.output = LinkStyleOutput(path=directory, style="", errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Directory not found: {path}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkStyleOutput(path=directory, style=style).model_dump(mode="python")
        result_obj.result = f"Dominant link style: {style}"
        result_obj.success = True

    return StageResult(announce=f"Detecting link style in {path}...", progress_callback=do_work)
