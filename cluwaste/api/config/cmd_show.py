"""Show configuration command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .ClusterWasteConfig import ClusterWasteConfig


def cmd_show(section: str = "") -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names, otherwise returns specific section.
    """

    def _build_result(result_obj: StageResult, success: bool, message: str, content: dict, errors: list[str]) -> None:
        result_obj.output = ConfigShowOutput(
            errors=errors,
            warnings=[],
            section=section,
            content=content,
            config_path=str(ClusterWasteConfig.get_config_path()),
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = ClusterWasteConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _build_result(result_obj, False, "Failed to load configuration", {}, [str(e)])
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())

        yield (1.0, "Complete")
        if section == "":
            _build_result(
                result_obj, True, f"Found {len(available_sections)} section(s)", {"sections": available_sections}, []
            )
        elif section not in available_sections:
            _build_result(result_obj, False, f"Section '{section}' not found", {}, [f"Unknown section: {section}"])
        else:
            _build_result(result_obj, True, f"Retrieved configuration for '{section}'", config_dict[section], [])

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
