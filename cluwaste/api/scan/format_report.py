"""Fixed-format text report for a finished scan."""

from typing import Any

from ...constants import REPORT_LABEL_WIDTH, REPORT_NUMBER_WIDTH


def _line(label: str, value: str) -> str:
    return f"{label:<{REPORT_LABEL_WIDTH}}{value:>{REPORT_NUMBER_WIDTH}}"


def format_report(output: dict[str, Any]) -> str:
    """Render scan output as the classic column report.

    The percentage line is left out when no space is in use.
    """
    lines = [
        f"examining: {output['root']}",
        _line("total disk capacity:", f"{output['capacity_bytes']:,}"),
        _line("  cluster size:", f"{output['cluster_size']:,}"),
        _line("  free:", f"{output['free_bytes']:,}"),
        _line("  in use:", f"{output['in_use_bytes']:,}"),
        _line("files examined:", f"{output['files_examined']:,}"),
        _line("  space in use:", f"{output['space_in_use']:,}"),
        _line("  wasted space in final clusters:", f"{output['wasted_space']:,}"),
    ]
    if output.get("percent_wasted") is not None:
        lines.append(_line("  percent wasted space:", f"{output['percent_wasted']:,.2f}") + "%")
    return "\n".join(lines) + "\n"
