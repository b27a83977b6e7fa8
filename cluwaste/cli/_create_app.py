"""Create the Typer CLI apps."""

import typer

from cluwaste.api.config.cmd_show import cmd_show
from cluwaste.api.scan.cmd_scan import cmd_scan
from cluwaste.api.scan.format_report import format_report

from ._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from .display.CLIDisplay import CLIDisplay


def _print_report(output: dict) -> None:
    CLIDisplay().text_output(format_report(output))


def _set_display_format(ctx: typer.Context, display: str, allowed: tuple[str, ...]) -> None:
    if display not in allowed:
        typer.echo(f"Error: --display must be one of {', '.join(allowed)}; got '{display}'", err=True)
        raise typer.Exit(1)
    ctx.ensure_object(dict)
    ctx.obj["display_format"] = display


def _create_app() -> typer.Typer:
    """Create the scan CLI: cluwaste [-s] [<rootpath> [<filespec>]]."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Show disk space wasted in unused last-cluster allocations.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def scan(
        ctx: typer.Context,
        rootpath: str | None = typer.Argument(
            None, help="Path to start the enumeration. Default is the current drive root"
        ),
        filespec: str | None = typer.Argument(None, help="File filter, e.g. *.jpg. Default is *"),
        sequential: bool = typer.Option(
            False, "-s", "--sequential", help="Single-threaded. Slower; shows how much multiple cores help"
        ),
        display: str = typer.Option("report", "--display", "-d", help="Output format: report, json or yaml"),
    ) -> None:
        """Total the unused space in the final cluster of every file under ROOTPATH."""
        _set_display_format(ctx, display, DISPLAY_FORMATS)
        wrapped = _handle_stage_result(cmd_scan, result_printer=_print_report)
        wrapped(rootpath, filespec, sequential)

    return app


def _create_config_app() -> typer.Typer:
    """Create the config CLI: cluwaste-config [SECTION]."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Show cluwaste configuration.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def show(
        ctx: typer.Context,
        section: str = typer.Argument("", help="Section to show. Lists sections when omitted"),
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        """Show a configuration section, or list the sections."""
        _set_display_format(ctx, display, ("json", "yaml"))
        wrapped = _handle_stage_result(cmd_show)
        wrapped(section)

    return app
