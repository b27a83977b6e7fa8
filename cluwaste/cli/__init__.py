"""CLI - main entry points."""

import sys

USAGE = """\
Usage: cluwaste [-s] [<rootpath> [<filespec>]]
  shows disk space wasted in unused last-cluster allocations
  arguments:  <rootpath> Optional path to start the enumeration. Default is current drive root
              <filespec> Optional file filter, e.g. *.jpg. Default is *
              [-s]       Single-threaded. Slower; to see how much multiple cores help.
  examples:   cluwaste /mnt/music
              cluwaste /mnt/music/albums '*.flac'"""

CONFIG_USAGE = "Usage: cluwaste-config [--display json|yaml] [SECTION]"


def _run(app, argv: list[str], prog_name: str, usage: str) -> int:
    """Invoke a Typer app without letting Click exit the process.

    Usage errors exit 1, as do failed commands.
    """
    import click
    import typer

    try:
        result = app(argv, prog_name=prog_name, standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        typer.echo(usage, err=True)
        return 1
    except click.exceptions.Abort:
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return result if isinstance(result, int) else 0


def main(argv: list[str] | None = None) -> int:
    """Scan CLI entry point."""
    from cluwaste.cli._configure_logging import _configure_logging
    from cluwaste.cli._create_app import _create_app
    from cluwaste.cli._normalize_argv import _normalize_argv

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from cluwaste.utils.get_package_version import get_package_version

        print(f"cluwaste {get_package_version()}")
        return 0

    _configure_logging()
    return _run(_create_app(), _normalize_argv(argv), "cluwaste", USAGE)


def config_main(argv: list[str] | None = None) -> int:
    """Config CLI entry point."""
    from cluwaste.cli._create_app import _create_config_app

    if argv is None:
        argv = sys.argv[1:]
    return _run(_create_config_app(), argv, "cluwaste-config", CONFIG_USAGE)
