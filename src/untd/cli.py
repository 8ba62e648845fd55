"""The ``untd`` command: Unix timestamp to date."""

from __future__ import annotations

import click
from click.core import ParameterSource

from untd import __version__
from untd.commands._base import UntdCommand
from untd.commands._context import AppContext
from untd.config.settings import UntdSettings


@click.command(
    cls=UntdCommand,
    examples="""\
  untd
  untd 1700000000
  untd 0 -z UTC -f iso
  untd -f jpwd -a -1d
  untd -f '%H:%M:%S' --no-copy
  untd --json 1700000000""",
)
@click.version_option(version=__version__, prog_name="untd")
@click.argument("timestamp", required=False)
@click.option("-z", "--timezone", default=None, help="Timezone: UTC or JST.  [default: JST]")
@click.option(
    "--copy/--no-copy",
    "-c/-C",
    "copy",
    default=True,
    show_default=True,
    help="Copy output to clipboard.",
)
@click.option(
    "-f",
    "--format",
    "fmt",
    default=None,
    help="Output format: iso, jp, jpwd, jphm, jphms, or a strftime pattern.",
)
@click.option("-a", "--adjust", default=None, help="Relative offset such as -30s, 2h, 1w.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output.")
@click.option("--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    timestamp: str | None,
    timezone: str | None,
    copy: bool,
    fmt: str | None,
    adjust: str | None,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Convert a Unix TIMESTAMP (default: now) to a date and copy it."""
    from untd.services.clipboard import copy_to_clipboard
    from untd.services.convert import ConvertService

    copy_given = ctx.get_parameter_source("copy") is not ParameterSource.DEFAULT
    settings = UntdSettings.from_cli(
        config_path=config_path,
        timezone=timezone,
        clipboard=copy if copy_given else None,
        format=fmt,
        json_output=json_output or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    app = AppContext(settings)

    result = ConvertService().convert(
        timestamp,
        timezone=settings.timezone,
        fmt=settings.format,
        adjust=adjust,
    )
    app.emit(result)

    if settings.clipboard:
        app.emit_copy(copy_to_clipboard(result.data["output"]))
