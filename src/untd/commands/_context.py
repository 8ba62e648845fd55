"""AppContext — settings, logging, and result emission for one invocation.

Centralizes stdout/stderr routing and exit codes so the command body only
wires services together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from untd.config.logging import configure_logging
from untd.output.formatters import format_copy_notice, format_result

if TYPE_CHECKING:
    from untd.config.settings import UntdSettings
    from untd.services.result import ServiceResult


class AppContext:
    """Shared state for a single ``untd`` run."""

    def __init__(self, settings: UntdSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes the message to stdout, exits with code 1.
        """
        click.echo(format_result(result, json_output=self.settings.json_output))
        if not result.ok:
            raise SystemExit(1)

    def emit_copy(self, result: ServiceResult) -> None:
        """Report a clipboard result. Never changes the exit code.

        The confirmation goes to stdout in human mode only; a failure is
        always a warning on stderr.
        """
        if result.ok:
            if not self.settings.json_output:
                click.echo(format_copy_notice(result))
        else:
            click.echo(format_copy_notice(result), err=True)
