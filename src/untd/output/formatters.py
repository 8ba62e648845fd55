"""Human/JSON output helpers.

Human mode prints only the rendered date so the output can be piped.
``--json`` prints the whole ServiceResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from untd.output.console import styled_line

if TYPE_CHECKING:
    from untd.services.result import ServiceResult

COPIED_MESSAGE = "Copied to clipboard!"


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display."""
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        return str(result.data.get("output", ""))
    return result.error.message if result.error else "Unknown error"


def format_copy_notice(result: ServiceResult) -> str:
    """Confirmation or warning line for a clipboard result."""
    if result.ok:
        return styled_line(COPIED_MESSAGE, "untd.ok")
    detail = result.error.message if result.error else "unknown error"
    return styled_line(f"WARNING: Failed to copy to clipboard: {detail}", "untd.warning")
