"""Best-effort clipboard write.

INVARIANT: Clipboard failures are reported in the result, never raised.
"""

from __future__ import annotations

import logging

import pyperclip

from untd.services.result import ServiceResult

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> ServiceResult:
    """Copy *text* to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        logger.debug("Clipboard write failed", exc_info=True)
        return ServiceResult.failure("copy", "CLIPBOARD_UNAVAILABLE", str(exc))
    return ServiceResult(ok=True, op="copy", data={"chars": len(text)})
