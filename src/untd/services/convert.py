"""ConvertService — timestamp to formatted, zoned, adjusted string."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime

from untd.domain.adjust import AdjustmentError, Duration, parse_adjustment
from untd.domain.formats import render, resolve_format
from untd.domain.types import TimezoneName
from untd.services.result import ServiceResult

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def current_timestamp() -> int:
    """Current instant as whole epoch seconds."""
    return int(datetime.now(UTC).timestamp())


def parse_timestamp(value: str | int) -> int | None:
    """Parse an epoch-seconds value, or None if it is not a 64-bit integer."""
    if isinstance(value, int):
        ts = value
    else:
        if not _TIMESTAMP_RE.fullmatch(value):
            return None
        ts = int(value)
    if not _INT64_MIN <= ts <= _INT64_MAX:
        return None
    return ts


class ConvertService:
    """Resolve an instant, shift it, zone it, and render it.

    Args:
        now: Source of the current instant, used when no timestamp is given.
    """

    def __init__(self, now: Callable[[], int] = current_timestamp) -> None:
        self._now = now

    def convert(
        self,
        timestamp: str | int | None = None,
        *,
        timezone: str = TimezoneName.JST,
        fmt: str | None = None,
        adjust: str | None = None,
    ) -> ServiceResult:
        op = "convert"

        if timestamp is None:
            instant = self._now()
        else:
            parsed = parse_timestamp(timestamp)
            if parsed is None:
                return ServiceResult.failure(
                    op, "INVALID_TIMESTAMP", "Invalid timestamp", value=str(timestamp)
                )
            instant = parsed

        try:
            tz = TimezoneName(timezone)
        except ValueError:
            return ServiceResult.failure(
                op,
                "INVALID_TIMEZONE",
                "Invalid timezone",
                value=timezone,
                valid=[name.value for name in TimezoneName],
            )

        duration: Duration | None = None
        if adjust is not None:
            try:
                duration = parse_adjustment(adjust)
            except AdjustmentError as exc:
                return ServiceResult.failure(
                    op,
                    "INVALID_ADJUSTMENT",
                    f"Invalid adjustment: {exc.message}",
                    value=adjust,
                    cause=exc.code,
                )

        try:
            moment = datetime.fromtimestamp(instant, tz=UTC)
            if duration is not None:
                moment += duration.to_timedelta()
            moment = moment.astimezone(tz.zone)
        except (OverflowError, OSError, ValueError):
            logger.debug("Timestamp %d out of range", instant, exc_info=True)
            return ServiceResult.failure(
                op, "INVALID_TIMESTAMP", "Invalid timestamp", value=str(instant)
            )
        instant = int(moment.timestamp())

        try:
            output = render(moment, fmt)
        except UnicodeEncodeError:
            # strftime cannot encode surrogate-escaped argv bytes.
            return ServiceResult.failure(op, "INVALID_FORMAT", "Invalid format")
        logger.debug("Rendered %d in %s as %r", instant, tz.value, output)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "output": output,
                "timestamp": instant,
                "timezone": tz.value,
                "format": resolve_format(fmt),
                "adjust": str(duration) if duration is not None else None,
            },
        )
