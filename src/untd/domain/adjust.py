"""Relative time adjustments such as ``-30s`` or ``2d``.

An adjustment is an optional sign, a run of decimal digits, and a unit
suffix from :class:`~untd.domain.types.TimeUnit`.  Digits and unit
characters are collected independently, so ``1s0`` reads as ``10s``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from untd.domain.types import TimeUnit

# Magnitudes are signed 64-bit on the wire.
MAX_MAGNITUDE = 2**63 - 1

VALID_UNITS = ", ".join(unit.value for unit in TimeUnit)


class AdjustmentError(ValueError):
    """Raised when an adjustment string cannot be parsed.

    Attributes:
        code: Stable identifier for the failure
            (``EMPTY``, ``MISSING_NUMBER``, ``INVALID_NUMBER``,
            ``MISSING_UNIT``, ``UNKNOWN_UNIT``).
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class Duration:
    """A signed amount of a single time unit."""

    amount: int
    unit: TimeUnit

    @property
    def seconds(self) -> int:
        """Total signed length in seconds."""
        return self.amount * self.unit.seconds

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def __str__(self) -> str:
        return f"{self.amount}{self.unit.value}"


def parse_adjustment(value: str) -> Duration:
    """Parse *value* into a signed :class:`Duration`.

    Raises:
        AdjustmentError: If the string is empty, has no digits, has a
            magnitude outside the signed 64-bit range, or has a missing
            or unknown unit.
    """
    if not value:
        raise AdjustmentError("EMPTY", "empty adjustment string")

    negative = False
    body = value
    if body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]

    digits: list[str] = []
    unit_chars: list[str] = []
    for ch in body:
        if "0" <= ch <= "9":
            digits.append(ch)
        else:
            unit_chars.append(ch)

    if not digits:
        raise AdjustmentError("MISSING_NUMBER", f"missing numeric part in {value!r}")

    magnitude = int("".join(digits))
    if magnitude > MAX_MAGNITUDE:
        raise AdjustmentError("INVALID_NUMBER", f"invalid number in {value!r}")

    unit_token = "".join(unit_chars)
    if not unit_token:
        raise AdjustmentError(
            "MISSING_UNIT",
            f"missing time unit in {value!r} (valid units: {VALID_UNITS})",
        )
    try:
        unit = TimeUnit(unit_token)
    except ValueError:
        raise AdjustmentError(
            "UNKNOWN_UNIT",
            f"unknown time unit {unit_token!r} (valid units: {VALID_UNITS})",
        ) from None

    return Duration(amount=-magnitude if negative else magnitude, unit=unit)
