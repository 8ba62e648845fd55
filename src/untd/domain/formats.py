"""Output pattern resolution and Japanese weekday substitution.

``strftime`` has no localized weekday hook, so the ``jpwd`` pattern emits
the numeric weekday (``%w``) in parentheses and :func:`substitute_weekday`
swaps it for the Japanese name after rendering.
"""

from __future__ import annotations

from datetime import datetime

from untd.domain.types import FormatKeyword

DEFAULT_PATTERN = "%Y-%m-%d"

_JP_DATE = "%Y年%m月%d日"

FORMAT_PATTERNS: dict[FormatKeyword, str] = {
    FormatKeyword.DEFAULT: DEFAULT_PATTERN,
    FormatKeyword.ISO: "%Y-%m-%dT%H:%M:%S%z",
    FormatKeyword.JP: _JP_DATE,
    FormatKeyword.JPWD: f"{_JP_DATE}(%w)",
    FormatKeyword.JPHM: f"{_JP_DATE} %H時%M分",
    FormatKeyword.JPHMS: f"{_JP_DATE} %H時%M分%S秒",
}

# Indexed by ``%w``: 0 is Sunday.
WEEKDAY_NAMES: tuple[str, ...] = ("日", "月", "火", "水", "木", "金", "土")

UNKNOWN_WEEKDAY = "?"


def resolve_format(keyword: str | None) -> str:
    """Return the strftime pattern for *keyword*.

    ``None`` selects the date-only default.  Anything that is not a known
    :class:`FormatKeyword` is treated as a custom pattern and returned as is.
    """
    if keyword is None:
        return DEFAULT_PATTERN
    try:
        return FORMAT_PATTERNS[FormatKeyword(keyword)]
    except ValueError:
        return keyword


def weekday_name(code: str) -> str:
    """Map a ``%w`` digit to its Japanese weekday name."""
    if len(code) == 1 and "0" <= code <= "6":
        return WEEKDAY_NAMES[int(code)]
    return UNKNOWN_WEEKDAY


def substitute_weekday(text: str) -> str:
    """Replace every ``(<digit>)`` in *text* with the weekday name.

    Single pass over a three-character window; the parentheses around a
    substituted digit are dropped.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        if (
            text[i] == "("
            and i + 2 < n
            and "0" <= text[i + 1] <= "9"
            and text[i + 2] == ")"
        ):
            out.append(weekday_name(text[i + 1]))
            i += 3
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


def render(moment: datetime, format_spec: str | None) -> str:
    """Format *moment* with the pattern resolved from *format_spec*."""
    rendered = moment.strftime(resolve_format(format_spec))
    if format_spec == FormatKeyword.JPWD:
        rendered = substitute_weekday(rendered)
    return rendered
