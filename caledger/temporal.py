"""Resolve date/time tokens into concrete instants.

Two token shapes are understood:

- Absolute: ``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM`` (local time, missing
  time components default to midnight).
- Relative: an optional sign (``+`` default, ``-``) followed by one or more
  ``<integer><unit>`` pairs, e.g. ``-1Y``, ``+3M``, ``-2W4D``, ``+1h30m``.

Relative steps are applied one after another against the running instant,
in the order they appear, so ``+1M1D`` and ``+1D1M`` can differ near month
ends. Calendar arithmetic (variable month/year lengths) is delegated to
``dateutil.relativedelta``.
"""

import re
from datetime import datetime

from dateutil.relativedelta import relativedelta


# Unit character -> (relativedelta field, multiplier)
UNITS: dict[str, tuple[str, int]] = {
    "Y": ("years", 1),
    "Q": ("months", 3),
    "M": ("months", 1),
    "W": ("days", 7),
    "D": ("days", 1),
    "h": ("hours", 1),
    "m": ("minutes", 1),
    # Lowercase day units; lowercase "m" is always minutes
    "y": ("years", 1),
    "q": ("months", 3),
    "w": ("days", 7),
    "d": ("days", 1),
}

_ABSOLUTE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}( \d{2}:\d{2})?")
_ABSOLUTE_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d")


def parse_absolute(token: str) -> datetime | None:
    """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM``, else None."""
    if not _ABSOLUTE_SHAPE.fullmatch(token):
        return None
    for fmt in _ABSOLUTE_FORMATS:
        try:
            return datetime.strptime(token, fmt)
        except ValueError:
            continue
    return None


def scan_relative(text: str) -> list[tuple[int, str]]:
    """Extract every ``<digits><unit>`` pair from ``text``, left to right.

    Digits must be immediately followed by a unit character to count. Any
    other character (including digits without a unit) is skipped.
    """
    pairs = []
    digits = ""
    for char in text:
        if char.isdigit():
            digits += char
            continue
        if digits and char in UNITS:
            pairs.append((int(digits), char))
        digits = ""
    return pairs


def parse_relative(token: str, reference: datetime) -> datetime | None:
    """Apply a relative token to ``reference``.

    Returns None if the token has no unit pairs or the result falls outside
    the range ``datetime`` can represent.
    """
    if not token:
        return None

    sign = 1
    body = token
    if body[0] == "-":
        sign = -1
        body = body[1:]
    elif body[0] == "+":
        body = body[1:]

    pairs = scan_relative(body)
    if not pairs:
        return None

    result = reference
    try:
        for value, unit in pairs:
            field, multiplier = UNITS[unit]
            result = result + relativedelta(**{field: sign * value * multiplier})
    except (ValueError, OverflowError):
        return None
    return result


def resolve(token: str | None, reference: datetime | None = None) -> datetime | None:
    """Resolve a token to an instant, or None if it is not a valid token.

    Args:
        token: Absolute or relative token.
        reference: Instant that relative tokens are applied to (default: now).

    Returns:
        The resolved naive local datetime, or None.
    """
    if token is None:
        return None
    token = token.strip()
    if not token:
        return None

    absolute = parse_absolute(token)
    if absolute is not None:
        return absolute

    if reference is None:
        reference = datetime.now()
    return parse_relative(token, reference)


def default_range(now: datetime | None = None) -> tuple[datetime, datetime]:
    """One year before and one year after ``now``."""
    if now is None:
        now = datetime.now()
    return now - relativedelta(years=1), now + relativedelta(years=1)
