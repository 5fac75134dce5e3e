"""Parsing of path parameters."""

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT32_MAX_DIGITS = len(str(INT32_MAX))

# Segments longer than this are shortened in error messages
MAX_ECHOED_LENGTH = 32

_SIGNED_INTEGER = re.compile(r"[+-]?[0-9]+")


def _echo(raw: str) -> str:
    if len(raw) <= MAX_ECHOED_LENGTH:
        return raw
    return f"{raw[:MAX_ECHOED_LENGTH]}..."


def parse_stop_id(raw: str) -> int:
    """Parse a stop ID path segment as a signed 32-bit integer.

    Only an optional sign followed by ASCII digits is accepted; whitespace and
    underscores that ``int()`` would otherwise tolerate are rejected.

    Raises:
        ValueError: If the segment is not an integer or is out of range.
    """
    if _SIGNED_INTEGER.fullmatch(raw) is None:
        raise ValueError(f"Cannot parse `{_echo(raw)}` to a 32-bit signed integer")

    out_of_range = ValueError(
        f"Cannot parse `{_echo(raw)}` to a 32-bit signed integer: number out of range"
    )
    # Check the length first so huge segments never reach int()
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > INT32_MAX_DIGITS:
        raise out_of_range

    value = -int(digits) if raw.startswith("-") else int(digits)
    if not INT32_MIN <= value <= INT32_MAX:
        raise out_of_range
    return value
