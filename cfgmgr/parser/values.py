from __future__ import annotations

from typing import Optional

from .types import ConfigValue


def parse_float(token: str) -> Optional[float]:
    """
    Parse a trimmed token as a 64-bit float.

    Accepts the usual decimal and scientific forms ("3.1415", "1e-3",
    "-2.5E10", "inf", "nan"). Returns None when the token is not a number.
    """
    token = token.strip()
    # float() also takes digit separators ("1_000") and non-ASCII digits
    if not token or "_" in token or not token.isascii():
        return None
    try:
        return float(token)
    except ValueError:
        return None


def apply_segment(value: ConfigValue, segment: str) -> None:
    """
    Fold one value segment (text between two '=' or after the last one)
    into `value`.

    A single token is pushed as a number or, failing that, becomes the
    string. A comma separated list is appended number by number; the first
    token that is not a number wipes every number collected so far and the
    whole segment is kept as the string instead.
    """
    segment = segment.strip()

    if "," not in segment:
        number = parse_float(segment)
        if number is None:
            value.string = segment
        else:
            value.numeric.append(number)
        return

    for subitem in segment.split(","):
        number = parse_float(subitem)
        if number is None:
            value.numeric = []
            value.string = segment
            break
        value.numeric.append(number)
