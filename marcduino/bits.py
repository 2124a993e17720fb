"""Single-bit masks and binary byte literals of the form ``B0101``."""

from __future__ import annotations

import re

_BINARY_NAME = re.compile(r"B([01]{1,8})")


def bit(n: int) -> int:
    """Return the mask with only bit ``n`` set, for bits 0 to 31."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("bit number must be an int")
    if not 0 <= n <= 31:
        raise ValueError(f"bit number must be between 0 and 31, got {n}")
    return 1 << n


def binary_literal(name: str) -> int:
    """Return the value of a name such as ``B00101101``.

    The name is ``B`` followed by one to eight binary digits.
    """
    match = _BINARY_NAME.fullmatch(name)
    if match is None:
        raise ValueError(f"not a binary literal: {name!r}")
    return int(match.group(1), 2)