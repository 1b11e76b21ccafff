"""Baseball innings notation, where ``.1`` and ``.2`` mean one and two outs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional


_FRACTION_TOLERANCE = 1e-6


@dataclass(frozen=True)
class IpValue:
    raw: float
    innings: float
    outs: int
    valid: bool


def normalize_ip(raw: Optional[float]) -> IpValue:
    """Convert a raw innings figure such as ``182.1`` to decimal innings.

    Only ``.0``, ``.1`` and ``.2`` are legal fractional parts. Anything else,
    including negative or non-finite input, yields ``valid=False`` and zero
    innings rather than raising.
    """

    if raw is None or not math.isfinite(raw) or raw < 0:
        return IpValue(raw=raw if raw is not None else 0.0, innings=0.0, outs=0, valid=False)

    whole = math.floor(raw)
    fraction = raw - whole
    for digit in (0, 1, 2):
        if abs(fraction - digit / 10) < _FRACTION_TOLERANCE:
            outs = int(whole) * 3 + digit
            return IpValue(raw=raw, innings=outs / 3, outs=outs, valid=True)
    return IpValue(raw=raw, innings=0.0, outs=0, valid=False)


def to_baseball_notation(innings: float) -> float:
    """Inverse of :func:`normalize_ip`, rounding to the nearest out."""

    if not math.isfinite(innings) or innings <= 0:
        return 0.0
    outs = round(innings * 3)
    whole, remainder = divmod(outs, 3)
    return whole + remainder / 10


def is_valid_baseball_ip(raw: Optional[float]) -> bool:
    return normalize_ip(raw).valid


def uses_baseball_notation(values: Iterable[Optional[float]]) -> bool:
    """Decide whether a whole staff's IP figures read as baseball notation.

    True only when there is at least one figure and every one of them has a
    fractional part of ``.0``, ``.1`` or ``.2``.
    """

    seen = False
    for value in values:
        seen = True
        if not is_valid_baseball_ip(value):
            return False
    return seen


def innings_value(raw: Optional[float], use_baseball_ip: bool) -> float:
    """Decimal innings for ``raw`` under the group-level notation flag."""

    if use_baseball_ip:
        return normalize_ip(raw).innings
    if raw is None or not math.isfinite(raw):
        return 0.0
    return float(raw)
