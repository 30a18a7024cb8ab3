"""Conversion between network (big-endian) and host byte order."""

from __future__ import annotations

import struct
import sys
from typing import Union

Number = Union[int, float]

_CODES = frozenset("bBhHiIlLqQefd")


def _reorder(value: Number, fmt: str) -> Number:
    if not isinstance(fmt, str) or len(fmt) != 1 or fmt not in _CODES:
        raise ValueError(f"unsupported numeric format {fmt!r}")
    if sys.byteorder == "big":
        return value
    layout = struct.Struct("=" + fmt)
    try:
        raw = layout.pack(value)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc
    return layout.unpack(raw[::-1])[0]


def network_to_host_order(value: Number, fmt: str) -> Number:
    """Reinterpret a value read in network order as a host-order value of type ``fmt``."""
    return _reorder(value, fmt)


def host_to_network_order(value: Number, fmt: str) -> Number:
    """Reinterpret a host-order value of type ``fmt`` in network order."""
    return _reorder(value, fmt)