from __future__ import annotations
from numbers import Number
from typing import Any, Dict, List, Tuple, TypeVar, Union

V = TypeVar("V")

_INT32 = 1 << 32


def _is_number(v: Any) -> bool:
    return isinstance(v, Number) and not isinstance(v, bool)


def top_items(record: Dict[str, V], n: int = 10) -> List[Tuple[str, V]]:
    """Pick the top N (key, value) pairs of a frequency table.

    All values numeric -> descending by value (ties keep insertion order).
    Otherwise -> ascending by key. One rule per call, never mixed.
    """
    if n <= 0 or not record:
        return []

    items = list(record.items())
    if all(_is_number(v) for _, v in items):
        items.sort(key=lambda kv: kv[1], reverse=True)
    else:
        items.sort(key=lambda kv: kv[0])
    return items[:n]


def _to_int32(x: int) -> int:
    x %= _INT32
    return x - _INT32 if x >= (1 << 31) else x


def string_hash(label: str) -> int:
    """Classic `hash = c + ((hash << 5) - hash)` over UTF-16 code units, signed 32-bit."""
    h = 0
    data = label.encode("utf-16-le")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = _to_int32(code + _to_int32(h << 5) - h)
    return h


def _format_opacity(opacity: Union[int, float]) -> str:
    # 1 -> "1", 0.7 -> "0.7" (same text as a JS number)
    if isinstance(opacity, float) and opacity.is_integer():
        return str(int(opacity))
    return str(opacity)


def theme_color(label: str, opacity: Union[int, float] = 1) -> str:
    """Deterministic rgba color for a theme / word label.

    The same label always gives the same color, in every run and in the
    web client, so chart colors stay stable for existing users.
    """
    h = string_hash(label)
    r = (h & 0xFF0000) >> 16
    g = (h & 0x00FF00) >> 8
    b = h & 0x0000FF
    return f"rgba({r}, {g}, {b}, {_format_opacity(opacity)})"
