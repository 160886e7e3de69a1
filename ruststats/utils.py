"""History persistence and sparkline rendering shared by the status commands."""

from __future__ import annotations

import json
import math
import os
from collections.abc import Iterable, Sequence

SPARK_CHARS = ("▁", "▂", "▃", "▄", "▅", "▆", "▇")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def read_history(path: str | os.PathLike) -> list[float]:
    """Return the stored history, or an empty list if it is missing or unreadable."""
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return []
    if not isinstance(data, list) or not all(_is_number(item) for item in data):
        return []
    return [float(item) for item in data]


def write_history(path: str | os.PathLike, hist: Iterable[float]) -> None:
    """Replace the stored history with ``hist``; failures to write are ignored."""
    payload = json.dumps([float(value) for value in hist], separators=(",", ":"))
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(payload)
    except OSError:
        pass


def update_history(path: str | os.PathLike, value: float, max_len: int) -> list[float]:
    """Append ``value`` to the stored history, keep the newest ``max_len`` entries and save."""
    history = read_history(path)
    history.append(float(value))
    if len(history) > max_len:
        history = history[len(history) - max_len:]
    write_history(path, history)
    return history


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, math.floor(value + 0.5))


def make_sparkline(data: Sequence[float]) -> str:
    """Render ``data`` as a string of block characters scaled between its min and max."""
    if not data:
        return ""
    finite = [value for value in data if not math.isnan(value)]
    low = min(finite, default=math.inf)
    high = max(finite, default=-math.inf)
    span = high - low
    if not abs(span) >= 2.220446049250313e-16:
        span = 1.0
    top = len(SPARK_CHARS) - 1
    chars = []
    for value in data:
        index = _round_half_away((value - low) / span * top)
        chars.append(SPARK_CHARS[min(index, top)])
    return "".join(chars)