"""Small formatting and URI helpers."""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Iterable, TypeVar, Union

T = TypeVar("T")


def format_duration(seconds: Union[int, float, timedelta]) -> str:
    """Format a duration as ``minutes:seconds``, seconds padded to two digits."""
    if isinstance(seconds, timedelta):
        seconds = seconds.total_seconds()
    # truncate toward zero, keeping the sign on both parts
    secs = int(seconds)
    minutes = abs(secs) // 60 * (-1 if secs < 0 else 1)
    remainder = secs - minutes * 60
    return f"{minutes}:{remainder:02}"


def map_join(items: Iterable[T], func: Callable[[T], str], sep: str) -> str:
    """Join mapped items with ``sep``; empty leading parts add no separator."""
    result = ""
    for item in items:
        part = func(item)
        result = result + part if not result else result + sep + part
    return result


def parse_uri(uri: str) -> str:
    """Turn a ``spotify:user:{user}:{type}:{id}`` URI into ``spotify:{type}:{id}``."""
    parts = uri.split(":")
    if len(parts) == 5:
        return ":".join((parts[0], parts[3], parts[4]))
    return uri