"""PathSegment dataclass and SegmentType StrEnum for dot-separated node paths.

A path such as ``"actions.1.iterate.actions.0.print"`` addresses a node inside
a flow document.  ``parse_path`` splits it into typed segments once so that the
resolver walks an explicit sequence instead of re-sniffing strings:

- Segments made only of ASCII digits are INDEX segments (list positions).
- Every other segment is a FIELD segment (dict key / action kind).

Parsed paths are memoised in a process-wide ``LRUCache``: the visualization
layer asks for the same handful of paths on every render pass.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto

from cachetools import LRUCache

__all__ = [
    "PATH_SEPARATOR",
    "ROOT_PATH",
    "PathSegment",
    "SegmentType",
    "configure_path_cache",
    "format_path",
    "is_index",
    "parse_path",
    "path_cache_info",
]

# Reserved path addressing the document root.  Distinct from "" / None,
# which mean "no path supplied".
ROOT_PATH = "#"

PATH_SEPARATOR = "."

# ASCII digits only; str.isdigit() also matches Unicode digits.
_INDEX = re.compile(r"[0-9]+")

_DEFAULT_CACHE_SIZE = 1024


class SegmentType(StrEnum):
    """The two kinds of path segment.

    - INDEX -> "index" : position inside a list
    - FIELD -> "field" : key inside a dict (field name or action kind)
    """

    INDEX = auto()
    FIELD = auto()


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One parsed segment of a dot-separated path.

    Attributes:
        type:  INDEX or FIELD.
        value: ``int`` for INDEX segments, ``str`` for FIELD segments.
    """

    type: SegmentType
    value: int | str

    @property
    def is_index(self) -> bool:
        return self.type == SegmentType.INDEX

    def __str__(self) -> str:
        return str(self.value)


def is_index(segment: str) -> bool:
    """Return True when ``segment`` is a non-negative base-10 integer."""
    return _INDEX.fullmatch(segment) is not None


def _parse_segment(raw: str) -> PathSegment:
    if is_index(raw):
        return PathSegment(SegmentType.INDEX, int(raw))
    return PathSegment(SegmentType.FIELD, raw)


_cache: LRUCache[str, tuple[PathSegment, ...]] = LRUCache(maxsize=_DEFAULT_CACHE_SIZE)


def parse_path(path: str | None) -> tuple[PathSegment, ...]:
    """Split a dot-separated path into typed segments.

    Args:
        path: Path string such as ``"actions.0.print"``.  ``None`` and ``""``
              mean "no path" and produce an empty tuple.

    Returns:
        An immutable tuple of PathSegment, safe to share between callers.
    """
    if not path:
        return ()

    cached = _cache.get(path)
    if cached is not None:
        return cached

    segments = tuple(_parse_segment(raw) for raw in path.split(PATH_SEPARATOR))
    _cache[path] = segments
    return segments


def format_path(segments: Iterable[PathSegment | str | int]) -> str:
    """Join segments back into a dot-separated path string."""
    return PATH_SEPARATOR.join(str(segment) for segment in segments)


def configure_path_cache(maxsize: int) -> None:
    """Replace the parse cache with an empty one holding at most ``maxsize`` paths.

    Raises:
        ValueError: If ``maxsize`` is smaller than 1.
    """
    global _cache
    if maxsize < 1:
        msg = f"maxsize must be >= 1, got {maxsize}"
        raise ValueError(msg)
    _cache = LRUCache(maxsize=maxsize)


def path_cache_info() -> tuple[int, int]:
    """Return ``(currsize, maxsize)`` of the parse cache."""
    return int(_cache.currsize), int(_cache.maxsize)
