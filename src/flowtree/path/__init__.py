"""Path subpackage: dot-separated addressing into flow documents.

Re-exports the public API for the path module:
- PathSegment / SegmentType: parsed, typed path segments
- parse_path / format_path: string <-> segment conversion
- resolve / update / remove_at: the generic walker over dicts and lists
- ROOT_PATH: the sentinel addressing the document root
"""

from flowtree.path.resolver import remove_at, resolve, update
from flowtree.path.segments import (
    PATH_SEPARATOR,
    ROOT_PATH,
    PathSegment,
    SegmentType,
    configure_path_cache,
    format_path,
    is_index,
    parse_path,
    path_cache_info,
)

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
    "remove_at",
    "resolve",
    "update",
]
