"""Generic walker for reading and editing nested dict/list documents by path.

All three operations share a single walk over parsed PathSegment sequences:

- ``resolve``   reads the value at a path.
- ``update``    replaces the value at a path (or merges into the root).
- ``remove_at`` deletes a list element addressed either by its index
                (``actions.<i>``) or by its kind (``actions.<i>.<kind>``).

None of them raise for a malformed, stale or out-of-range path.  Readers
return a default, mutators leave the document untouched and return False.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from flowtree.path.segments import ROOT_PATH, PathSegment, parse_path

__all__ = ["remove_at", "resolve", "update"]

logger = logging.getLogger(__name__)

# Distinguishes "walked off the document" from a stored JSON null.
_MISSING: Any = object()


def _step(current: Any, segment: PathSegment) -> Any:
    """Advance one segment, returning _MISSING when the step is impossible."""
    # CRITICAL: str is a Sequence too; only real lists may be indexed.
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not segment.is_index:
            return _MISSING
        index = int(segment.value)
        if index >= len(current):
            return _MISSING
        return current[index]

    if isinstance(current, Mapping):
        return current.get(str(segment.value), _MISSING)

    return _MISSING


def _walk(root: Any, segments: Sequence[PathSegment]) -> Any:
    current = root
    for segment in segments:
        current = _step(current, segment)
        if current is _MISSING:
            return _MISSING
    return current


def resolve(root: Any, path: str | None, default: Any = None) -> Any:
    """Return the value stored at ``path`` inside ``root``.

    Args:
        root:    The document (any nesting of dicts and lists).
        path:    Dot-separated path.  ``None`` and ``""`` resolve to ``default``.
        default: Returned when any segment fails to resolve.

    Returns:
        The addressed value, or ``default``.
    """
    segments = parse_path(path)
    if not segments:
        return default
    value = _walk(root, segments)
    return default if value is _MISSING else value


def update(
    root: MutableMapping[str, Any],
    path: str | None,
    value: Any,
    *,
    root_path: str = ROOT_PATH,
) -> bool:
    """Replace the value at ``path`` in place.

    The root path merges a mapping ``value`` into the document's top-level
    fields, leaving fields that ``value`` does not mention untouched.  Any other
    path replaces the addressed list slot or dict entry.  A missing dict entry
    is created, except inside a list element: a list element is an action
    wrapper ``{kind: params}`` and a new key there would be a second kind, so
    a stale ``actions.<i>.<kind>`` path is a no-op.

    Args:
        root:      The document to edit.
        path:      Target path, or ``root_path`` for the document root.
        value:     New value.
        root_path: Sentinel addressing the root.  Defaults to ``ROOT_PATH``.

    Returns:
        True when the document was changed, False for a no-op.
    """
    if not path:
        logger.debug("Edit noop: update without path")
        return False

    if path == root_path:
        if not isinstance(value, Mapping):
            logger.debug("Edit noop: root update with non-mapping value")
            return False
        root.update(value)
        logger.debug("Edit OK: update root fields=%s", list(value))
        return True

    segments = parse_path(path)
    parent = _walk(root, segments[:-1])
    last = segments[-1]

    if isinstance(parent, MutableSequence):
        if not last.is_index or int(last.value) >= len(parent):
            logger.debug("Edit noop: update index out of range path=%s", path)
            return False
        parent[int(last.value)] = value
    elif isinstance(parent, MutableMapping):
        key = str(last.value)
        if key not in parent and len(segments) >= 2 and segments[-2].is_index:
            logger.debug("Edit noop: update stale action kind path=%s", path)
            return False
        parent[key] = value
    else:
        logger.debug("Edit noop: update unresolvable path=%s", path)
        return False

    logger.debug("Edit OK: update path=%s", path)
    return True


def _removal_target(
    segments: tuple[PathSegment, ...],
) -> tuple[tuple[PathSegment, ...], int] | None:
    """Split a removal path into (container segments, index).

    ``actions.1`` and ``actions.1.iterate`` both yield ``(actions, 1)``.
    """
    if segments and segments[-1].is_index:
        return segments[:-1], int(segments[-1].value)
    if len(segments) >= 2 and segments[-2].is_index:
        return segments[:-2], int(segments[-2].value)
    return None


def remove_at(root: Any, path: str | None) -> bool:
    """Delete the list element addressed by ``path`` in place.

    Two address shapes are equivalent:

    - ``"actions.<i>"``        : the path ends in the element's index.
    - ``"actions.<i>.<kind>"`` : the path ends in the element's kind; the
                                 trailing kind is ignored.

    The containing list is found by walking every segment before the index,
    so elements nested inside containers at any depth are removed the same
    way.  Removing a container drops its whole nested subtree with it.

    Args:
        root: The document to edit.
        path: Removal path.  ``None`` and ``""`` are no-ops.

    Returns:
        True when an element was removed, False for a no-op.
    """
    target = _removal_target(parse_path(path))
    if target is None:
        logger.debug("Edit noop: remove unsupported path=%r", path)
        return False

    container_segments, index = target
    container = _walk(root, container_segments)

    if not isinstance(container, MutableSequence):
        logger.debug("Edit noop: remove container not a list path=%s", path)
        return False
    if index >= len(container):
        logger.debug("Edit noop: remove index out of range path=%s", path)
        return False

    del container[index]
    logger.debug("Edit OK: remove path=%s", path)
    return True
