"""Action kind extraction from raw action records and from node paths."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flowtree.path.segments import parse_path

__all__ = ["extract_action_name"]


def extract_action_name(node: Any) -> str | None:
    """Return the action kind for a raw action record or a node path.

    - A mapping with exactly one key yields that key:
      ``{"print": {...}}`` -> ``"print"``.  Zero or several keys are ambiguous
      and yield None.
    - A path string yields its trailing non-index segment:
      ``"actions.1.iterate.actions.0.print"`` -> ``"print"``.

    Example::

        extract_action_name({"delay": {"milliseconds": 5}})   # "delay"
        extract_action_name({"a": 1, "b": 2})                 # None
        extract_action_name("actions.0.print")                # "print"
    """
    if isinstance(node, str):
        for segment in reversed(parse_path(node)):
            if not segment.is_index:
                return str(segment.value)
        return None

    if isinstance(node, Mapping) and len(node) == 1:
        (key,) = node
        return key if isinstance(key, str) else None

    return None
