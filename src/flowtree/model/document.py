"""Flow document predicate and default document factory.

A flow document is the persisted JSON shape::

    {"name": "sample-test", "description": "...", "actions": [{"print": {...}}]}
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any

__all__ = ["default_document", "generate_name", "is_flow_document"]


def is_flow_document(value: Any) -> bool:
    """Return True if ``value`` looks like a flow document (has name and actions)."""
    return isinstance(value, Mapping) and "name" in value and "actions" in value


def generate_name(prefix: str = "test") -> str:
    """Return a random human-friendly document name such as ``"test-4821"``."""
    return f"{prefix}-{random.randint(1000, 9999)}"  # noqa: S311


def default_document(prefix: str = "test", steps_field: str = "actions") -> dict[str, Any]:
    """Return a fresh empty flow document with a generated name."""
    return {"name": generate_name(prefix), steps_field: []}
