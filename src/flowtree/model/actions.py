"""Tagged-union decode of raw action records.

A raw action is a single-key dict ``{kind: params}``.  ``decode_action`` turns
it into an ``Action`` once, at the document boundary, so callers branch on a
type instead of sniffing dict keys again.  Records with zero or several keys
(or that are not dicts at all) decode to ``UnknownAction`` rather than
raising, so one bad element never makes a document unusable.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from flowtree.model.naming import extract_action_name

__all__ = ["Action", "UnknownAction", "decode_action", "decode_actions"]

STEPS_FIELD = "actions"


@dataclass(frozen=True, slots=True)
class Action:
    """A well-formed action record.

    Attributes:
        kind:        The action's single key, e.g. ``"print"`` or ``"iterate"``.
        value:       The parameter record stored under ``kind`` (shared with the
                     document, not copied).
        steps_field: Name of the nested step list that makes a container.
    """

    kind: str
    value: Any
    steps_field: str = STEPS_FIELD

    @property
    def is_container(self) -> bool:
        """True when the parameters hold a nested step list."""
        return isinstance(self.value, dict) and isinstance(
            self.value.get(self.steps_field), list
        )

    @property
    def nested_actions(self) -> list[Any]:
        """The nested raw step list of a container; empty for leaves."""
        if not self.is_container:
            return []
        return self.value[self.steps_field]


@dataclass(frozen=True, slots=True)
class UnknownAction:
    """A malformed action record (not a dict, or not exactly one key)."""

    raw: Any


def decode_action(raw: Any, steps_field: str = STEPS_FIELD) -> Action | UnknownAction:
    kind = extract_action_name(raw) if isinstance(raw, dict) else None
    if kind is None:
        return UnknownAction(raw)
    return Action(kind=kind, value=raw[kind], steps_field=steps_field)


def decode_actions(
    raw: Any, steps_field: str = STEPS_FIELD
) -> tuple[Action | UnknownAction, ...]:
    """Decode a raw step list; anything that is not a list decodes to ``()``."""
    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
        return ()
    return tuple(decode_action(item, steps_field) for item in raw)
