"""ActionCatalog Protocol: the schema/catalog collaborator of a flow entity.

Defines the structural interface the entity needs from a catalog service.
Any class with conformant methods passes ``isinstance`` checks, no
inheritance required.

Example::

    from flowtree.protocols import ActionCatalog

    class MyCatalog:
        def name_for_action(self, raw_action):
            return "Print message"

        def schema_for_action(self, kind):
            return {"type": "object"}

        def root_schema(self):
            return {}

    assert isinstance(MyCatalog(), ActionCatalog)  # True, structural conformance
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["ActionCatalog"]


@runtime_checkable
class ActionCatalog(Protocol):
    """Structural protocol for action catalogs.

    - ``name_for_action`` returns a display name for a raw ``{kind: params}``
      record.
    - ``schema_for_action`` returns the JSON-schema fragment for an action
      kind, or None when the kind is unknown.
    - ``root_schema`` returns the schema describing the whole document.
    """

    def name_for_action(self, raw_action: Any) -> str: ...

    def schema_for_action(self, kind: str) -> dict[str, Any] | None: ...

    def root_schema(self) -> dict[str, Any]: ...
