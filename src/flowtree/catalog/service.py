"""CatalogSchemaService: in-memory ActionCatalog backed by catalog definitions.

Each catalog file maps an action kind to its definition::

    {
        "print": {
            "title": "Print",
            "description": "Prints a message to the test log",
            "propertiesSchema": {"type": "object", "properties": {...}}
        }
    }

The service satisfies the ``ActionCatalog`` Protocol structurally.  With no
definitions it knows no kinds: every schema lookup returns None, the root
schema is ``{}`` and display names fall back to the action kind.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from flowtree.catalog.index import CatalogIndex
from flowtree.model.naming import extract_action_name

__all__ = ["CatalogSchemaService"]


class CatalogSchemaService:
    """Display names and JSON-schema fragments keyed by action kind.

    Example::

        from flowtree.catalog import CatalogSchemaService

        catalog = CatalogSchemaService.from_definitions(
            {"print": {"title": "Print", "propertiesSchema": {"type": "object"}}}
        )
        catalog.schema_for_action("print")            # {"type": "object"}
        catalog.name_for_action({"print": {}})        # "Print"
        catalog.name_for_action({"delay": {}})        # "delay"

    Args:
        definitions:     Mapping of action kind to catalog definition.
        root_schema:     Schema describing the whole document.  Defaults to ``{}``.
    """

    def __init__(
        self,
        definitions: Mapping[str, Mapping[str, Any]] | None = None,
        root_schema: Mapping[str, Any] | None = None,
    ) -> None:
        self._definitions: dict[str, Mapping[str, Any]] = dict(definitions or {})
        self._root_schema: dict[str, Any] = dict(root_schema or {})

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_definitions(
        cls,
        actions: Mapping[str, Mapping[str, Any]],
        containers: Mapping[str, Mapping[str, Any]] | None = None,
        root_schema: Mapping[str, Any] | None = None,
    ) -> CatalogSchemaService:
        """Merge action and container definitions into one service."""
        return cls(
            definitions={**actions, **(containers or {})},
            root_schema=root_schema,
        )

    @classmethod
    def from_index(cls, index: CatalogIndex, base_dir: str | Path) -> CatalogSchemaService:
        """Load the action and container catalogs listed by ``index``.

        Args:
            index:    Parsed catalog index.
            base_dir: Directory the index's file names are relative to.

        Raises:
            ValueError: If a catalog file is not a JSON object.
            OSError:    If a catalog file cannot be read.
        """
        base = Path(base_dir)
        actions = _load_catalog_file(base / index.actions.file)
        containers = _load_catalog_file(base / index.containers.file)
        return cls.from_definitions(actions, containers)

    # ------------------------------------------------------------------
    # ActionCatalog Protocol surface
    # ------------------------------------------------------------------

    def name_for_action(self, raw_action: Any) -> str:
        """Return the catalog title for a raw action, else its kind, else ""."""
        kind = extract_action_name(raw_action)
        if kind is None:
            return ""
        title = self._definitions.get(kind, {}).get("title")
        return str(title) if title else kind

    def schema_for_action(self, kind: str) -> dict[str, Any] | None:
        definition = self._definitions.get(kind)
        if definition is None:
            return None
        schema = definition.get("propertiesSchema")
        return dict(schema) if isinstance(schema, Mapping) else None

    def root_schema(self) -> dict[str, Any]:
        return dict(self._root_schema)

    # ------------------------------------------------------------------
    # Catalog queries
    # ------------------------------------------------------------------

    @property
    def kinds(self) -> frozenset[str]:
        """All action kinds the catalog defines."""
        return frozenset(self._definitions)


def _load_catalog_file(path: Path) -> dict[str, Mapping[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"Catalog file {path} must hold a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return data
