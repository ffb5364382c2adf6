"""FlowVisualEntity: owner of a flow document and its path-scoped operations.

This is the wiring layer between the raw document, the path resolver, the
action catalog and the visualization tree builder.

Architecture:
- The entity owns exactly one canonical document dict and edits it in place.
  ``to_json()`` returns that same dict, so an unedited document serialises
  exactly as it was loaded.
- Every read or edit is addressed by a dot-separated path.  ``None``/``""``
  means "no path" (readers return None, editors do nothing); the configured
  root sentinel addresses the document itself.
- Stale or unknown paths never raise.  Readers return None (or ``{}`` for
  ``get_node_definition``), editors leave the document untouched.
- ``to_viz_node()`` builds a fresh tree on every call; nothing is cached.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

from flowtree.catalog.service import CatalogSchemaService
from flowtree.config import FlowConfig
from flowtree.model.actions import Action, decode_action
from flowtree.model.document import default_document
from flowtree.model.naming import extract_action_name
from flowtree.path.resolver import remove_at, resolve, update
from flowtree.path.segments import parse_path
from flowtree.protocols import ActionCatalog
from flowtree.visualization.builder import VizTreeBuilder
from flowtree.visualization.nodes import NodeLabelType, VizNode

__all__ = ["EntityType", "FlowVisualEntity"]

logger = logging.getLogger(__name__)

_UNRESOLVED: Any = object()


class EntityType(StrEnum):
    """Kinds of entity a resource can hold."""

    TEST = auto()
    ROUTE = auto()


class FlowVisualEntity:
    """Visual entity wrapping one flow document.

    Example::

        from flowtree import FlowVisualEntity

        entity = FlowVisualEntity({
            "name": "t1",
            "actions": [
                {"print": {"message": "hi"}},
                {"iterate": {"condition": "i < 5", "actions": [{"print": {"message": "x"}}]}},
            ],
        })
        entity.get_node_definition("actions.1.iterate.actions.0.print")  # {"message": "x"}
        entity.remove_step("actions.1.iterate")
        len(entity.to_json()["actions"])                                  # 1
    """

    def __init__(
        self,
        document: Mapping[str, Any] | None = None,
        *,
        catalog: ActionCatalog | None = None,
        config: FlowConfig | None = None,
    ) -> None:
        """Initialise the entity.

        Args:
            document: The raw flow document.  It is adopted, not copied; a
                fresh empty document with a generated name is created when
                None.
            catalog:  Schema/catalog collaborator.  Defaults to an empty
                ``CatalogSchemaService``.
            config:   Document-shape settings.  Defaults to ``FlowConfig()``.

        Raises:
            TypeError: If ``document`` is not a dict.
        """
        self._config: FlowConfig = config if config is not None else FlowConfig()
        if document is None:
            document = default_document(self._config.id_prefix, self._config.steps_field)
        if not isinstance(document, dict):
            msg = f"Flow document must be a dict, got {type(document).__name__}"
            raise TypeError(msg)

        self._document: dict[str, Any] = document
        self._catalog: ActionCatalog = (
            catalog if catalog is not None else CatalogSchemaService()
        )
        self._builder = VizTreeBuilder(config=self._config)
        self.id: str = str(uuid.uuid4())
        self.type: EntityType = EntityType.TEST

    def __repr__(self) -> str:
        return f"FlowVisualEntity(id={self.id!r}, name={self._document.get('name')!r})"

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def document(self) -> dict[str, Any]:
        """The live canonical document (edits are visible to the entity)."""
        return self._document

    @property
    def config(self) -> FlowConfig:
        return self._config

    @property
    def root_path(self) -> str:
        return self._config.root_path

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def get_id(self) -> str:
        return self.id

    def set_id(self, entity_id: str) -> None:
        """Set the id and write it through to the document name."""
        self.id = entity_id
        self._document["name"] = entity_id

    def get_entities(self) -> list[Any]:
        """Flow documents hold no deployable entities."""
        return []

    def get_visual_entities(self) -> list[FlowVisualEntity]:
        return [self]

    def get_group_icons(self) -> list[Any]:
        return []

    # ------------------------------------------------------------------
    # Path-scoped reads
    # ------------------------------------------------------------------

    def _is_root(self, path: str | None) -> bool:
        return path == self._config.root_path

    def _kind_at(self, path: str) -> str | None:
        """Action kind addressed by ``path``.

        ``actions.<i>`` ends in an index, so the kind is read from the element
        it resolves to; any other path names its kind in its last field segment.
        """
        if parse_path(path)[-1].is_index:
            element = resolve(self._document, path)
            action = decode_action(element, self._config.steps_field)
            return action.kind if isinstance(action, Action) else None
        return extract_action_name(path)

    def get_node_label(
        self, path: str | None = None, label_type: NodeLabelType = NodeLabelType.ID
    ) -> str:
        """Return the display label for the node at ``path``.

        The root is labelled by the document name, or by its description when
        ``label_type`` is DESCRIPTION and a description is present.  Any other
        path is labelled by its action kind.  No path yields ``""``, as does an
        ``actions.<i>`` path whose element is not a valid action.
        """
        if not path:
            return ""
        if self._is_root(path):
            description = self._document.get("description")
            if label_type == NodeLabelType.DESCRIPTION and description:
                return str(description)
            return str(self._document.get("name", ""))
        return self._kind_at(path) or ""

    def get_node_title(self, path: str | None = None) -> str:
        """Return the catalog display name for the action at ``path``.

        Falls back to the node label when the path does not address an action.
        """
        if not path or self._is_root(path):
            return self.get_node_label(path)
        kind = self._kind_at(path)
        element_path = path if parse_path(path)[-1].is_index else path.rpartition(".")[0]
        raw_action = resolve(self._document, element_path) if kind else None
        if isinstance(raw_action, Mapping) and kind in raw_action:
            return self._catalog.name_for_action(raw_action)
        return kind or ""

    def get_node_schema(self, path: str | None = None) -> dict[str, Any] | None:
        """Return the JSON-schema fragment for the node at ``path``.

        Returns None without a path, or when the path does not resolve.  The root
        path returns the catalog's root schema (``{}`` by default).
        """
        if not path:
            return None
        if self._is_root(path):
            return self._catalog.root_schema()
        if resolve(self._document, path, _UNRESOLVED) is _UNRESOLVED:
            return None
        kind = self._kind_at(path)
        if kind is None:
            return None
        return self._catalog.schema_for_action(kind)

    def get_node_definition(self, path: str | None = None) -> Any:
        """Return the definition stored at ``path``.

        - No path: None.
        - Root path: the document.
        - Path to an action element (``{kind: params}``): its ``params``.
        - Path to any other value: that value.
        - Path that does not resolve: ``{}``.
        """
        if not path:
            return None
        if self._is_root(path):
            return self._document

        value = resolve(self._document, path, _UNRESOLVED)
        if value is _UNRESOLVED:
            return {}
        # "actions.<i>" lands on the {kind: params} wrapper; unwrap it so both
        # address shapes return the same params record.
        if parse_path(path)[-1].is_index:
            action = decode_action(value, self._config.steps_field)
            if isinstance(action, Action):
                return action.value
        return value

    # ------------------------------------------------------------------
    # Path-scoped edits
    # ------------------------------------------------------------------

    def update_model(self, path: str | None, value: Any) -> None:
        """Replace the value at ``path``.

        The root path merges ``value`` into the top-level fields and then
        re-derives the id from the document name.
        """
        if not path:
            logger.debug("Edit noop: update_model without path entity=%s", self.id)
            return
        update(self._document, path, value, root_path=self._config.root_path)
        if self._is_root(path) and self._document.get("name"):
            self.id = str(self._document["name"])

    def remove_step(self, path: str | None) -> None:
        """Remove the step addressed by ``actions.<i>`` or ``actions.<i>.<kind>``."""
        if not path:
            logger.debug("Edit noop: remove_step without path entity=%s", self.id)
            return
        remove_at(self._document, path)

    # ------------------------------------------------------------------
    # Serialisation and visualization
    # ------------------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        """Return the canonical document exactly as stored."""
        return self._document

    def to_viz_node(self) -> VizNode:
        """Build a fresh visualization tree rooted at the root sentinel."""
        return self._builder.build(self._document, entity=self)
