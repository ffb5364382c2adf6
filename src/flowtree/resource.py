"""FlowResource: the source-file level wrapper around a flow document."""

from __future__ import annotations

import json
from enum import StrEnum, auto
from typing import Any

from flowtree.config import FlowConfig
from flowtree.entity import FlowVisualEntity
from flowtree.model.document import is_flow_document
from flowtree.protocols import ActionCatalog

__all__ = ["FlowResource", "SourceSchemaType"]


class SourceSchemaType(StrEnum):
    """Kinds of source document an editor can open."""

    ROUTE = auto()
    TEST = auto()


class FlowResource:
    """A loaded flow source holding at most one FlowVisualEntity.

    A resource created without a document is empty: it exposes no visual
    entities until one is loaded.  Flow documents never contribute deployable
    entities, so ``get_entities()`` is always empty.

    Example::

        resource = FlowResource.from_json('{"name": "t1", "actions": []}')
        resource.get_type()                      # SourceSchemaType.TEST
        resource.get_visual_entities()[0].id     # generated uuid
    """

    def __init__(
        self,
        document: dict[str, Any] | None = None,
        *,
        catalog: ActionCatalog | None = None,
        config: FlowConfig | None = None,
    ) -> None:
        self._entity: FlowVisualEntity | None = None
        if document is not None:
            self._entity = FlowVisualEntity(document, catalog=catalog, config=config)

    @classmethod
    def from_json(
        cls,
        text: str,
        *,
        catalog: ActionCatalog | None = None,
        config: FlowConfig | None = None,
    ) -> FlowResource:
        """Parse JSON text into a resource.

        Raises:
            ValueError: If ``text`` is not valid JSON or not a flow document.
        """
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Invalid flow JSON: {exc}"
            raise ValueError(msg) from exc
        if not is_flow_document(document):
            msg = "JSON text is not a flow document (expected 'name' and 'actions')"
            raise ValueError(msg)
        return cls(document, catalog=catalog, config=config)

    def get_type(self) -> SourceSchemaType:
        return SourceSchemaType.TEST

    def get_entities(self) -> list[Any]:
        return []

    def get_visual_entities(self) -> list[FlowVisualEntity]:
        return [] if self._entity is None else [self._entity]

    def to_json(self) -> dict[str, Any] | None:
        return None if self._entity is None else self._entity.to_json()

    def to_json_string(self, indent: int | None = 2) -> str:
        """Serialise the document, preserving key order; ``"null"`` when empty."""
        return json.dumps(self.to_json(), indent=indent, ensure_ascii=False)
