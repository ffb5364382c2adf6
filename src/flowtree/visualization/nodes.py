"""VizNode and VizNodeData: the rendering-facing projection of a flow document.

A VizNode tree is rebuilt from scratch on every ``to_viz_node()`` call, so node
identity is never stable across builds; only paths are.  Each node owns its
ordered children.  Previous/next sibling links are not stored: they are
derived from the parent's children on each call so they cannot drift from the
children order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flowtree.entity import FlowVisualEntity

__all__ = ["NodeLabelType", "TreeSignature", "VizNode", "VizNodeData", "tree_signature"]


class NodeLabelType(StrEnum):
    """Which document field labels the root group node.

    - ID          -> "id"          : the document name
    - DESCRIPTION -> "description" : the description, when one is present
    """

    ID = auto()
    DESCRIPTION = auto()


@dataclass(slots=True)
class VizNodeData:
    """Payload of a VizNode.

    Attributes:
        path:     Canonical node path, or the root sentinel for the root node.
        is_group: True for the root and for container actions.
        kind:     Action kind; None for the root and for malformed actions.
    """

    path: str
    is_group: bool
    kind: str | None = None


class VizNode:
    """A node in the visualization tree.

    Label, schema and definition lookups, as well as edits, are delegated to the
    owning entity by path; the node itself holds no document data.
    """

    def __init__(self, data: VizNodeData, entity: FlowVisualEntity | None = None) -> None:
        self.data = data
        self._entity = entity
        self._parent: VizNode | None = None
        self._children: list[VizNode] = []

    def __repr__(self) -> str:
        return (
            f"VizNode(path={self.data.path!r}, is_group={self.data.is_group}, "
            f"children={len(self._children)})"
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def get_base_entity(self) -> FlowVisualEntity | None:
        return self._entity

    def get_parent_node(self) -> VizNode | None:
        return self._parent

    def get_children(self) -> list[VizNode]:
        """Children in document order (a copy; edit through add/remove_child)."""
        return list(self._children)

    def add_child(self, child: VizNode, index: int | None = None) -> None:
        """Attach ``child`` at ``index`` (default: last), detaching it first."""
        if child._parent is not None:
            child._parent.remove_child(child)
        child._parent = self
        if index is None:
            self._children.append(child)
        else:
            self._children.insert(index, child)

    def remove_child(self, child: VizNode) -> None:
        if child._parent is not self:
            return
        self._children = [c for c in self._children if c is not child]
        child._parent = None

    def _sibling(self, offset: int) -> VizNode | None:
        if self._parent is None:
            return None
        siblings = self._parent._children
        position = next(i for i, node in enumerate(siblings) if node is self)
        target = position + offset
        if 0 <= target < len(siblings):
            return siblings[target]
        return None

    def get_previous_node(self) -> VizNode | None:
        return self._sibling(-1)

    def get_next_node(self) -> VizNode | None:
        return self._sibling(1)

    def walk(self) -> Iterator[VizNode]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self._children:
            yield from child.walk()

    # ------------------------------------------------------------------
    # Entity delegation
    # ------------------------------------------------------------------

    def _is_malformed(self) -> bool:
        return self.data.kind is None and self._parent is not None

    def get_node_label(self, label_type: NodeLabelType = NodeLabelType.ID) -> str:
        if self._is_malformed():
            return ""
        if self._entity is None:
            return self.data.kind or ""
        return self._entity.get_node_label(self.data.path, label_type)

    def get_node_title(self) -> str:
        if self._is_malformed():
            return ""
        if self._entity is None:
            return self.data.kind or ""
        return self._entity.get_node_title(self.data.path)

    def get_node_definition(self) -> Any:
        if self._entity is None:
            return None
        return self._entity.get_node_definition(self.data.path)

    def get_node_schema(self) -> dict[str, Any] | None:
        if self._entity is None:
            return None
        return self._entity.get_node_schema(self.data.path)

    def update_model(self, value: Any) -> None:
        if self._entity is not None:
            self._entity.update_model(self.data.path, value)

    def remove(self) -> None:
        """Remove this node's action from the document.

        The tree itself is left as built; request a fresh one afterwards.
        """
        if self._entity is not None:
            self._entity.remove_step(self.data.path)


TreeSignature = tuple[str, bool, tuple["TreeSignature", ...]]


def tree_signature(node: VizNode) -> TreeSignature:
    """Return ``(path, is_group, child signatures)`` for structural comparison.

    Two builds of an unchanged document have equal signatures even though their
    node objects differ.
    """
    return (
        node.data.path,
        node.data.is_group,
        tuple(tree_signature(child) for child in node.get_children()),
    )
