"""VizTreeBuilder: converts a flow document into a VizNode tree.

Uses recursive descent over decoded step lists:

1. The root is a group node whose path is the root sentinel.
2. Each action at index ``i`` of kind ``k`` becomes a node with path
   ``"<prefix>actions.<i>.<k>"``.
3. Container actions become group nodes and recurse with their own path as
   the prefix; every other action is a leaf.
4. Malformed actions (zero or several keys) become unlabeled leaves with
   path ``"<prefix>actions.<i>"``; they never abort the build.

Paths are built during traversal, children are attached in document order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from flowtree.config import FlowConfig
from flowtree.model.actions import Action, decode_actions
from flowtree.path.segments import format_path
from flowtree.visualization.nodes import VizNode, VizNodeData

if TYPE_CHECKING:
    from flowtree.entity import FlowVisualEntity

__all__ = ["VizTreeBuilder"]

logger = logging.getLogger(__name__)


@dataclass
class VizTreeBuilder:
    """Builds a fresh VizNode tree for a flow document.

    The builder is stateless apart from its configuration; every call to
    ``build`` produces new node objects.  Rebuilding an unchanged document
    yields a tree with the same paths, group flags and child order.

    Example::

        builder = VizTreeBuilder()
        root = builder.build({"name": "t1", "actions": [{"print": {"message": "hi"}}]})
        root.get_children()[0].data.path   # "actions.0.print"
    """

    config: FlowConfig = field(default_factory=FlowConfig)

    def build(
        self, document: Any, entity: FlowVisualEntity | None = None
    ) -> VizNode:
        """Build the tree rooted at ``document``.

        Args:
            document: The flow document (a dict with a step list).
            entity:   Owning entity that nodes delegate label/schema/edit calls to.

        Returns:
            The root group VizNode.
        """
        root = VizNode(VizNodeData(path=self.config.root_path, is_group=True), entity)
        steps = document.get(self.config.steps_field) if isinstance(document, dict) else None
        self._attach_steps(root, steps, prefix=(), entity=entity)
        return root

    def _attach_steps(
        self,
        parent: VizNode,
        steps: Any,
        prefix: tuple[str, ...],
        entity: FlowVisualEntity | None,
    ) -> None:
        steps_field = self.config.steps_field
        for idx, action in enumerate(decode_actions(steps, steps_field)):
            position = (*prefix, steps_field, str(idx))

            if not isinstance(action, Action):
                logger.debug("Skipping malformed action at %s", format_path(position))
                parent.add_child(
                    VizNode(VizNodeData(path=format_path(position), is_group=False), entity)
                )
                continue

            node_path = (*position, action.kind)
            node = VizNode(
                VizNodeData(
                    path=format_path(node_path),
                    is_group=action.is_container,
                    kind=action.kind,
                ),
                entity,
            )
            if action.is_container:
                self._attach_steps(node, action.nested_actions, node_path, entity)
            parent.add_child(node)
