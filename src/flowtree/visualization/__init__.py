"""Visualization subpackage: the VizNode tree built from a flow document.

Re-exports the public API for the visualization module:
- VizNode / VizNodeData: tree nodes with derived sibling navigation
- NodeLabelType: StrEnum selecting the root label field
- VizTreeBuilder: converts a flow document into a VizNode tree
- tree_signature: structural fingerprint for comparing two builds
"""

from flowtree.visualization.builder import VizTreeBuilder
from flowtree.visualization.nodes import (
    NodeLabelType,
    TreeSignature,
    VizNode,
    VizNodeData,
    tree_signature,
)

__all__ = [
    "NodeLabelType",
    "TreeSignature",
    "VizNode",
    "VizNodeData",
    "VizTreeBuilder",
    "tree_signature",
]
