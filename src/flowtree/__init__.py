"""flow-tree - path-addressed tree model for visual test-flow editors."""

from __future__ import annotations

from flowtree.catalog import CatalogIndex, CatalogSchemaService
from flowtree.config import FlowConfig
from flowtree.entity import EntityType, FlowVisualEntity
from flowtree.model import extract_action_name, is_flow_document
from flowtree.path import ROOT_PATH, remove_at, resolve, update
from flowtree.protocols import ActionCatalog
from flowtree.resource import FlowResource, SourceSchemaType
from flowtree.visualization import NodeLabelType, VizNode, tree_signature

__version__: str = "0.1.0"
__all__: list[str] = [
    "ROOT_PATH",
    "ActionCatalog",
    "CatalogIndex",
    "CatalogSchemaService",
    "EntityType",
    "FlowConfig",
    "FlowResource",
    "FlowVisualEntity",
    "NodeLabelType",
    "SourceSchemaType",
    "VizNode",
    "extract_action_name",
    "is_flow_document",
    "remove_at",
    "resolve",
    "tree_signature",
    "update",
]
