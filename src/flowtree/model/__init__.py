"""Model subpackage: flow document shape, action decode and action naming."""

from flowtree.model.actions import Action, UnknownAction, decode_action, decode_actions
from flowtree.model.document import default_document, generate_name, is_flow_document
from flowtree.model.naming import extract_action_name

__all__ = [
    "Action",
    "UnknownAction",
    "decode_action",
    "decode_actions",
    "default_document",
    "extract_action_name",
    "generate_name",
    "is_flow_document",
]
