"""FlowConfig: document-shape settings shared by the entity and tree builder.

FlowConfig is a frozen (immutable) dataclass.  It names the root sentinel,
the field that holds step lists, and the prefix for generated document names.
"""

from __future__ import annotations

from dataclasses import dataclass

from flowtree.path.segments import PATH_SEPARATOR, ROOT_PATH, is_index

__all__ = ["FlowConfig"]


@dataclass(frozen=True, slots=True)
class FlowConfig:
    """Immutable configuration for a flow entity.

    Attributes:
        root_path:   Path sentinel addressing the document root.  Must not be
                     empty (empty means "no path"), contain the separator, or
                     parse as an index.
        steps_field: Field holding the ordered step list at the root and inside
                     container actions.
        id_prefix:   Prefix used when generating a document name.
    """

    root_path: str = ROOT_PATH
    steps_field: str = "actions"
    id_prefix: str = "test"

    def __post_init__(self) -> None:
        if not self.root_path:
            msg = "root_path must not be empty"
            raise ValueError(msg)
        if PATH_SEPARATOR in self.root_path or is_index(self.root_path):
            msg = f"root_path must be a single non-index segment, got {self.root_path!r}"
            raise ValueError(msg)
        if (
            not self.steps_field
            or PATH_SEPARATOR in self.steps_field
            or is_index(self.steps_field)
        ):
            msg = f"steps_field must be a single segment, got {self.steps_field!r}"
            raise ValueError(msg)
        if not self.id_prefix:
            msg = "id_prefix must not be empty"
            raise ValueError(msg)
