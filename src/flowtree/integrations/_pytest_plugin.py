"""pytest plugin for flow-tree: visualization tree assertions.

Registered through the pytest11 entry point in pyproject.toml, so any project
with flow-tree installed gets the ``assert_viz_isomorphic`` fixture without
touching its conftest.py.
"""

from __future__ import annotations

from typing import Any

import pytest

from flowtree.visualization import VizNode, tree_signature


def _first_divergence(left: Any, right: Any) -> str:
    """Describe the first position where two tree signatures differ."""
    l_path, l_group, l_children = left
    r_path, r_group, r_children = right
    if l_path != r_path:
        return f"path {l_path!r} != {r_path!r}"
    if l_group != r_group:
        return f"is_group at {l_path!r}: {l_group} != {r_group}"
    if len(l_children) != len(r_children):
        return f"child count at {l_path!r}: {len(l_children)} != {len(r_children)}"
    for lc, rc in zip(l_children, r_children, strict=True):
        if lc != rc:
            return _first_divergence(lc, rc)
    return "no difference"


@pytest.fixture(scope="session")
def assert_viz_isomorphic() -> Any:
    """Fixture that returns a callable VizNode tree isomorphism asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_rebuild(assert_viz_isomorphic):
            entity = FlowVisualEntity(doc)
            assert_viz_isomorphic(entity.to_viz_node(), entity.to_viz_node())

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` when the two trees differ in any path, group flag,
        child count or child order.
    """

    def _assert(actual: VizNode, expected: VizNode) -> None:
        """Assert that two visualization trees are structurally identical.

        Raises:
            AssertionError: With the first divergence when the trees differ.
        """
        left = tree_signature(actual)
        right = tree_signature(expected)
        if left != right:
            raise AssertionError(
                f"Visualization trees are not isomorphic: {_first_divergence(left, right)}"
            )

    return _assert
