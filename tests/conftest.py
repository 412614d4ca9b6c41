from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared option fixtures used across unit tests.
3. A minimal static-markup renderer standing in for a host rendering engine.
   It executes component references the way a real renderer would, which is
   what lets tests observe the walker's component boundaries.
"""

import html
import os
import sys
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from cssns.domain.tree_models import Element  # noqa: E402


# -----------------------------------------------------------------------------
# Static Markup Rendering
# -----------------------------------------------------------------------------
def render_static_markup(node: Any) -> str:
    """
    Render an Element tree to HTML, calling component references with their
    props (children included under the 'children' key).
    """
    if node is None or isinstance(node, bool):
        return ""
    if isinstance(node, (list, tuple)):
        return "".join(render_static_markup(child) for child in node)
    if not isinstance(node, Element):
        return html.escape(str(node))

    if not node.is_host:
        props: Dict[str, Any] = dict(node.props)
        props["children"] = node.children
        return render_static_markup(node.type(props))

    attrs = "".join(
        f' {key}="{html.escape(str(value))}"'
        for key, value in node.props.items()
        if value is not None
    )
    inner = "".join(render_static_markup(child) for child in node.children)
    return f"<{node.type}{attrs}>{inner}</{node.type}>"


@pytest.fixture
def render_markup() -> Callable[[Any], str]:
    """Expose the static renderer to tests."""
    return render_static_markup


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def include_exclude_options() -> Dict[str, Any]:
    """
    Options prefixing lower-case classes while skipping the 'icon' family.

    Returns:
        Dict[str, Any]: Mapping-style options.
    """
    return {
        "namespace": "Foo",
        "include": r"^[a-z]",
        "exclude": r"^icon",
    }
