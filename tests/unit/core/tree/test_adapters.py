from __future__ import annotations

"""
Unit tests for tree adapters.

Verifies that the walker works against a foreign node representation through
a custom TreeAdapter (here: plain dicts with a 'className' attribute).
"""

from typing import Any, Mapping, Sequence

import pytest

from cssns.api import apply_to_tree, auto_apply
from cssns.core.tree.adapters import DEFAULT_ADAPTER, ElementAdapter, TreeAdapter
from cssns.domain.tree_models import h


class DictNodeAdapter(TreeAdapter):
    """Nodes shaped as {'tag': ..., 'attrs': {...}, 'children': [...]}."""
    class_attribute = "className"

    def is_node(self, value: Any) -> bool:
        return isinstance(value, dict) and "tag" in value

    def attributes(self, node: Any) -> Mapping[str, Any]:
        return node.get("attrs", {})

    def children(self, node: Any) -> Sequence[Any]:
        return node.get("children", [])

    def clone(self, node: Any, attributes: Mapping[str, Any], children: Sequence[Any]) -> Any:
        return {"tag": node["tag"], "attrs": dict(attributes), "children": list(children)}


def test_default_adapter_recognizes_elements():
    assert isinstance(DEFAULT_ADAPTER, ElementAdapter)
    assert DEFAULT_ADAPTER.is_node(h("div")) is True
    assert DEFAULT_ADAPTER.is_node({"tag": "div"}) is False


def test_base_adapter_is_abstract():
    with pytest.raises(TypeError):
        TreeAdapter()


def test_walker_uses_custom_adapter():
    tree = {
        "tag": "div",
        "attrs": {"className": "row", "class": "untouched"},
        "children": [{"tag": "span", "attrs": {"className": ["label"]}}, "text"],
    }

    result = apply_to_tree("Card", tree, adapter=DictNodeAdapter())

    assert result["attrs"] == {"className": "Card-row", "class": "untouched"}
    assert result["children"][0]["attrs"]["className"] == "Card-label"
    assert result["children"][1] == "text"
    assert tree["attrs"]["className"] == "row"


def test_auto_apply_detects_nodes_through_adapter():
    adapter = DictNodeAdapter()

    assert auto_apply("Card", {"tag": "p", "attrs": {"className": "x"}}, adapter)["attrs"]["className"] == "Card-x"
    assert auto_apply("Card", {"x": True}, adapter) == "Card-x"
