from __future__ import annotations

"""
Unit tests for the Tree Walker.

Verifies:
1. Class attributes rewritten on every literal node, recursively.
2. Nodes without a class attribute stay without one.
3. Component references are never called and keep their identity.
4. The input tree is left untouched.
"""

from cssns.core.options.resolver import resolve_options
from cssns.core.tree.walker import apply_to_tree
from cssns.domain.tree_models import Element, h

NS = resolve_options("MyComponent")


def test_prefixes_nested_class_attributes():
    tree = h("div", {"class": "row"}, h("div", {"class": "column"}))

    result = apply_to_tree(NS, tree)

    assert result == h("div", {"class": "MyComponent-row"}, h("div", {"class": "MyComponent-column"}))


def test_elements_without_class_get_none_added():
    tree = h("section", None, h("p", {"id": "x"}, "text"))

    result = apply_to_tree(NS, tree)

    assert "class" not in result.props
    assert "class" not in result.children[0].props
    assert result.children[0].props["id"] == "x"


def test_leaves_are_returned_unchanged():
    for leaf in ["text", 3, None, True, 2.5]:
        assert apply_to_tree(NS, leaf) is leaf


def test_children_order_and_leaves_preserved():
    tree = h("ul", None, "head", h("li", {"class": "a"}), 0, h("li", {"class": "b"}), None)

    result = apply_to_tree(NS, tree)

    assert len(result.children) == 5
    assert result.children[0] == "head"
    assert result.children[1].props["class"] == "MyComponent-a"
    assert result.children[2] == 0
    assert result.children[3].props["class"] == "MyComponent-b"
    assert result.children[4] is None


def test_array_and_mapping_class_values_are_serialized():
    tree = h("div", {"class": ["row", None]}, h("span", {"class": {"label": True, "off": False}}))

    result = apply_to_tree(NS, tree)

    assert result.props["class"] == "MyComponent-row"
    assert result.children[0].props["class"] == "MyComponent-label"


def test_component_references_are_not_called():
    calls = []

    def Child(props):
        calls.append(props)
        return h("div", {"class": "protected"})

    tree = h("div", {"class": "container"}, h(Child, {"class": "injected"}, h("i", {"class": "owned"})))

    result = apply_to_tree(NS, tree)

    assert calls == []
    ref = result.children[0]
    assert ref.type is Child
    assert ref.props["class"] == "MyComponent-injected"
    assert ref.children[0].props["class"] == "MyComponent-owned"


def test_input_tree_is_not_mutated():
    inner = h("div", {"class": "column"})
    tree = h("div", {"class": "row", "title": "t"}, inner)

    result = apply_to_tree(NS, tree)

    assert tree.props["class"] == "row"
    assert inner.props["class"] == "column"
    assert result is not tree
    assert result.props["title"] == "t"


def test_same_tree_with_different_options():
    tree = h("div", {"class": "row"})

    assert apply_to_tree(resolve_options("A"), tree).props["class"] == "A-row"
    assert apply_to_tree(resolve_options("B"), tree).props["class"] == "B-row"


def test_present_but_empty_class_becomes_empty_string():
    result = apply_to_tree(NS, Element("div", {"class": None}))
    assert result.props["class"] == ""


def test_sequence_valued_children_keep_their_shape():
    tree = h("ul", None, [["a", "b"]], ("c", "d"))

    result = apply_to_tree(NS, tree)

    assert len(tree.children) == 3
    assert len(result.children) == len(tree.children)
    assert result.children == tree.children
