from __future__ import annotations

"""
Public Namespacing Facade.

Entry points accept a bare namespace, a file path, an options mapping or a
resolved Options record as their first argument; options are resolved once
per call and handed down unchanged. Also provides CssNs, a namespace bound
once and reused across a component's render code.
"""

import logging
from typing import Any, Mapping, Optional

from cssns.core.classes.normalizer import normalize_class_list as _normalize
from cssns.core.options.resolver import resolve_options
from cssns.core.tree.adapters import DEFAULT_ADAPTER, TreeAdapter
from cssns.core.tree.walker import apply_to_tree as _walk_tree
from cssns.domain.options import Options
from cssns.domain.tree_models import h as _build_element

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_class_list(namespace_or_options: Any, value: Any = None) -> str:
    """
    Namespace a class list given as a string, sequence or mapping of flags.

    Args:
        namespace_or_options: Namespace, path, mapping or Options.
        value: Class-list input; falsy values yield "".

    Returns:
        str: Space-joined namespaced classes.

    Raises:
        InvalidOptions: If no namespace can be derived.
    """
    return _normalize(resolve_options(namespace_or_options), value)


def apply_to_tree(
        namespace_or_options: Any,
        node: Any,
        adapter: Optional[TreeAdapter] = None,
) -> Any:
    """
    Namespace every class attribute of a literal element tree.

    Args:
        namespace_or_options: Namespace, path, mapping or Options.
        node: Root element (or a leaf, returned unchanged).
        adapter: Tree library adapter; defaults to the bundled Element model.

    Returns:
        Any: A rewritten copy of the tree.

    Raises:
        InvalidOptions: If no namespace can be derived.
    """
    return _walk_tree(resolve_options(namespace_or_options), node, adapter)


def auto_apply(
        namespace_or_options: Any,
        value: Any,
        adapter: Optional[TreeAdapter] = None,
) -> Any:
    """
    Dispatch on the shape of 'value'.

    Falsy values are returned as-is, tree nodes go to the tree walker and
    anything else is treated as a class list.

    Args:
        namespace_or_options: Namespace, path, mapping or Options.
        value: Class list, tree node or falsy value.
        adapter: Tree library adapter used to recognize nodes.

    Returns:
        Any: The original falsy value, a rewritten tree or a class string.

    Raises:
        InvalidOptions: If no namespace can be derived, even for falsy values.
    """
    options = resolve_options(namespace_or_options)
    if not value:
        return value

    adapter = adapter or DEFAULT_ADAPTER
    if adapter.is_node(value):
        logger.debug(f"auto_apply('{options.namespace}'): tree node input.")
        return _walk_tree(options, value, adapter)
    logger.debug(f"auto_apply('{options.namespace}'): class list input ({type(value).__name__}).")
    return _normalize(options, value)


def create_css_ns(namespace_or_options: Any, adapter: Optional[TreeAdapter] = None) -> "CssNs":
    """Resolve options once and return a reusable bound namespace."""
    return CssNs(namespace_or_options, adapter)

# -----------------------------------------------------------------------------
# BOUND NAMESPACE
# -----------------------------------------------------------------------------

class CssNs:
    """
    Namespace bound to a single component.

    Calling the instance behaves like auto_apply with the bound options:

        ns = create_css_ns(__file__)
        ns("row active")           # "card-row card-active"
        ns.h("div", {"class": "row"}, ns.h("span", {"class": "label"}))

    Attributes:
        options: The resolved options record.
        adapter: Tree adapter used for node detection and walking.
    """

    def __init__(self, namespace_or_options: Any, adapter: Optional[TreeAdapter] = None) -> None:
        self.options: Options = resolve_options(namespace_or_options)
        self.adapter: TreeAdapter = adapter or DEFAULT_ADAPTER

    def __repr__(self) -> str:
        return f"CssNs(namespace={self.namespace!r})"

    def __call__(self, value: Any) -> Any:
        return auto_apply(self.options, value, self.adapter)

    @property
    def namespace(self) -> str:
        return self.options.namespace

    def class_list(self, value: Any) -> str:
        return _normalize(self.options, value)

    def element(self, node: Any) -> Any:
        return _walk_tree(self.options, node, self.adapter)

    def h(self, type_: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> Any:
        """
        Build an Element whose own class attribute is namespaced.

        Only the new node is rewritten; children are taken as given, so
        children built through this method are not prefixed twice.
        """
        attrs = dict(props or {})
        key = self.adapter.class_attribute
        if key in attrs:
            attrs[key] = _normalize(self.options, attrs[key])
        return _build_element(type_, attrs, *children)
