from __future__ import annotations

"""
Tree Node Adapters.

The walker never touches node internals directly. It relies on an adapter
exposing the four capabilities it needs from a UI tree library: node
detection, attribute access, children access and clone-with-overrides.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from cssns.domain.constants import CLASS_ATTRIBUTE
from cssns.domain.tree_models import Element

# -----------------------------------------------------------------------------
# ADAPTER CONTRACT
# -----------------------------------------------------------------------------

class TreeAdapter(ABC):
    """
    Base contract for plugging a UI tree library into the walker.

    Subclasses must not render or otherwise execute component references;
    they only read and rebuild the literal node data.

    Attributes:
        class_attribute: Attribute key holding the class list.
    """
    class_attribute: str = CLASS_ATTRIBUTE

    @abstractmethod
    def is_node(self, value: Any) -> bool:
        pass

    @abstractmethod
    def attributes(self, node: Any) -> Mapping[str, Any]:
        pass

    @abstractmethod
    def children(self, node: Any) -> Sequence[Any]:
        pass

    @abstractmethod
    def clone(self, node: Any, attributes: Mapping[str, Any], children: Sequence[Any]) -> Any:
        """Build a node of the same type with replacement attributes and children."""
        pass


class ElementAdapter(TreeAdapter):
    """Adapter for the bundled Element model."""

    def is_node(self, value: Any) -> bool:
        return isinstance(value, Element)

    def attributes(self, node: Element) -> Mapping[str, Any]:
        return node.props

    def children(self, node: Element) -> Sequence[Any]:
        return node.children

    def clone(self, node: Element, attributes: Mapping[str, Any], children: Sequence[Any]) -> Element:
        return Element(type=node.type, props=attributes, children=tuple(children))


DEFAULT_ADAPTER = ElementAdapter()
