from __future__ import annotations

"""
UI Tree Data Models.

Provides the literal, not-yet-rendered element tree bundled with the library.
An Element is either a host element (its type is a tag string) or a reference
to a component (any other type, usually a callable). Everything that is not an
Element is a leaf.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=True)
class Element:
    """
    Immutable node of a declarative UI tree.

    Elements compare structurally but are not hashable (props is a
    read-only mapping view).

    Attributes:
        type: Tag name for host elements, component reference otherwise.
        props: Attribute mapping (may hold a "class" entry).
        children: Ordered child nodes or leaf values.
    """
    type: Any
    props: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple[Any, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", MappingProxyType(dict(self.props or {})))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_host(self) -> bool:
        """True when the element is a plain tag rather than a component reference."""
        return isinstance(self.type, str)


def h(type_: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> Element:
    """
    Build an Element the way a createElement-style factory does.

    List and tuple children are flattened one level so that generated child
    lists can be passed directly.

    Args:
        type_: Tag string or component reference.
        props: Optional attribute mapping.
        *children: Child nodes or leaf values.

    Returns:
        Element: The new tree node.
    """
    return Element(type=type_, props=props or {}, children=tuple(_flatten_children(children)))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _flatten_children(children: Iterable[Any]) -> List[Any]:
    flat: List[Any] = []
    for child in children:
        if isinstance(child, (list, tuple)):
            flat.extend(child)
        else:
            flat.append(child)
    return flat
