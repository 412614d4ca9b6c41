from __future__ import annotations

"""
UI Tree Walker.

Rewrites class attributes throughout a literal element tree. The walk is a
pure structural map: it follows the child links present in the data it was
handed and never calls a component reference, so classes authored inside
another component's own output are out of reach by construction.
"""

import logging
from typing import Any, Dict, List, Optional

from cssns.core.classes.normalizer import normalize_class_list
from cssns.core.tree.adapters import DEFAULT_ADAPTER, TreeAdapter
from cssns.domain.options import Options

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def apply_to_tree(options: Options, node: Any, adapter: Optional[TreeAdapter] = None) -> Any:
    """
    Produce a structural clone of 'node' with every class attribute namespaced.

    Host elements and component references are handled alike: both get their
    class attribute rewritten and both have their literal children walked.
    Leaves (text, numbers, None, booleans...) are returned unchanged.

    Args:
        options: Resolved namespacing options.
        node: Root of the literal tree, or a leaf value.
        adapter: Tree library adapter (defaults to the bundled Element model).

    Returns:
        Any: The rewritten tree. The input is never mutated.
    """
    adapter = adapter or DEFAULT_ADAPTER
    stats = {"nodes": 0, "rewritten": 0}
    result = _walk(node, options, adapter, stats)
    if stats["nodes"]:
        logger.debug(
            f"Namespaced tree for '{options.namespace}': "
            f"{stats['nodes']} nodes visited, {stats['rewritten']} class attributes rewritten."
        )
    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (RECURSION)
# -----------------------------------------------------------------------------

def _walk(node: Any, options: Options, adapter: TreeAdapter, stats: Dict[str, int]) -> Any:
    """Depth-first rewrite of one node and its literal descendants."""
    if not adapter.is_node(node):
        return node

    stats["nodes"] += 1
    attributes: Dict[str, Any] = dict(adapter.attributes(node))
    key = adapter.class_attribute
    if key in attributes:
        attributes[key] = normalize_class_list(options, attributes[key])
        stats["rewritten"] += 1

    children: List[Any] = [
        _walk(child, options, adapter, stats) for child in adapter.children(node)
    ]
    return adapter.clone(node, attributes, children)
