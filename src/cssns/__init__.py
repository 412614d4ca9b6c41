from __future__ import annotations

"""
cssns: namespaced CSS class names for declarative UI trees.
"""

import logging

from cssns.api import CssNs, apply_to_tree, auto_apply, create_css_ns, normalize_class_list
from cssns.core.options.resolver import resolve_options
from cssns.core.tree.adapters import ElementAdapter, TreeAdapter
from cssns.domain.errors import InvalidOptions
from cssns.domain.options import Options
from cssns.domain.tree_models import Element, h

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CssNs",
    "Element",
    "ElementAdapter",
    "InvalidOptions",
    "Options",
    "TreeAdapter",
    "apply_to_tree",
    "auto_apply",
    "create_css_ns",
    "h",
    "normalize_class_list",
    "resolve_options",
]
