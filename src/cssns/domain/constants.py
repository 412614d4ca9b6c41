from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the options resolver, the token
classifier and the tree walker.
"""

from typing import Tuple

# Separator placed between the namespace and a prefixed token
NAMESPACE_GLUE = "-"

# Attribute key holding the class list on bundled Element nodes
CLASS_ATTRIBUTE = "class"

# -----------------------------------------------------------------------------
# PATH DERIVATION
# -----------------------------------------------------------------------------

PATH_SEPARATORS: Tuple[str, ...] = ("/", "\\")

# Source-file extensions stripped when a namespace is derived from a path.
# Longer suffixes first so ".d.ts" wins over ".ts".
RECOGNIZED_EXTENSIONS: Tuple[str, ...] = (
    ".d.ts",
    ".jsx", ".tsx", ".mjs", ".cjs", ".js", ".ts",
    ".vue", ".svelte",
    ".pyc", ".py",
    ".html", ".htm",
    ".css", ".scss", ".sass", ".less",
)

# Keys understood in mapping-style options
OPTION_KEYS: Tuple[str, ...] = ("namespace", "include", "exclude", "self", "self_")
