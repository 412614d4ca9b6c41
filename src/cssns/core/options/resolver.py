from __future__ import annotations

"""
Options Resolution Service.

Acts as the single entry gate for namespacing options. Converts a bare
namespace, a file path or a partial mapping into the canonical, immutable
Options record. Resolution is idempotent: an Options instance passes through
untouched.
"""

import logging
import os
import re
from collections.abc import Mapping
from typing import Any

from cssns.core.classes.patterns import compile_pattern
from cssns.domain.constants import OPTION_KEYS, PATH_SEPARATORS, RECOGNIZED_EXTENSIONS
from cssns.domain.errors import InvalidOptions
from cssns.domain.options import Options

logger = logging.getLogger(__name__)

_SEPARATOR_RX = re.compile("[" + re.escape("".join(PATH_SEPARATORS)) + "]")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_options(value: Any) -> Options:
    """
    Normalize heterogeneous caller input into an Options record.

    Accepted shapes:
      - Options: returned as-is.
      - Mapping with a 'namespace' key (plus optional 'include', 'exclude',
        'self' / 'self_' rules as regex strings or compiled patterns).
      - str or os.PathLike: a bare namespace, or a file path whose final
        segment (minus a recognized extension) becomes the namespace.

    Args:
        value: Raw options input.

    Returns:
        Options: The canonical options record.

    Raises:
        InvalidOptions: If no usable namespace can be derived.
    """
    if isinstance(value, Options):
        return value

    if isinstance(value, Mapping):
        return _from_mapping(value)

    if isinstance(value, (str, os.PathLike)):
        namespace = derive_namespace(os.fspath(value))
        return Options(namespace=_require_namespace(namespace, value))

    raise InvalidOptions(
        f"Invalid options type: expected str, path, mapping or Options, "
        f"received {type(value).__name__}.",
        value,
    )


def derive_namespace(text: str) -> str:
    """
    Extract a namespace from a bare name or a file-path-like string.

    Examples:
        "MyComponent"              -> "MyComponent"
        "/path/to/MyComponent.jsx" -> "MyComponent"
        "../MyComponent.jsx"       -> "MyComponent"

    Args:
        text: Namespace or path.

    Returns:
        str: The derived namespace (possibly empty).
    """
    name = _SEPARATOR_RX.split(text.strip())[-1]
    lowered = name.lower()
    for ext in RECOGNIZED_EXTENSIONS:
        if lowered.endswith(ext) and len(name) > len(ext):
            name = name[: -len(ext)]
            break
    if name != text:
        logger.debug(f"Derived namespace '{name}' from '{text}'.")
    return name

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _from_mapping(raw: Mapping) -> Options:
    """Build Options from a partial mapping, filling absent rules with None."""
    if "namespace" not in raw:
        raise InvalidOptions("Invalid options: missing 'namespace' field.", raw)

    unknown = [k for k in raw if k not in OPTION_KEYS]
    if unknown:
        logger.debug(f"Ignoring unknown option keys: {unknown}")

    namespace = raw["namespace"]
    if not isinstance(namespace, str):
        raise InvalidOptions(
            f"Invalid field 'namespace': expected str, received {type(namespace).__name__}.",
            raw,
        )

    self_rule = raw.get("self_", raw.get("self"))
    return Options(
        namespace=_require_namespace(namespace.strip(), raw),
        include=compile_pattern(raw.get("include"), "include"),
        exclude=compile_pattern(raw.get("exclude"), "exclude"),
        self_=compile_pattern(self_rule, "self"),
    )


def _require_namespace(namespace: str, source: Any) -> str:
    """Reject namespaces that could not produce valid class tokens."""
    if not namespace:
        raise InvalidOptions(f"Invalid options: no namespace derivable from {source!r}.", source)
    if any(ch.isspace() for ch in namespace):
        raise InvalidOptions(f"Invalid namespace {namespace!r}: must not contain whitespace.", source)
    return namespace
