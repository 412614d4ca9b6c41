from __future__ import annotations

"""
Class Token Pattern Matching.

Compiles caller-supplied include/exclude/self rules into regex objects and
evaluates them against individual class tokens. Matching is unanchored
(re.search), so prefix, suffix or whole-token semantics come from the anchors
the caller writes.
"""

import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_pattern(pattern: Any, field: str = "pattern") -> Optional[re.Pattern]:
    """
    Turn a raw rule into a compiled Pattern object.

    Malformed regex strings are discarded (the rule behaves as unset) so that
    a typo in one rule does not take the whole component down.

    Args:
        pattern: None, a regex source string or an already compiled pattern.
        field: Option name, used in diagnostics.

    Returns:
        Optional[re.Pattern]: Compiled pattern, or None when unset/unusable.
    """
    if pattern is None:
        return None
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        try:
            return re.compile(pattern)
        except re.error as e:
            logger.warning(f"Discarding malformed '{field}' pattern {pattern!r}: {e}")
            return None

    logger.warning(
        f"Discarding '{field}' pattern of unsupported type {type(pattern).__name__}."
    )
    return None


def matches(token: str, pattern: Optional[re.Pattern]) -> bool:
    """
    Verify if a class token satisfies a compiled rule.

    Args:
        token: Class token to evaluate.
        pattern: Compiled rule, or None.

    Returns:
        bool: True on a match, False if the rule is unset or does not match.
    """
    if pattern is None:
        return False
    return pattern.search(token) is not None
