from __future__ import annotations

"""
Class Token Classifier.

Decides, token by token, whether a class belongs to the current component and
produces its namespaced form.
"""

from cssns.core.classes.patterns import matches
from cssns.domain.constants import NAMESPACE_GLUE
from cssns.domain.options import Options

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_token(token: str, options: Options) -> str:
    """
    Map one class token to its namespaced form.

    Decision order (first match wins):
      1. 'self_' matches: the bare namespace.
      2. Eligible when 'include' is unset or matches, and 'exclude' is unset
         or does not match: namespace + glue + token.
      3. Otherwise the token is returned unchanged.

    Args:
        token: A single non-empty class token.
        options: Resolved namespacing options.

    Returns:
        str: The classified token.
    """
    if matches(token, options.self_):
        return options.namespace

    if is_eligible(token, options):
        return f"{options.namespace}{NAMESPACE_GLUE}{token}"
    return token


def is_eligible(token: str, options: Options) -> bool:
    """Return True if the include/exclude rules allow prefixing 'token'."""
    if options.include is not None and not matches(token, options.include):
        return False
    return not matches(token, options.exclude)
