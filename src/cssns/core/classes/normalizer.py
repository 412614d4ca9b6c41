from __future__ import annotations

"""
Class-List Normalizer.

Accepts a class list in any of the supported shapes (string, sequence or
mapping of flags), converges it on an ordered list of tokens and serializes
the classified tokens back to a single space-joined string.
"""

from collections.abc import Iterable, Mapping
from typing import Any, List

from cssns.core.classes.classifier import classify_token
from cssns.domain.options import Options

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_class_list(options: Options, value: Any) -> str:
    """
    Namespace every token of a class list.

    Tokens are classified independently and in input order. Two input tokens
    classifying to the same output both appear in the result.

    Args:
        options: Resolved namespacing options.
        value: String, sequence, mapping or falsy value.

    Returns:
        str: Space-joined classes ("" for falsy or empty input).
    """
    return " ".join(classify_token(token, options) for token in tokenize_class_list(value))


def tokenize_class_list(value: Any) -> List[str]:
    """
    Convert any supported class-list shape to its ordered tokens.

    Falsy entries are discarded; non-string truthy entries are coerced with
    str() before splitting on whitespace.

    Args:
        value: Raw class-list input.

    Returns:
        List[str]: Non-empty tokens in input (or key insertion) order.
    """
    if not value:
        return []
    if isinstance(value, str):
        return _tokenize_string(value)
    if isinstance(value, Mapping):
        return _tokenize_mapping(value)
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        return _tokenize_iterable(value)
    return _tokenize_string(str(value))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS (ONE TOKENIZER PER INPUT SHAPE)
# -----------------------------------------------------------------------------

def _tokenize_string(text: str) -> List[str]:
    # str.split() with no argument drops empty runs
    return text.split()


def _tokenize_mapping(flags: Mapping) -> List[str]:
    tokens: List[str] = []
    for key, enabled in flags.items():
        if enabled and key:
            tokens.extend(_tokenize_string(str(key)))
    return tokens


def _tokenize_iterable(items: Iterable) -> List[str]:
    tokens: List[str] = []
    for item in items:
        if item:
            tokens.extend(_tokenize_string(str(item)))
    return tokens
