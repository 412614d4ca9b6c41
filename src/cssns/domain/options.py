from __future__ import annotations

"""
Namespacing Options Model.

Defines the canonical, immutable options record produced by the resolver and
consumed by the classifier, the normalizer and the tree walker.
"""

import re
from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# OPTIONS RECORD
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Options:
    """
    Resolved namespacing options.

    An instance of this class is the "already resolved" form: handing it back
    to the resolver returns it untouched.

    Attributes:
        namespace: Prefix applied to eligible class tokens.
        include: Only tokens matching this pattern are prefixed.
        exclude: Tokens matching this pattern are never prefixed.
        self_: Tokens matching this pattern are replaced by the bare namespace.
    """
    namespace: str
    include: Optional[re.Pattern] = None
    exclude: Optional[re.Pattern] = None
    self_: Optional[re.Pattern] = None
