from __future__ import annotations

"""
Domain Exceptions.
"""


class InvalidOptions(ValueError):
    """
    Raised when no usable namespace can be derived from the caller's options.

    Attributes:
        value: The rejected input, kept for diagnostics.
    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value
