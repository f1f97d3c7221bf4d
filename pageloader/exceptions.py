"""
================================================================================
PageLoader Exceptions
================================================================================

Error taxonomy shared by the element utilities and element implementations.

    - PageLoaderException: element lookup / browser IO failed
    - PageLoaderArgumentError: an argument is not a PageObject or element,
      or the element it resolves to does not exist

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum


class PageLoaderException(Exception):
    """Raised when the underlying UI query fails (lookup, timeout, IO)."""
    pass


class ArgumentErrorKind(Enum):
    """Why an argument was rejected."""

    WRONG_TYPE = "wrong_type"
    NON_EXISTING = "non_existing"


class PageLoaderArgumentError(ValueError):
    """
    Raised when a utility function receives an unusable argument.

    Attributes:
        kind: ArgumentErrorKind describing the failure
        operation: Name of the utility that rejected the argument

    Usage:
        >>> try:
        ...     has_class(item, "active")
        ... except PageLoaderArgumentError as e:
        ...     if e.kind is ArgumentErrorKind.NON_EXISTING:
        ...         ...
    """

    def __init__(self, kind: ArgumentErrorKind, operation: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.operation = operation
        self.message = message

    @classmethod
    def on_wrong_type(cls, operation: str) -> "PageLoaderArgumentError":
        return cls(
            ArgumentErrorKind.WRONG_TYPE,
            operation,
            f"'{operation}' may only be called on PageObjects "
            f"or PageLoaderElements",
        )

    @classmethod
    def on_non_existing(cls, operation: str) -> "PageLoaderArgumentError":
        return cls(
            ArgumentErrorKind.NON_EXISTING,
            operation,
            f"'{operation}' is being called on a non-existent "
            f"PageObject or PageLoaderElement. If this "
            f"is intentional, use 'exists' instead.",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, operation={self.operation!r})"


# Short name used throughout the page-object helpers
WrongTypeError = PageLoaderArgumentError


__all__ = [
    "ArgumentErrorKind",
    "PageLoaderArgumentError",
    "PageLoaderException",
    "WrongTypeError",
]
