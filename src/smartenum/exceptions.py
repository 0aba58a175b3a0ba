"""
Custom exceptions for smartenum.

Exception Hierarchy:
    SmartEnumError (base)
    ├── InvalidArgumentError
    │   └── DuplicateMemberError
    ├── NotFoundError
    ├── DecodeError
    └── TypeMismatchError

Each subclass also derives from the builtin exception a caller would
naturally catch (``ValueError``, ``LookupError``, ``TypeError``), so code that
does not know about smartenum still handles these errors sensibly.
"""

from __future__ import annotations

from typing import Any


class SmartEnumError(Exception):
    """
    Base exception for all smartenum errors.

    Attributes:
        message: Human-readable error description.
        cause: Optional underlying exception that caused this error.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class InvalidArgumentError(SmartEnumError, ValueError):
    """Raised when an enumeration member is built from invalid arguments."""

    pass


class DuplicateMemberError(InvalidArgumentError):
    """
    Raised when two members of one enumeration type share an id or a name.

    Detected when the registry scans the type, which happens once at class
    creation and again whenever the scan is not memoized.
    """

    def __init__(self, enum_type: type, field: str, value: Any) -> None:
        self.enum_type = enum_type
        self.field = field
        self.value = value
        super().__init__(
            f"Duplicate {field} {value!r} in enumeration {enum_type.__name__}."
        )


class NotFoundError(SmartEnumError, LookupError):
    """
    Raised when a lookup by id, name or hidden value matches no member.

    Attributes:
        enum_type: The enumeration type that was searched.
        field: The field used for the lookup (``id``, ``name``, ``hidden value``).
        value: The value that was looked up.
    """

    def __init__(self, enum_type: type, field: str, value: Any) -> None:
        self.enum_type = enum_type
        self.field = field
        self.value = value
        super().__init__(f"No {enum_type.__name__} with {field} {value!r} found.")


class DecodeError(SmartEnumError, ValueError):
    """
    Raised when a token cannot be converted into an enumeration member.

    Either the token has an unsupported shape, or the lookup it triggered
    failed; in the latter case ``cause`` holds the ``NotFoundError``.
    """

    def __init__(
        self,
        enum_type: type,
        token: Any,
        cause: Exception | None = None,
    ) -> None:
        self.enum_type = enum_type
        self.token = token
        super().__init__(
            f"Unable to convert value {token!r} to {enum_type.__name__}.",
            cause=cause,
        )


class TypeMismatchError(SmartEnumError, TypeError):
    """Raised when members of two different enumeration types are compared."""

    def __init__(self, left: type, right: type) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare {left.__name__} with {right.__name__}; "
            "only members of the same enumeration type are ordered."
        )
