"""
Bridge Errors — everything the registration bridge can raise.

All errors surface synchronously to the caller. None are retried: the input
catalog is static, so a retry would reproduce the same error.
"""

from __future__ import annotations


class SeverityBridgeError(Exception):
    """Base class for all severity bridge errors."""


class InvalidArgumentError(SeverityBridgeError, ValueError):
    """An empty or missing argument was passed to identifier derivation."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"'{argument}' must be a non-empty string")


class CatalogUnavailableError(SeverityBridgeError):
    """The external rule catalog could not be read."""


class DuplicateGroupError(SeverityBridgeError):
    """Two group declarations share a key."""

    def __init__(self, key: str, existing_title: str, new_title: str) -> None:
        self.key = key
        self.existing_title = existing_title
        self.new_title = new_title
        if existing_title == new_title:
            detail = f"group '{key}' is declared more than once"
        else:
            detail = (
                f"group '{key}' is already declared with title "
                f"'{existing_title}', cannot redeclare it as '{new_title}'"
            )
        super().__init__(detail)


class MetadataEncodingError(SeverityBridgeError):
    """A declaration property has a shape the host metadata decoder cannot carry."""

    def __init__(self, property_name: str, value: object) -> None:
        self.property_name = property_name
        self.value = value
        super().__init__(
            f"Property '{property_name}' has value {value!r} "
            f"({type(value).__name__}), which cannot be encoded as group metadata"
        )
