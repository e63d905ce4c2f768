"""Exceptions raised by reducks."""

from __future__ import annotations


class DuckError(Exception):
    """Base class for all reducks errors."""


class InvalidNamespaceError(DuckError, ValueError):
    """Raised when a duck is created with an unusable namespace."""


class InvalidActionNameError(DuckError, ValueError):
    """Raised when an action name cannot be turned into an action type."""


class InvalidActionTypeError(DuckError, ValueError):
    """Raised when an action type string has no namespace prefix."""


class DuplicateActionError(DuckError, ValueError):
    """Raised when the same action name is defined twice on one duck."""

    def __init__(self, action_type: str) -> None:
        super().__init__(f"Action {action_type!r} is already defined")
        self.action_type = action_type


class DuckSealedError(DuckError, RuntimeError):
    """Raised when defining an action after the reducer has been handed out."""

    def __init__(self, namespace: str, action_name: str) -> None:
        super().__init__(
            f"Cannot define {action_name!r}: duck {namespace!r} is sealed. "
            f"Define every action before calling get_reducer()."
        )
        self.namespace = namespace
        self.action_name = action_name


class InvalidPartialError(DuckError, TypeError):
    """Raised when a handler result cannot be merged into the state."""
