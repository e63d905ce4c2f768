"""Namespaced action type strings."""

from __future__ import annotations

from .errors import InvalidActionNameError, InvalidActionTypeError, InvalidNamespaceError

SEPARATOR = "/"


def validate_namespace(namespace: str) -> str:
    """
    Check that a namespace can prefix action types.

    Nested namespaces like ``"app/counter"`` are allowed, but the namespace
    may not be blank or end with the separator.

    Raises:
        InvalidNamespaceError: If the namespace is unusable.
    """
    if not isinstance(namespace, str):
        raise InvalidNamespaceError(
            f"Namespace must be a string, not {type(namespace).__name__}"
        )
    if not namespace.strip():
        raise InvalidNamespaceError("Namespace must be a non-empty string")
    if namespace.endswith(SEPARATOR):
        raise InvalidNamespaceError(
            f"Namespace {namespace!r} must not end with {SEPARATOR!r}"
        )
    return namespace


def validate_action_name(action_name: str) -> str:
    """
    Check that an action name can follow the namespace.

    Raises:
        InvalidActionNameError: If the name is blank or contains the separator.
    """
    if not isinstance(action_name, str):
        raise InvalidActionNameError(
            f"Action name must be a string, not {type(action_name).__name__}"
        )
    if not action_name:
        raise InvalidActionNameError("Action name must be a non-empty string")
    if SEPARATOR in action_name:
        raise InvalidActionNameError(
            f"Action name {action_name!r} must not contain {SEPARATOR!r}"
        )
    return action_name


def make_action_type(namespace: str, action_name: str) -> str:
    """
    Build the action type for an action defined on a duck.

    Example:
        ```python
        make_action_type("counter", "INCREMENT")  # "counter/INCREMENT"
        ```
    """
    validate_namespace(namespace)
    validate_action_name(action_name)
    return f"{namespace}{SEPARATOR}{action_name}"


def split_action_type(action_type: str) -> tuple[str, str]:
    """
    Split an action type into ``(namespace, action_name)``.

    Splits on the last separator, so nested namespaces survive intact.

    Raises:
        InvalidActionTypeError: If there is no namespace prefix.
    """
    namespace, separator, action_name = action_type.rpartition(SEPARATOR)
    if not separator or not namespace or not action_name:
        raise InvalidActionTypeError(
            f"Action type {action_type!r} is not of the form 'namespace/NAME'"
        )
    return namespace, action_name
