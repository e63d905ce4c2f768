"""Type definitions for reducks."""

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

# Type variables
T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
P_contra = TypeVar("P_contra", contravariant=True)

# What a handler may hand back besides the state itself or the initial state
PartialState = Mapping[str, Any] | BaseModel


class ActionLike(Protocol):
    """Protocol for anything the reducer accepts as an action."""

    @property
    def type(self) -> str:
        """Namespaced action type."""
        ...


class Handler(Protocol[T, P_contra]):
    """Protocol for per-action handlers."""

    def __call__(self, state: T, payload: P_contra) -> T | PartialState:
        """Compute the change one action makes to the state."""
        ...


class Reducer(Protocol[T]):
    """Protocol for reducer functions."""

    def __call__(self, state: T | None, action: ActionLike) -> T:
        """Process an action and return the next state."""
        ...


class Subscriber(Protocol[T_contra]):
    """Protocol for store change callbacks."""

    def __call__(self, old_value: T_contra, new_value: T_contra) -> None:
        """Called when the state reference changes."""
        ...
