"""Minimal synchronous store that drives a reducer."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .actions import Action
from .types import ActionLike, Reducer, Subscriber

T = TypeVar("T")

# Dispatched once when a store starts without a state
INIT = "@@reducks/INIT"


class Store(Generic[T]):
    """
    Holds the current state and replaces it on every dispatch.

    Subscribers are told about a change only when the reducer returns a
    different object, so a reducer that keeps the same reference for a
    no-op action causes no notification.

    Example:
        ```python
        store = create_store(counter.get_reducer())
        store.subscribe(lambda old, new: print(new.value))

        store.dispatch(increment(10))  # prints 10
        store.dispatch(Action("unrelated/ACTION"))  # prints nothing
        ```
    """

    __slots__ = ("_reducer", "_state", "_subscribers")

    def __init__(self, reducer: Reducer[T], state: T | None = None) -> None:
        """
        Initialize a new store.

        Args:
            reducer: Function (state, action) -> next_state.
            state: Starting state. When omitted the reducer supplies its own
                initial state.
        """
        self._reducer = reducer
        if state is None:
            # Unknown to every reducer, so it returns its initial state
            state = reducer(None, Action(INIT))
        self._state: T = state
        self._subscribers: list[Subscriber[T]] = []

    @property
    def state(self) -> T:
        """Get the current state."""
        return self._state

    def get_state(self) -> T:
        """Get the current state."""
        return self._state

    def dispatch(self, action: ActionLike) -> T:
        """
        Run an action through the reducer.

        Exceptions raised by the reducer propagate and leave the state
        untouched.

        Returns:
            The state after the action.
        """
        old_state = self._state
        new_state = self._reducer(old_state, action)

        if new_state is old_state:
            return old_state

        self._state = new_state

        for subscriber in list(self._subscribers):
            subscriber(old_state, new_state)

        return new_state

    def subscribe(self, callback: Subscriber[T]) -> Callable[[], None]:
        """
        Add a callback for state changes.

        Args:
            callback: A function that receives (old_state, new_state).

        Returns:
            A function to remove the callback.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Store({self._state!r})"


def create_store(reducer: Reducer[T], state: T | None = None) -> Store[T]:
    """
    Create a new store.

    Args:
        reducer: Function (state, action) -> next_state.
        state: Optional starting state.

    Returns:
        A Store instance.
    """
    return Store(reducer, state)
