"""Duck builder - namespaced action creators plus one reducer."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .actions import ActionCreator
from .errors import DuckSealedError, DuplicateActionError
from .identifiers import make_action_type, validate_action_name, validate_namespace
from .merge import shallow_merge
from .types import ActionLike, Handler

logger = logging.getLogger(__name__)

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


class DuckReducer(Generic[T]):
    """
    The reducer synthesized by ``Duck.get_reducer()``.

    Calling it with ``(state, action)`` looks up the handler for
    ``action.type`` and applies it:

    - unknown action type: ``state`` is returned as is
    - handler returns ``state``: ``state`` is returned as is
    - handler returns the initial state: the initial state is returned,
      nothing from ``state`` is kept
    - anything else is a partial update, shallow-merged over ``state``

    ``state=None`` means "no state yet" and is replaced by the initial state.
    """

    __slots__ = ("_namespace", "_initial", "_handlers")

    def __init__(
        self,
        namespace: str,
        initial_state: T,
        handlers: Mapping[str, Handler[T, Any]],
    ) -> None:
        self._namespace = namespace
        self._initial = initial_state
        self._handlers: Mapping[str, Handler[T, Any]] = MappingProxyType(dict(handlers))

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def initial_state(self) -> T:
        return self._initial

    @property
    def action_types(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def handles(self, action: ActionLike | str) -> bool:
        """Check whether this reducer has a handler for an action or type."""
        action_type = action if isinstance(action, str) else getattr(action, "type", None)
        return action_type in self._handlers

    def __call__(self, state: T | None, action: ActionLike) -> T:
        if state is None:
            state = self._initial

        handler = self._handlers.get(action.type)
        if handler is None:
            logger.debug("%s: no handler for %r", self._namespace, action.type)
            return state

        result = handler(state, getattr(action, "payload", None))

        if result is state:
            return state
        if result is self._initial:
            return self._initial
        return shallow_merge(state, result)

    def __repr__(self) -> str:
        return f"DuckReducer({self._namespace!r}, actions={len(self._handlers)})"


class Duck(Generic[T]):
    """
    Builder for one slice of state.

    Define every action first, then hand the reducer to the store. The
    handler table is frozen by the first ``get_reducer()`` call.

    Example:
        ```python
        class CounterState(BaseModel):
            value: int = 0

        initial = CounterState()
        counter = create_duck("counter", initial)

        increment = counter.define_action(
            "INCREMENT", lambda state, payload: {"value": state.value + payload}
        )

        @counter.action("RESET")
        def reset(state, payload):
            return initial

        reducer = counter.get_reducer()
        reducer(None, increment(10))  # CounterState(value=10)
        ```
    """

    __slots__ = ("_namespace", "_initial", "_handlers", "_creators", "_reducer")

    def __init__(self, namespace: str, initial_state: T) -> None:
        self._namespace = validate_namespace(namespace)
        self._initial = initial_state
        self._handlers: dict[str, Handler[T, Any]] = {}
        self._creators: dict[str, ActionCreator[Any]] = {}
        self._reducer: DuckReducer[T] | None = None

    @property
    def namespace(self) -> str:
        """Prefix of every action type this duck defines."""
        return self._namespace

    @property
    def initial_state(self) -> T:
        """State before any action, and the value handlers return to reset."""
        return self._initial

    @property
    def sealed(self) -> bool:
        """Whether the reducer has been handed out."""
        return self._reducer is not None

    @property
    def action_types(self) -> tuple[str, ...]:
        """Registered action types, in definition order."""
        return tuple(self._handlers)

    @property
    def actions(self) -> Mapping[str, ActionCreator[Any]]:
        """Action creators by action name."""
        return MappingProxyType(self._creators)

    def action_type(self, action_name: str) -> str:
        """Derive the action type for a name without defining it."""
        return make_action_type(self._namespace, action_name)

    def define_action(
        self,
        action_name: str,
        handler: Handler[T, Any],
    ) -> ActionCreator[Any]:
        """
        Register a handler and return the matching action creator.

        Args:
            action_name: Name unique within this duck, e.g. ``"INCREMENT"``.
            handler: Function ``(state, payload) -> result`` where result is
                ``state`` (no change), the initial state (reset) or the
                changed fields.

        Returns:
            An ActionCreator producing ``{type: "<namespace>/<name>", payload}``.

        Raises:
            DuckSealedError: If ``get_reducer()`` has already been called.
            DuplicateActionError: If ``action_name`` is already defined.
            TypeError: If ``handler`` is not callable.
        """
        validate_action_name(action_name)
        if self._reducer is not None:
            raise DuckSealedError(self._namespace, action_name)
        if not callable(handler):
            raise TypeError(f"Handler for {action_name!r} must be callable")

        creator: ActionCreator[Any] = ActionCreator(self._namespace, action_name)
        if creator.type in self._handlers:
            raise DuplicateActionError(creator.type)

        self._handlers[creator.type] = handler
        self._creators[action_name] = creator
        logger.debug("Defined action %s", creator.type)
        return creator

    def action(self, action_name: str | None = None) -> Callable[[F], ActionCreator[Any]]:
        """
        Decorator form of ``define_action``.

        The decorated function becomes the handler and its name is bound to
        the action creator. Without ``action_name`` the function name is used.

        Example:
            ```python
            @counter.action("DECREMENT")
            def decrement(state, payload):
                return {"value": state.value - payload}

            decrement(3)  # Action("counter/DECREMENT", 3)
            ```
        """

        def decorator(handler: F) -> ActionCreator[Any]:
            name = action_name if action_name is not None else handler.__name__
            return self.define_action(name, handler)

        return decorator

    def get_reducer(self) -> DuckReducer[T]:
        """
        Return the reducer, sealing the duck on the first call.

        Later calls return the same reducer object.
        """
        if self._reducer is None:
            self._reducer = DuckReducer(self._namespace, self._initial, self._handlers)
            logger.debug(
                "Sealed duck %r with %d action(s)", self._namespace, len(self._handlers)
            )
        return self._reducer

    def seal(self) -> DuckReducer[T]:
        """Alias of ``get_reducer()`` for code that only wants to freeze."""
        return self.get_reducer()

    def __contains__(self, action: object) -> bool:
        if isinstance(action, ActionCreator):
            return action.type in self._handlers
        if not isinstance(action, str):
            return False
        return action in self._creators or action in self._handlers

    def __repr__(self) -> str:
        state = "sealed" if self.sealed else "open"
        return f"Duck({self._namespace!r}, actions={len(self._handlers)}, {state})"


def create_duck(namespace: str, initial_state: T) -> Duck[T]:
    """
    Create a new duck.

    Args:
        namespace: Prefix for every action type, e.g. ``"counter"``.
        initial_state: State before any action. Treat it as immutable.

    Returns:
        A Duck instance ready for ``define_action``.

    Raises:
        InvalidNamespaceError: If ``namespace`` is not a non-empty string.
    """
    return Duck(namespace, initial_state)
