"""Actions and the action creators a duck hands out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .identifiers import make_action_type
from .types import ActionLike

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class Action(Generic[P]):
    """
    An immutable message describing one requested state transition.

    Attributes:
        type: Namespaced action type, e.g. ``"counter/INCREMENT"``.
        payload: Whatever the matching handler expects.
    """

    type: str
    payload: P | None = None


class ActionCreator(Generic[P]):
    """
    Callable returned by ``Duck.define_action``.

    Example:
        ```python
        increment = duck.define_action("INCREMENT", on_increment)

        increment.type           # "counter/INCREMENT"
        increment({"delta": 1})  # Action("counter/INCREMENT", {"delta": 1})
        ```
    """

    __slots__ = ("_namespace", "_name", "_type")

    def __init__(self, namespace: str, name: str) -> None:
        self._namespace = namespace
        self._name = name
        self._type = make_action_type(namespace, name)

    @property
    def type(self) -> str:
        """The action type this creator stamps on its actions."""
        return self._type

    @property
    def name(self) -> str:
        """The action name, without namespace."""
        return self._name

    @property
    def namespace(self) -> str:
        """Namespace of the duck that defined this action."""
        return self._namespace

    def __call__(self, payload: P | None = None) -> Action[P]:
        return Action(self._type, payload)

    def match(self, action: ActionLike | Any) -> bool:
        """Check whether an action was made by this creator."""
        return getattr(action, "type", None) == self._type

    def __str__(self) -> str:
        return self._type

    def __repr__(self) -> str:
        return f"ActionCreator({self._type!r})"
