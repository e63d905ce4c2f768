"""Shallow merge of handler results into state."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from .errors import InvalidPartialError

T = TypeVar("T")


def partial_fields(partial: Any, state: Any = None) -> dict[str, Any]:
    """
    Normalize a handler result into a ``{field: value}`` dict.

    A model of the same type as ``state`` is a complete record and
    contributes every field. Any other pydantic model contributes only the
    fields that were explicitly set, so a model with every field optional
    works as a partial update.

    Raises:
        InvalidPartialError: If the result is not a mapping or a model, or
            is a patch model with no fields set.
    """
    if isinstance(partial, BaseModel):
        if isinstance(partial, type(state)):
            fields = {name: getattr(partial, name) for name in type(partial).model_fields}
            fields.update(partial.__pydantic_extra__ or {})
            return fields
        if not partial.model_fields_set:
            raise InvalidPartialError(
                f"Handler returned {type(partial).__name__} with no fields set"
            )
        return {name: getattr(partial, name) for name in partial.model_fields_set}
    if isinstance(partial, Mapping):
        return dict(partial)
    raise InvalidPartialError(
        f"Handler returned {type(partial).__name__}, expected a mapping of "
        f"changed fields, the current state, or the initial state"
    )


def _check_fields(state: Any, names: set[str], allowed: set[str]) -> None:
    unknown = names - allowed
    if unknown:
        raise InvalidPartialError(
            f"{type(state).__name__} has no field(s) "
            f"{', '.join(sorted(unknown))}"
        )


def shallow_merge(state: T, partial: Any) -> T:
    """
    Overwrite the fields of ``state`` present in ``partial``.

    One level deep only: nested values are replaced, never merged.
    An empty partial returns ``state`` itself.

    Args:
        state: A mapping, a pydantic model, or a dataclass instance.
        partial: A mapping of changed fields, a complete model of the
            state's type, or a pydantic model whose explicitly set fields
            are the changes.

    Returns:
        A new state of the same kind (a plain ``dict`` for mappings).

    Raises:
        InvalidPartialError: If the partial or the state cannot be merged.
    """
    changes = partial_fields(partial, state)
    if not changes:
        return state

    if isinstance(state, BaseModel):
        model_type = type(state)
        if model_type.model_config.get("extra") != "allow":
            _check_fields(state, set(changes), set(model_type.model_fields))
        return state.model_copy(update=changes)

    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        init_fields = {f.name for f in dataclasses.fields(state) if f.init}
        _check_fields(state, set(changes), init_fields)
        try:
            return dataclasses.replace(state, **changes)
        except ValueError as exc:
            raise InvalidPartialError(
                f"Cannot replace fields of {type(state).__name__}: {exc}"
            ) from exc

    if isinstance(state, Mapping):
        return {**state, **changes}  # type: ignore[return-value]

    raise InvalidPartialError(
        f"Cannot merge into state of type {type(state).__name__}; use a "
        f"mapping, a pydantic model, or a dataclass"
    )
