"""
reducks - namespaced actions and one reducer per slice of state.

A duck bundles a namespace, an initial state and a table of per-action
handlers. Each ``define_action`` call returns an action creator and every
handler shares the ``(state, payload) -> changes`` signature, so there are
no action type constants or dispatch ``match`` blocks to keep in sync.

Key Features:
- create_duck: Builder bound to a namespace and an initial state
- define_action / @duck.action: Register handlers, get action creators
- get_reducer: One pure reducer with shallow merge and reset convention
- create_store: Small synchronous store for tests and examples

Example:
    ```python
    from pydantic import BaseModel
    from reducks import create_duck, create_store

    class CounterState(BaseModel):
        value: int = 0

    initial = CounterState()
    counter = create_duck("counter", initial)

    @counter.action("INCREMENT")
    def increment(state: CounterState, payload: dict) -> dict:
        return {"value": state.value + payload["delta"]}

    @counter.action("RESET")
    def reset(state: CounterState, payload: None) -> CounterState:
        return initial

    store = create_store(counter.get_reducer())
    store.dispatch(increment({"delta": 10}))  # CounterState(value=10)
    store.dispatch(reset())                   # initial, same object
    ```
"""

# Builder
from .duck import (
    Duck,
    DuckReducer,
    create_duck,
)

# Actions
from .actions import (
    Action,
    ActionCreator,
)

# Action types
from .identifiers import (
    make_action_type,
    split_action_type,
)

# Merge
from .merge import (
    shallow_merge,
)

# Store
from .store import (
    Store,
    create_store,
)

# Errors
from .errors import (
    DuckError,
    DuckSealedError,
    DuplicateActionError,
    InvalidActionNameError,
    InvalidActionTypeError,
    InvalidNamespaceError,
    InvalidPartialError,
)

# Types
from .types import (
    ActionLike,
    Handler,
    PartialState,
    Reducer,
    Subscriber,
)

__version__ = "0.1.0a1"

__all__ = [
    # Builder
    "Duck",
    "DuckReducer",
    "create_duck",
    # Actions
    "Action",
    "ActionCreator",
    # Action types
    "make_action_type",
    "split_action_type",
    # Merge
    "shallow_merge",
    # Store
    "Store",
    "create_store",
    # Errors
    "DuckError",
    "DuckSealedError",
    "DuplicateActionError",
    "InvalidActionNameError",
    "InvalidActionTypeError",
    "InvalidNamespaceError",
    "InvalidPartialError",
    # Types
    "ActionLike",
    "Handler",
    "PartialState",
    "Reducer",
    "Subscriber",
]
