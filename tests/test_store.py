"""Tests for Store."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from reducks import Action, Store, create_duck, create_store


class CounterState(BaseModel):
    count: int = 0


@dataclass
class Increment:
    amount: int = 1
    type: str = "plain/INCREMENT"


def plain_reducer(state: CounterState | None, action) -> CounterState:
    if state is None:
        state = CounterState()
    match action:
        case Increment(amount):
            return state.model_copy(update={"count": state.count + amount})
    return state


@pytest.fixture
def counter():
    initial = CounterState()
    duck = create_duck("counter", initial)
    increment = duck.define_action(
        "INCREMENT", lambda state, payload: {"count": state.count + payload}
    )
    reset = duck.define_action("RESET", lambda state, payload: initial)
    noop = duck.define_action("NOOP", lambda state, payload: state)
    return initial, duck.get_reducer(), increment, reset, noop


class TestCreateStore:
    """Tests for create_store."""

    def test_creates_store(self, counter):
        initial, reducer, *_ = counter
        store = create_store(reducer)

        assert isinstance(store, Store)
        assert store.state is initial
        assert store.get_state() is initial

    def test_store_with_state(self, counter):
        _, reducer, *_ = counter
        state = CounterState(count=3)

        assert create_store(reducer, state).state is state

    def test_plain_reducer_initial_state(self):
        store = create_store(plain_reducer)
        assert store.state == CounterState()

    def test_repr(self, counter):
        _, reducer, *_ = counter
        assert "count=0" in repr(create_store(reducer))


class TestDispatch:
    """Tests for Store.dispatch."""

    def test_dispatch_returns_new_state(self, counter):
        _, reducer, increment, *_ = counter
        store = create_store(reducer)

        assert store.dispatch(increment(10)) == CounterState(count=10)
        assert store.state == CounterState(count=10)

    def test_dispatch_sequence(self, counter):
        initial, reducer, increment, reset, _ = counter
        store = create_store(reducer)

        store.dispatch(increment(10))
        store.dispatch(increment(-3))
        assert store.state.count == 7

        store.dispatch(reset())
        assert store.state is initial

    def test_dispatch_plain_reducer(self):
        store = create_store(plain_reducer)
        store.dispatch(Increment(2))

        assert store.state.count == 2

    def test_failing_handler_keeps_state(self):
        duck = create_duck("counter", CounterState())

        def explode(state, payload):
            raise ValueError("bad payload")

        fail = duck.define_action("FAIL", explode)
        store = create_store(duck.get_reducer())
        before = store.state

        with pytest.raises(ValueError, match="bad payload"):
            store.dispatch(fail())

        assert store.state is before


class TestSubscribe:
    """Tests for change notifications."""

    def test_notifies_on_change(self, counter):
        initial, reducer, increment, *_ = counter
        store = create_store(reducer)
        changes = []
        store.subscribe(lambda old, new: changes.append((old, new)))

        new = store.dispatch(increment(1))

        assert changes == [(initial, new)]

    def test_no_notification_for_unknown_action(self, counter):
        _, reducer, *_ = counter
        store = create_store(reducer)
        changes = []
        store.subscribe(lambda old, new: changes.append((old, new)))

        store.dispatch(Action("unrelated/ACTION"))

        assert changes == []

    def test_no_notification_for_noop_handler(self, counter):
        _, reducer, _, _, noop = counter
        store = create_store(reducer)
        changes = []
        store.subscribe(lambda old, new: changes.append((old, new)))

        store.dispatch(noop())

        assert changes == []

    def test_reset_from_initial_is_silent(self, counter):
        _, reducer, _, reset, _ = counter
        store = create_store(reducer)
        changes = []
        store.subscribe(lambda old, new: changes.append((old, new)))

        store.dispatch(reset())

        assert changes == []

    def test_equal_but_new_state_notifies(self, counter):
        _, reducer, increment, *_ = counter
        store = create_store(reducer)
        changes = []
        store.subscribe(lambda old, new: changes.append((old, new)))

        store.dispatch(increment(0))

        assert len(changes) == 1

    def test_unsubscribe(self, counter):
        _, reducer, increment, *_ = counter
        store = create_store(reducer)
        changes = []

        unsubscribe = store.subscribe(lambda old, new: changes.append(new.count))

        store.dispatch(increment(1))
        unsubscribe()
        store.dispatch(increment(1))

        assert changes == [1]

    def test_unsubscribe_twice(self, counter):
        _, reducer, *_ = counter
        store = create_store(reducer)

        unsubscribe = store.subscribe(lambda old, new: None)
        unsubscribe()
        unsubscribe()
