"""
Counter Example - A duck driving a Textual app.

Shows:
- create_duck: Namespace + initial state
- @duck.action: Handlers returning changed fields or the initial state
- create_store: Dispatch loop with change notifications
"""

from pydantic import BaseModel
from textual.app import App, ComposeResult
from textual.widgets import Button, Static

from reducks import create_duck, create_store


# --- State ---


class CounterState(BaseModel):
    value: int = 0
    presses: int = 0


initial_state = CounterState()


# --- Duck ---

counter = create_duck("counter", initial_state)


@counter.action("INCREMENT")
def increment(state: CounterState, payload: dict) -> dict:
    return {"value": state.value + payload["delta"], "presses": state.presses + 1}


@counter.action("DECREMENT")
def decrement(state: CounterState, payload: dict) -> dict:
    return {"value": state.value - payload["delta"], "presses": state.presses + 1}


@counter.action("RESET")
def reset(state: CounterState, payload: None) -> CounterState:
    return initial_state


counter_reducer = counter.get_reducer()


# --- App ---


class Counter(App):
    """A counter whose state lives in a duck."""

    CSS = """
    Screen {
        align: center middle;
    }

    #counter {
        width: 100%;
        height: 3;
        text-align: center;
        text-style: bold;
        background: $primary;
        color: $text;
    }

    Button {
        margin: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("Count: 0", id="counter")
        yield Button("Increment (+10)", id="inc")
        yield Button("Decrement (-3)", id="dec")
        yield Button("Reset", id="reset")

    def on_mount(self) -> None:
        self.store = create_store(counter_reducer)
        self.store.subscribe(self.on_counter_change)
        self._update_display(self.store.state)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "inc":
                self.store.dispatch(increment({"delta": 10}))
            case "dec":
                self.store.dispatch(decrement({"delta": 3}))
            case "reset":
                # Same object as initial_state, so a second reset is silent
                self.store.dispatch(reset())

    def on_counter_change(self, old: CounterState, new: CounterState) -> None:
        self._update_display(new)

    def _update_display(self, state: CounterState) -> None:
        self.query_one("#counter", Static).update(
            f"Count: {state.value} ({state.presses} presses)"
        )


if __name__ == "__main__":
    Counter().run()
