"""
Todo App - Two ducks sharing one screen.

Demonstrates:
- Separate namespaces: "todos/..." and "filter/..." never collide
- Partial updates: handlers return only the fields they change
- Declining a change: returning the state keeps the same reference
"""

from typing import Literal

from pydantic import BaseModel
from textual.app import App, ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Static

from reducks import create_duck, create_store


# --- Models ---


class TodoItem(BaseModel):
    id: int
    text: str
    completed: bool = False


class TodoState(BaseModel):
    items: list[TodoItem] = []
    next_id: int = 1


class FilterState(BaseModel):
    show: Literal["all", "active", "completed"] = "all"


# --- Todos duck ---

todos = create_duck("todos", TodoState())


@todos.action("ADD")
def add_todo(state: TodoState, text: str) -> TodoState | dict:
    if not text.strip():
        return state
    item = TodoItem(id=state.next_id, text=text.strip())
    return {"items": [*state.items, item], "next_id": state.next_id + 1}


@todos.action("TOGGLE")
def toggle_todo(state: TodoState, todo_id: int) -> dict:
    return {
        "items": [
            item.model_copy(update={"completed": not item.completed})
            if item.id == todo_id else item
            for item in state.items
        ]
    }


@todos.action("DELETE")
def delete_todo(state: TodoState, todo_id: int) -> dict:
    return {"items": [item for item in state.items if item.id != todo_id]}


@todos.action("CLEAR_COMPLETED")
def clear_completed(state: TodoState, payload: None) -> TodoState | dict:
    remaining = [item for item in state.items if not item.completed]
    if len(remaining) == len(state.items):
        return state
    return {"items": remaining}


# --- Filter duck ---

visibility = create_duck("filter", FilterState())


@visibility.action("SET")
def set_filter(state: FilterState, show: str) -> FilterState | dict:
    if show == state.show:
        return state
    return {"show": show}


# --- App ---


class TodoApp(App):
    """Todo list backed by two ducks and two stores."""

    CSS = """
    #new-todo {
        width: 1fr;
    }
    .todo {
        height: 3;
    }
    .todo Label {
        width: 1fr;
        padding: 1;
    }
    .completed Label {
        text-style: strike;
        color: $text-muted;
    }
    #summary {
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("a", "show('all')", "All"),
        ("t", "show('active')", "Active"),
        ("d", "show('completed')", "Completed"),
        ("c", "clear", "Clear completed"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="entry"):
            yield Input(placeholder="What needs to be done?", id="new-todo")
            yield Button("Add", id="add", variant="primary")
        yield VerticalScroll(id="items")
        yield Static(id="summary")
        yield Footer()

    async def on_mount(self) -> None:
        self.todos = create_store(todos.get_reducer())
        self.visibility = create_store(visibility.get_reducer())
        self.todos.subscribe(lambda old, new: self.call_later(self.refresh_items))
        self.visibility.subscribe(lambda old, new: self.call_later(self.refresh_items))
        await self.refresh_items()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "add":
            self._add_todo()
        elif button_id.startswith("toggle-"):
            self.todos.dispatch(toggle_todo(int(button_id.removeprefix("toggle-"))))
        elif button_id.startswith("delete-"):
            self.todos.dispatch(delete_todo(int(button_id.removeprefix("delete-"))))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._add_todo()

    def action_show(self, show: str) -> None:
        self.visibility.dispatch(set_filter(show))

    def action_clear(self) -> None:
        self.todos.dispatch(clear_completed())

    def _add_todo(self) -> None:
        entry = self.query_one("#new-todo", Input)
        self.todos.dispatch(add_todo(entry.value))
        entry.value = ""

    def _visible(self) -> list[TodoItem]:
        items = self.todos.state.items
        match self.visibility.state.show:
            case "active":
                return [item for item in items if not item.completed]
            case "completed":
                return [item for item in items if item.completed]
        return items

    async def refresh_items(self) -> None:
        container = self.query_one("#items", VerticalScroll)
        await container.remove_children()
        rows = []
        for item in self._visible():
            row = Horizontal(
                Button("✓" if item.completed else "○", id=f"toggle-{item.id}"),
                Label(item.text),
                Button("×", id=f"delete-{item.id}", variant="error"),
                classes="todo completed" if item.completed else "todo",
            )
            rows.append(row)
        await container.mount_all(rows)

        active = sum(1 for item in self.todos.state.items if not item.completed)
        self.query_one("#summary", Static).update(
            f"{active} item(s) left - showing {self.visibility.state.show}"
        )


if __name__ == "__main__":
    TodoApp().run()
