"""
TodoMVC application driver.

``ToDoApp`` performs user workflows against the TodoMVC demo and keeps a
mirror list of the items it expects the application to hold. Actions only
update the mirror; the ``verify_*`` methods compare what the mirror says
with what the page renders and what the application wrote to localStorage.

Two action families also assert as a side effect, because the state they
check is part of what the action establishes:

- ``mark_all_as_completed`` / ``mark_all_as_not_completed`` assert the
  toggle-all control's checked state.
- ``view_all`` / ``view_active`` / ``view_completed`` assert the clicked
  filter link is selected.

``edit_todo`` and ``edit_todo_to_blank`` additionally assert, before typing,
that the editor opened pre-filled with the current name.
"""

import logging
import re
from typing import Any

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from todo_e2e.config import Config, get_config
from todo_e2e.models import SaveMethod, ToDoItem, TodoStatus
from todo_e2e.pages.base_page import BasePage

logger = logging.getLogger(__name__)

# Predicates evaluated in the page by ``wait_for_storage``. Each receives
# ``{key, expected}`` and reads the application's persisted list.
STORAGE_LENGTH_EQUALS = """({key, expected}) =>
    JSON.parse(localStorage.getItem(key) || '[]').length === expected"""

STORAGE_HAS_TITLE = """({key, expected}) =>
    JSON.parse(localStorage.getItem(key) || '[]')
        .map((todo) => todo.title)
        .includes(expected)"""

STORAGE_COMPLETED_COUNT_EQUALS = """({key, expected}) =>
    JSON.parse(localStorage.getItem(key) || '[]')
        .filter((todo) => todo.completed).length === expected"""


def item_count_text(count: int) -> str:
    """Footer counter wording: singular only for exactly one item."""
    noun = "item" if count == 1 else "items"
    return f"{count} {noun} left"


class ToDoApp(BasePage):
    """
    Page object and state mirror for the TodoMVC application.

    Attributes:
        page: Playwright page the driver is bound to.
        todos: Items the application is expected to hold, in display order.
        storage_key: localStorage key the application persists under.
        storage_timeout_ms: Upper bound for localStorage waits.
    """

    def __init__(self, page: Page, base_url: str | None = None, settings: type[Config] | None = None):
        settings = settings or get_config()
        super().__init__(page, base_url or settings.APP_URL)
        self.todos: list[ToDoItem] = []
        self.storage_key = settings.STORAGE_KEY
        self.storage_timeout_ms = settings.STORAGE_TIMEOUT_MS

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def new_todo_field(self) -> Locator:
        return self.page.get_by_placeholder("What needs to be done?")

    @property
    def toggle_all(self) -> Locator:
        return self.page.get_by_label("Mark all as complete")

    @property
    def todo_items(self) -> Locator:
        return self.get_by_test_id("todo-item")

    @property
    def todo_titles(self) -> Locator:
        return self.get_by_test_id("todo-title")

    @property
    def todo_count(self) -> Locator:
        return self.get_by_test_id("todo-count")

    @property
    def clear_completed_button(self) -> Locator:
        return self.page.get_by_role("button", name="Clear completed")

    def filter_link(self, name: str) -> Locator:
        """Locator for the "All", "Active" or "Completed" filter link."""
        return self.page.get_by_role("link", name=name, exact=True)

    def toggle_for(self, todo: ToDoItem) -> Locator:
        """Completion checkbox of the row showing ``todo``."""
        return self.page.locator("li").filter(has_text=todo.name).get_by_label("Toggle Todo")

    def edit_field(self, row: Locator) -> Locator:
        return row.get_by_role("textbox", name="Edit")

    # -------------------------------------------------------------------------
    # Mirror helpers
    # -------------------------------------------------------------------------

    def todo_at(self, index: int) -> ToDoItem:
        """
        Return the mirror item at ``index``.

        Raises:
            IndexError: If ``index`` does not address an existing item.
        """
        if not 0 <= index < len(self.todos):
            raise IndexError(f"No todo at index {index}; the list holds {len(self.todos)} item(s)")
        return self.todos[index]

    def names(self, status: TodoStatus | None = None) -> list[str]:
        """Mirror names in display order, optionally only those with ``status``."""
        return [todo.name for todo in self.todos if status is None or todo.status is status]

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def visit(self) -> "ToDoApp":
        """
        Open the application.

        Returns:
            Self for method chaining.
        """
        self.navigate_to()
        self.wait_for_page_load()
        return self

    def _select_filter(self, name: str) -> None:
        link = self.filter_link(name)
        link.click()
        expect(link).to_have_class("selected")
        logger.debug("Filter %r selected", name)

    def view_all(self) -> None:
        """Show every item; asserts the "All" link is selected."""
        self._select_filter("All")

    def view_active(self) -> None:
        """Show only active items; asserts the "Active" link is selected."""
        self._select_filter("Active")

    def view_completed(self) -> None:
        """Show only completed items; asserts the "Completed" link is selected."""
        self._select_filter("Completed")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def create_new_todo(self) -> ToDoItem:
        """
        Type a freshly named item into the input and submit it.

        Returns:
            The item appended to the mirror.
        """
        todo = ToDoItem()
        self.new_todo_field.fill(todo.name)
        self.new_todo_field.press("Enter")
        self.todos.append(todo)
        logger.debug("Created %r (%d in list)", todo.name, len(self.todos))
        return todo

    def create_new_todos(self, count: int) -> list[ToDoItem]:
        """Create ``count`` items one after another, in order."""
        return [self.create_new_todo() for _ in range(count)]

    def check_todo(self, index: int = 0) -> None:
        """Tick the checkbox of the item at ``index``."""
        todo = self.todo_at(index)
        self.toggle_for(todo).check()
        todo.status = TodoStatus.COMPLETED
        logger.debug("Checked %r", todo.name)

    def uncheck_todo(self, index: int = 0) -> None:
        """Untick the checkbox of the item at ``index``."""
        todo = self.todo_at(index)
        self.toggle_for(todo).uncheck()
        todo.status = TodoStatus.ACTIVE
        logger.debug("Unchecked %r", todo.name)

    def mark_all_as_completed(self) -> None:
        """
        Complete every item with the toggle-all control.

        Asserts the toggle-all control ends up checked.
        """
        self.toggle_all.check()
        expect(self.toggle_all).to_be_checked()
        for todo in self.todos:
            todo.status = TodoStatus.COMPLETED
        logger.debug("Marked all %d item(s) completed", len(self.todos))

    def mark_all_as_not_completed(self) -> None:
        """
        Reactivate every item with the toggle-all control.

        Asserts the toggle-all control ends up unchecked.
        """
        self.toggle_all.uncheck()
        expect(self.toggle_all).not_to_be_checked()
        for todo in self.todos:
            todo.status = TodoStatus.ACTIVE
        logger.debug("Marked all %d item(s) active", len(self.todos))

    def _open_editor(self, index: int) -> Locator:
        todo = self.todo_at(index)
        row = self.todo_items.nth(index)
        row.dblclick()
        editor = self.edit_field(row)
        expect(editor).to_have_value(todo.name)
        return editor

    def _leave_editor(self, editor: Locator, method: SaveMethod) -> None:
        if method is SaveMethod.BLUR:
            editor.dispatch_event("blur")
        else:
            editor.press(method.value)

    def edit_todo(self, index: int, save_method: SaveMethod | str, pad: bool = False) -> None:
        """
        Rename the item at ``index`` through the inline editor.

        Args:
            index: Position of the item in the list.
            save_method: ``Enter`` or ``Blur`` keep the new name,
                ``Escape`` discards it.
            pad: Surround the new name with whitespace, which the
                application is expected to trim.

        Raises:
            ValueError: If ``save_method`` is not a known method.
        """
        method = SaveMethod(save_method)
        replacement = ToDoItem()
        text = f"     {replacement.name}      " if pad else replacement.name

        editor = self._open_editor(index)
        editor.fill(text)
        self._leave_editor(editor, method)

        if method is not SaveMethod.ESCAPE:
            logger.debug("Renamed %r to %r", self.todos[index].name, replacement.name)
            self.todos[index] = replacement

    def edit_todo_to_blank(self, index: int, save_method: SaveMethod | str) -> None:
        """
        Clear the name of the item at ``index``, which deletes it.

        Items after ``index`` move up one position.

        Raises:
            ValueError: If ``save_method`` is not ``Enter`` or ``Blur``.
        """
        method = SaveMethod(save_method)
        if method is SaveMethod.ESCAPE:
            raise ValueError("Blanking an item must be saved with Enter or Blur, not Escape")

        editor = self._open_editor(index)
        editor.fill("")
        self._leave_editor(editor, method)

        removed = self.todos.pop(index)
        removed.status = TodoStatus.DELETED
        logger.debug("Blanked %r, %d item(s) left", removed.name, len(self.todos))

    def clear_completed(self) -> None:
        """
        Remove all completed items with the "Clear completed" button.

        Does nothing when no item is completed, since the application only
        shows the button while there is something to clear.
        """
        if not self.names(TodoStatus.COMPLETED):
            logger.debug("Nothing to clear")
            return
        self.clear_completed_button.click()
        self.todos = [todo for todo in self.todos if todo.status is TodoStatus.ACTIVE]
        logger.debug("Cleared completed, %d item(s) left", len(self.todos))

    # -------------------------------------------------------------------------
    # Display assertions
    # -------------------------------------------------------------------------

    def verify_all_todos_displayed(self) -> None:
        expect(self.todo_titles).to_have_text(self.names())

    def verify_active_todos_displayed(self) -> None:
        expect(self.todo_titles).to_have_text(self.names(TodoStatus.ACTIVE))

    def verify_completed_todos_displayed(self) -> None:
        expect(self.todo_titles).to_have_text(self.names(TodoStatus.COMPLETED))

    def verify_tasks_display_completed(self) -> None:
        """Assert each row is styled completed exactly when its item is."""
        expected = [TodoStatus.COMPLETED.value if todo.completed else "" for todo in self.todos]
        expect(self.todo_items).to_have_class(expected)

    def verify_tasks_display_not_completed(self) -> None:
        """Assert no row carries completed styling."""
        expect(self.todo_items).to_have_class(["" for _ in self.todos])

    def verify_todo_complete(self, index: int = 0) -> None:
        expect(self.todo_items.nth(index)).to_have_class(TodoStatus.COMPLETED.value)

    def verify_todo_not_complete(self, index: int = 0) -> None:
        expect(self.todo_items.nth(index)).not_to_have_class(TodoStatus.COMPLETED.value)

    def verify_input_field_is_empty(self) -> None:
        expect(self.new_todo_field).to_be_empty()

    def verify_item_count_correct(self) -> None:
        """
        Assert the footer counter matches the number of items in the list.

        The same expectation is checked several ways so a change in how the
        counter is marked up shows up as a specific failure.
        """
        count = len(self.todos)
        text = item_count_text(count)

        expect(self.page.get_by_text(text)).to_be_visible()
        expect(self.todo_count).to_have_text(text)
        expect(self.todo_count).to_contain_text(str(count))
        expect(self.todo_count).to_have_text(re.compile(rf"\b{count}\b"))

    def verify_toggle_all_checked(self) -> None:
        expect(self.toggle_all).to_be_checked()

    def verify_toggle_all_not_checked(self) -> None:
        expect(self.toggle_all).not_to_be_checked()

    def verify_clear_completed_button_displayed(self) -> None:
        expect(self.clear_completed_button).to_be_visible()

    def verify_clear_completed_button_not_displayed(self) -> None:
        expect(self.clear_completed_button).not_to_be_visible()

    def verify_controls_disabled_when_editing(self, index: int = 0) -> None:
        """
        Open the editor on the item at ``index`` and assert its checkbox and
        label are hidden, then check localStorage is unaffected.
        """
        todo = self.todo_at(index)
        row = self.todo_items.nth(index)
        row.dblclick()
        expect(row.get_by_role("checkbox")).not_to_be_visible()
        expect(row.locator("label", has_text=todo.name)).not_to_be_visible()
        self.verify_local_storage()

    # -------------------------------------------------------------------------
    # Storage assertions
    # -------------------------------------------------------------------------

    def read_local_storage(self) -> list[dict[str, Any]]:
        """Return the application's persisted list (empty if nothing stored)."""
        return self.page.evaluate(
            "(key) => JSON.parse(localStorage.getItem(key) || '[]')", self.storage_key
        )

    def wait_for_storage(self, predicate: str, expected: Any, description: str) -> None:
        """
        Block until ``predicate`` holds against localStorage.

        Args:
            predicate: JavaScript function taking ``{key, expected}``.
            expected: Value handed to the predicate as ``expected``.
            description: What is being waited for, used in the failure message.

        Raises:
            AssertionError: If the predicate does not hold within
                ``storage_timeout_ms``. The message includes the stored list.
        """
        try:
            self.page.wait_for_function(
                predicate,
                arg={"key": self.storage_key, "expected": expected},
                timeout=self.storage_timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            actual = self.read_local_storage()
            raise AssertionError(
                f"localStorage[{self.storage_key!r}] never had {description} "
                f"within {self.storage_timeout_ms}ms; actual: {actual!r}"
            ) from exc

    def verify_local_storage(self) -> None:
        """Assert storage holds exactly the mirror's items, by count and title."""
        self.wait_for_storage(
            STORAGE_LENGTH_EQUALS, len(self.todos), f"{len(self.todos)} item(s)"
        )
        for todo in self.todos:
            self.wait_for_storage(STORAGE_HAS_TITLE, todo.name, f"an item titled {todo.name!r}")

    def check_number_of_completed_todos_in_local_storage(self, expected: int) -> None:
        self.wait_for_storage(
            STORAGE_COMPLETED_COUNT_EQUALS, expected, f"{expected} completed item(s)"
        )
