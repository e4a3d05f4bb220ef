"""
Value types for the TodoMVC page-object model.

``ToDoItem`` is the driver's record of a single entry it created through
the UI. The driver keeps these in a list that mirrors what the application
should be rendering and persisting.
"""

import random
import time
from enum import Enum


class TodoStatus(str, Enum):
    """Enumeration of possible to-do statuses."""

    ACTIVE = "active"
    COMPLETED = "completed"
    DELETED = "deleted"


class SaveMethod(str, Enum):
    """Ways of leaving an item's inline editor."""

    ENTER = "Enter"
    BLUR = "Blur"
    ESCAPE = "Escape"


def _unique_suffix() -> int:
    # Wall-clock milliseconds with a little jitter so two items made in
    # the same millisecond still differ most of the time.
    return int(time.time() * 1000) + random.randrange(100)


class ToDoItem:
    """
    A to-do entry as the driver expects the application to hold it.

    Attributes:
        name: Title typed into the application, e.g. ``"Do 1718000000123"``.
        status: Current lifecycle status, ``ACTIVE`` on construction.
    """

    def __init__(self, label: str = "Do"):
        self.name: str = f"{label} {_unique_suffix()}"
        self.status: TodoStatus = TodoStatus.ACTIVE

    @property
    def completed(self) -> bool:
        return self.status is TodoStatus.COMPLETED

    def __repr__(self) -> str:
        return f"<ToDoItem {self.name!r} ({self.status.value})>"
