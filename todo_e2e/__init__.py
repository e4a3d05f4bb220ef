"""
Page-object model for the TodoMVC reference application.

The package exposes the to-do item model and the ``ToDoApp`` driver used
by the end-to-end scenarios under ``tests/e2e``.
"""

from todo_e2e.models import SaveMethod, ToDoItem, TodoStatus
from todo_e2e.pages.todo_app_page import ToDoApp

__all__ = ["SaveMethod", "ToDoApp", "ToDoItem", "TodoStatus"]
