# todo_lists/services/list_store.py

import logging
from typing import Callable, Iterable, List, Optional, TypeVar

from ..models.lists import SessionState, Todo, TodoList

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100

T = TypeVar("T")


class ValidationError(Exception):
    """Rejected user input. The message is shown to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidLength(ValidationError):
    pass


class DuplicateName(ValidationError):
    pass


class NotFoundError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ListNotFound(NotFoundError):
    def __init__(self, list_id: int):
        super().__init__("The specified list does not exist.")
        self.list_id = list_id


class TodoNotFound(NotFoundError):
    def __init__(self, list_id: int, todo_id: int):
        super().__init__("The specified todo does not exist.")
        self.list_id = list_id
        self.todo_id = todo_id


def _has_valid_length(text: str) -> bool:
    return NAME_MIN_LENGTH <= len(text) <= NAME_MAX_LENGTH


def validate_list_name(name: str, lists: Iterable[TodoList]) -> Optional[ValidationError]:
    """Return the error for a list name, or None if the name is valid."""
    if not _has_valid_length(name):
        return InvalidLength(
            f"The list name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters."
        )
    if any(todo_list.name == name for todo_list in lists):
        return DuplicateName("The list name must be unique.")
    return None


def validate_todo_text(text: str) -> Optional[ValidationError]:
    if not _has_valid_length(text):
        return InvalidLength(
            f"The todo must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters."
        )
    return None


def display_order(entries: Iterable[T], is_complete: Callable[[T], bool]) -> List[T]:
    """
    Stable partition: incomplete entries first, then completed ones.

    Relative order inside each group is the input order.
    """
    incomplete, complete = [], []
    for entry in entries:
        (complete if is_complete(entry) else incomplete).append(entry)
    return incomplete + complete


def is_list_complete(todo_list: TodoList) -> bool:
    return todos_count(todo_list) > 0 and todos_remaining_count(todo_list) == 0


def todos_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def todos_remaining_count(todo_list: TodoList) -> int:
    return sum(1 for todo in todo_list.todos if not todo.completed)


def list_class(todo_list: TodoList) -> str:
    return "complete" if is_list_complete(todo_list) else ""


def sort_lists(lists: Iterable[TodoList]) -> List[TodoList]:
    return display_order(lists, is_list_complete)


def sort_todos(todos: Iterable[Todo]) -> List[Todo]:
    return display_order(todos, lambda todo: todo.completed)


class ListStore:
    """Reads and mutates the lists held by one session."""

    def __init__(self, state: Optional[SessionState] = None):
        self.state = state if state is not None else SessionState()

    @property
    def lists(self) -> List[TodoList]:
        return self.state.lists

    def find_list(self, list_id: int) -> TodoList:
        for todo_list in self.state.lists:
            if todo_list.id == list_id:
                return todo_list
        logger.warning(f"List {list_id} not found")
        raise ListNotFound(list_id)

    def find_todo(self, list_id: int, todo_id: int) -> Todo:
        todo_list = self.find_list(list_id)
        for todo in todo_list.todos:
            if todo.id == todo_id:
                return todo
        logger.warning(f"Todo {todo_id} not found in list {list_id}")
        raise TodoNotFound(list_id, todo_id)

    def create_list(self, name: str) -> TodoList:
        error = validate_list_name(name, self.state.lists)
        if error:
            raise error
        todo_list = TodoList(id=self.state.next_list_id, name=name)
        self.state.next_list_id += 1
        self.state.lists.append(todo_list)
        logger.info(f"Created list {todo_list.id}")
        return todo_list

    def rename_list(self, list_id: int, name: str) -> TodoList:
        todo_list = self.find_list(list_id)
        error = validate_list_name(name, self.state.lists)
        if error:
            raise error
        todo_list.name = name
        logger.info(f"Renamed list {list_id}")
        return todo_list

    def delete_list(self, list_id: int) -> TodoList:
        todo_list = self.find_list(list_id)
        self.state.lists.remove(todo_list)
        logger.info(f"Deleted list {list_id}")
        return todo_list

    def add_todo(self, list_id: int, text: str) -> Todo:
        todo_list = self.find_list(list_id)
        error = validate_todo_text(text)
        if error:
            raise error
        todo = Todo(id=todo_list.next_todo_id, name=text)
        todo_list.next_todo_id += 1
        todo_list.todos.append(todo)
        logger.info(f"Added todo {todo.id} to list {list_id}")
        return todo

    def set_todo_completion(self, list_id: int, todo_id: int, completed: bool) -> Todo:
        todo = self.find_todo(list_id, todo_id)
        todo.completed = completed
        return todo

    def delete_todo(self, list_id: int, todo_id: int) -> Todo:
        todo = self.find_todo(list_id, todo_id)
        self.find_list(list_id).todos.remove(todo)
        logger.info(f"Deleted todo {todo_id} from list {list_id}")
        return todo

    def complete_all(self, list_id: int) -> TodoList:
        todo_list = self.find_list(list_id)
        for todo in todo_list.todos:
            todo.completed = True
        return todo_list
