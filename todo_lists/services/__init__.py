from .list_store import (
    DuplicateName,
    InvalidLength,
    ListNotFound,
    ListStore,
    NotFoundError,
    TodoNotFound,
    ValidationError,
    display_order,
    is_list_complete,
    list_class,
    sort_lists,
    sort_todos,
    todos_count,
    todos_remaining_count,
    validate_list_name,
    validate_todo_text,
)
