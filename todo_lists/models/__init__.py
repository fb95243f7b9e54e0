from .lists import SessionState, Todo, TodoList

__all__ = ["SessionState", "Todo", "TodoList"]
