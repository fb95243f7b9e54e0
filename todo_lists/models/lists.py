from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Todo:
    """A single item in a list."""
    id: int
    name: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        return cls(id=data["id"], name=data["name"], completed=bool(data.get("completed", False)))


@dataclass
class TodoList:
    """A named, ordered collection of todos."""
    id: int
    name: str
    todos: List[Todo] = field(default_factory=list)
    next_todo_id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "todos": [todo.to_dict() for todo in self.todos],
            "next_todo_id": self.next_todo_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TodoList":
        todos = [Todo.from_dict(item) for item in data.get("todos", [])]
        next_todo_id = data.get("next_todo_id", max((t.id for t in todos), default=-1) + 1)
        return cls(id=data["id"], name=data["name"], todos=todos, next_todo_id=next_todo_id)


@dataclass
class SessionState:
    """Everything one client session holds between requests."""
    lists: List[TodoList] = field(default_factory=list)
    next_list_id: int = 0
    error: Optional[str] = None
    success: Optional[str] = None

    def pop_flash(self) -> Dict[str, Optional[str]]:
        # Messages are shown once; reading them clears them.
        messages = {"error": self.error, "success": self.success}
        self.error = None
        self.success = None
        return messages

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lists": [todo_list.to_dict() for todo_list in self.lists],
            "next_list_id": self.next_list_id,
            "error": self.error,
            "success": self.success,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SessionState":
        if not data:
            return cls()
        lists = [TodoList.from_dict(item) for item in data.get("lists", [])]
        next_list_id = data.get("next_list_id", max((l.id for l in lists), default=-1) + 1)
        return cls(
            lists=lists,
            next_list_id=next_list_id,
            error=data.get("error"),
            success=data.get("success"),
        )
