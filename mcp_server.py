"""
MCP Server exposing the to-do list store (`mcp_server.py`)
"""

import sys
import logging
from typing import Dict

from mcp.server.fastmcp import FastMCP

from todo_lists.models.lists import SessionState
from todo_lists.services.list_store import (
    ListStore,
    NotFoundError,
    ValidationError,
    is_list_complete,
    sort_lists,
    sort_todos,
)

logging.basicConfig(stream=sys.stderr, level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("To-Do Lists MCP Server")

# In-memory session storage keyed by session id; entries live until clear_session or process exit
session_states: Dict[str, SessionState] = {}


def get_store(session_id: str) -> ListStore:
    return ListStore(session_states.setdefault(session_id, SessionState()))


def list_to_dict(todo_list) -> dict:
    return {
        "id": todo_list.id,
        "name": todo_list.name,
        "complete": is_list_complete(todo_list),
        "todos": [todo.to_dict() for todo in sort_todos(todo_list.todos)],
    }


@mcp.resource("todo://{session_id}/lists")
def lists_resource(session_id: str) -> list:
    """All lists of a session in display order."""
    return [list_to_dict(l) for l in sort_lists(get_store(session_id).lists)]


@mcp.tool()
def list_lists(session_id: str = "") -> list:
    """Return all lists, incomplete ones first."""
    return [list_to_dict(l) for l in sort_lists(get_store(session_id).lists)]


@mcp.tool()
def create_list(name: str, session_id: str = "") -> dict:
    """Create a new, empty list."""
    try:
        return list_to_dict(get_store(session_id).create_list(name.strip()))
    except ValidationError as e:
        return {"error": e.message}


@mcp.tool()
def rename_list(list_id: int, name: str, session_id: str = "") -> dict:
    try:
        return list_to_dict(get_store(session_id).rename_list(list_id, name.strip()))
    except (ValidationError, NotFoundError) as e:
        return {"error": e.message}


@mcp.tool()
def delete_list(list_id: int, session_id: str = "") -> dict:
    try:
        return list_to_dict(get_store(session_id).delete_list(list_id))
    except NotFoundError as e:
        return {"error": e.message}


@mcp.tool()
def add_todo(list_id: int, todo: str, session_id: str = "") -> dict:
    """Add a todo to a list."""
    try:
        return get_store(session_id).add_todo(list_id, todo.strip()).to_dict()
    except (ValidationError, NotFoundError) as e:
        return {"error": e.message}


@mcp.tool()
def set_todo_completion(list_id: int, todo_id: int, completed: bool, session_id: str = "") -> dict:
    """Mark a todo done or not done."""
    try:
        return get_store(session_id).set_todo_completion(list_id, todo_id, completed).to_dict()
    except NotFoundError as e:
        return {"error": e.message}


@mcp.tool()
def delete_todo(list_id: int, todo_id: int, session_id: str = "") -> dict:
    try:
        return get_store(session_id).delete_todo(list_id, todo_id).to_dict()
    except NotFoundError as e:
        return {"error": e.message}


@mcp.tool()
def complete_all(list_id: int, session_id: str = "") -> dict:
    """Mark every todo in a list as done."""
    try:
        return list_to_dict(get_store(session_id).complete_all(list_id))
    except NotFoundError as e:
        return {"error": e.message}


@mcp.tool()
def clear_session(session_id: str = "") -> dict:
    """Discard every list held for a session."""
    state = session_states.pop(session_id, None)
    return {"session_id": session_id, "cleared": state is not None}


if __name__ == "__main__":
    logger.info("Starting MCP server...")
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
