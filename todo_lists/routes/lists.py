from flask import Blueprint, g, redirect, render_template, request, url_for
import logging

from ..services.list_store import NotFoundError, ValidationError, sort_lists, sort_todos

logger = logging.getLogger(__name__)

lists_bp = Blueprint("lists", __name__)


def _render_list(todo_list, status=200, todo=""):
    return (
        render_template("list.html", list=todo_list, todos=sort_todos(todo_list.todos), todo=todo),
        status,
    )


@lists_bp.errorhandler(NotFoundError)
def handle_not_found(error):
    g.store.state.error = error.message
    return redirect(url_for("lists.show_lists"))


@lists_bp.route("/lists", methods=["GET"])
def show_lists():
    return render_template("lists.html", lists=sort_lists(g.store.lists))


@lists_bp.route("/lists/new", methods=["GET"])
def new_list():
    return render_template("new_list.html", list_name="")


@lists_bp.route("/lists", methods=["POST"])
def create_list():
    list_name = request.form.get("list_name", "").strip()
    try:
        g.store.create_list(list_name)
    except ValidationError as e:
        logger.warning(f"Rejected list name: {e.message}")
        g.store.state.error = e.message
        return render_template("new_list.html", list_name=list_name), 422

    g.store.state.success = "The list has been created."
    return redirect(url_for("lists.show_lists"))


@lists_bp.route("/lists/<int(signed=True):list_id>", methods=["GET"])
def show_list(list_id):
    return _render_list(g.store.find_list(list_id))


@lists_bp.route("/lists/<int(signed=True):list_id>/edit", methods=["GET"])
def edit_list(list_id):
    todo_list = g.store.find_list(list_id)
    return render_template("edit_list.html", list=todo_list, list_name=todo_list.name)


@lists_bp.route("/lists/<int(signed=True):list_id>", methods=["POST"])
def update_list(list_id):
    list_name = request.form.get("list_name", "").strip()
    todo_list = g.store.find_list(list_id)
    try:
        g.store.rename_list(list_id, list_name)
    except ValidationError as e:
        logger.warning(f"Rejected list name for list {list_id}: {e.message}")
        g.store.state.error = e.message
        return render_template("edit_list.html", list=todo_list, list_name=list_name), 422

    g.store.state.success = "The list has been updated."
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int(signed=True):list_id>/delete", methods=["POST"])
def delete_list(list_id):
    g.store.delete_list(list_id)
    g.store.state.success = "The list has been deleted."
    return redirect(url_for("lists.show_lists"))


@lists_bp.route("/lists/<int(signed=True):list_id>/todos", methods=["POST"])
def add_todo(list_id):
    text = request.form.get("todo", "").strip()
    todo_list = g.store.find_list(list_id)
    try:
        g.store.add_todo(list_id, text)
    except ValidationError as e:
        logger.warning(f"Rejected todo for list {list_id}: {e.message}")
        g.store.state.error = e.message
        return _render_list(todo_list, status=422, todo=text)

    g.store.state.success = "The todo was added."
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int(signed=True):list_id>/todos/<int(signed=True):todo_id>/delete", methods=["POST"])
def delete_todo(list_id, todo_id):
    g.store.delete_todo(list_id, todo_id)
    g.store.state.success = "The todo has been deleted."
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int(signed=True):list_id>/todos/<int(signed=True):todo_id>", methods=["POST"])
def update_todo(list_id, todo_id):
    completed = request.form.get("completed", "") == "true"
    g.store.set_todo_completion(list_id, todo_id, completed)
    g.store.state.success = "The todo has been updated."
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int(signed=True):list_id>/complete_all", methods=["POST"])
def complete_all(list_id):
    g.store.complete_all(list_id)
    g.store.state.success = "All todos have been completed."
    return redirect(url_for("lists.show_list", list_id=list_id))
