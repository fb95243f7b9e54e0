"""
Session-backed to-do lists web app.
"""

import logging

from flask import Flask, g, redirect, request, session, url_for

from .config import Config
from .models.lists import SessionState
from .routes.lists import lists_bp
from .services.list_store import ListStore, list_class, todos_count, todos_remaining_count

SESSION_STATE_KEY = "state"

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    @app.before_request
    def load_session_state():
        g.store = ListStore(SessionState.from_dict(session.get(SESSION_STATE_KEY)))

    @app.after_request
    def save_session_state(response):
        store = g.get("store")
        if store is not None:
            session.permanent = True
            session[SESSION_STATE_KEY] = store.state.to_dict()
        return response

    @app.context_processor
    def inject_helpers():
        return {
            "pop_flash": lambda: g.store.state.pop_flash(),
            "list_class": list_class,
            "todos_count": todos_count,
            "todos_remaining_count": todos_remaining_count,
        }

    @app.errorhandler(404)
    def handle_unknown_list_url(error):
        # Ids that are not integers never match a list route.
        store = g.get("store")
        if store is None or not request.path.startswith("/lists/"):
            return error
        logger.warning(f"No list route for {request.path}")
        store.state.error = "The specified list does not exist."
        return redirect(url_for("lists.show_lists"))

    @app.route("/")
    def index():
        return redirect(url_for("lists.show_lists"))

    app.register_blueprint(lists_bp)
    return app
