import os
import secrets
from datetime import timedelta


class Config:
    # A fresh key per process unless one is configured; sessions do not survive restarts.
    SECRET_KEY = os.environ.get("TODO_LISTS_SECRET_KEY") or secrets.token_hex(32)
    SESSION_COOKIE_NAME = "todo_lists_session"
    SESSION_COOKIE_HTTPONLY = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)

    LOG_LEVEL = os.environ.get("TODO_LISTS_LOG_LEVEL", "INFO")
    HOST = os.environ.get("TODO_LISTS_HOST", "127.0.0.1")
    PORT = int(os.environ.get("TODO_LISTS_PORT", "5001"))
    DEBUG = os.environ.get("TODO_LISTS_DEBUG", "false").lower() in ("1", "true", "yes", "on")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "testing-secret-key"
    LOG_LEVEL = "WARNING"
