import os

from .config import database_uri_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Falls back to a local SQLite file so the app runs without a database server
SQLALCHEMY_DATABASE_URI = database_uri_from_env() or "sqlite:///employee_roster.db"
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Create missing tables on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
