import os

from .config import database_uri_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# No fallback: create_app refuses to start without a connection string
SQLALCHEMY_DATABASE_URI = database_uri_from_env()
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
