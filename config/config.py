import os
import urllib.parse
from typing import Optional


def database_uri_from_env(default_name: str = "employee_roster") -> Optional[str]:
    """Connection string for SQLAlchemy.

    DATABASE_URL wins when set; otherwise a MySQL URL is built from the
    DB_* variables. Returns None when neither is available.
    """
    url = os.environ.get("DATABASE_URL")
    if url:
        return url

    host = os.environ.get("DB_HOST")
    if not host:
        return None

    user = os.environ.get("DB_USER", "root")
    # Quote the password so characters like '@' survive in the URL
    password = urllib.parse.quote_plus(os.environ.get("DB_PASSWORD", ""))
    port = int(os.environ.get("DB_PORT", "3306"))
    name = os.environ.get("DB_NAME", default_name)
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}"
