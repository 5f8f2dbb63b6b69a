from __future__ import annotations

import logging
from typing import List

from sqlalchemy import inspect
from sqlalchemy.engine import make_url

from .extensions import db

logger = logging.getLogger(__name__)


def describe_target(uri: str) -> str:
    """Database URL with the password hidden, for log lines."""
    return make_url(uri).render_as_string(hide_password=True)


def init_schema() -> None:
    """Create missing tables (idempotent). Needs an active app context."""
    db.create_all()
    logger.info("Schema ready (tables=%s)", ", ".join(list_tables()))


def list_tables() -> List[str]:
    return sorted(inspect(db.engine).get_table_names())
