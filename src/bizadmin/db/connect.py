from __future__ import annotations

from typing import Optional

import psycopg
from psycopg import Connection

from bizadmin.config import get_database_url


def connect(database_url: Optional[str] = None) -> Connection:
    """
    Return a psycopg connection.

    - Uses `BIZADMIN_DSN`, if not provided earlier.
    - Leaves autocommit OFF (commits explicitly managed elsewhere).
    """
    url = database_url or get_database_url()
    return psycopg.connect(url)
