"""
Base repository with connection management.

Provides a context manager for database connections that handles:
- Automatic connection cleanup
- Transaction commit on success
- Transaction rollback on failure
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

from ..database import get_connection, get_database_path, init_database


class BaseRepository:
    """
    Base class for all repositories.

    The schema is created on construction, so a fresh database file is
    usable immediately.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = get_database_path(db_path)
        init_database(self.db_path)

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Yields:
            A tuple of (connection, cursor). Commits on success when
            auto_commit is set, rolls back on exception, always closes.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("UPDATE high_scores SET score = ?", (10,))
        """
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def read_connection(self) -> Generator[Any, None, None]:
        """Same as connection() without the commit."""
        with self.connection(auto_commit=False) as handles:
            yield handles
