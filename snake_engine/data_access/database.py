"""
SQLite configuration and schema management for the high-score store.

This module provides database connection management with environment-aware
path selection and schema initialization.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = 'snake_engine.db'


def get_database_path(db_path: Optional[str] = None) -> str:
    """
    Determine the database path.

    Priority:
    1. Explicit `db_path` argument
    2. SNAKE_DB_PATH environment variable
    3. SNAKE_DATA_DIR environment variable + default file name
    4. Default file name in the current working directory

    Returns:
        Path to the SQLite database file (or ':memory:').
    """
    if db_path:
        return db_path

    env_path = os.getenv('SNAKE_DB_PATH')
    if env_path:
        return env_path

    data_dir = os.getenv('SNAKE_DATA_DIR')
    if data_dir:
        os.makedirs(data_dir, exist_ok=True)
        return str(Path(data_dir) / DEFAULT_DB_NAME)

    return str(Path.cwd() / DEFAULT_DB_NAME)


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the schema. Safe to call multiple times (uses IF NOT EXISTS).
    """
    path = get_database_path(db_path)
    logger.debug(f"Initializing database at: {path}")

    conn = get_connection(path)
    cursor = conn.cursor()
    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS high_scores (
                name TEXT PRIMARY KEY,
                score INTEGER NOT NULL DEFAULT 0 CHECK(score >= 0),
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()
        conn.close()
