"""SQLite storage handle: connection factory, schema creation and transaction helper.

The caller owns the connection and passes it to Catalog / Planner; nothing in
this module keeps a process-wide connection.
"""
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from mealplanner.domain.Errors import StorageError
from mealplanner.utilities.config import MEALS_DB_PATH
from mealplanner.utilities.constants import MEALS_TABLE, INGREDIENTS_TABLE, PLANS_TABLE

logger = logging.getLogger(__name__)

SCHEMA = (
    f"""
    CREATE TABLE IF NOT EXISTS {MEALS_TABLE} (
        meal_id INTEGER PRIMARY KEY,
        category TEXT NOT NULL,
        meal TEXT NOT NULL
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS {INGREDIENTS_TABLE} (
        ingredient_id INTEGER PRIMARY KEY,
        ingredient TEXT NOT NULL,
        meal_id INTEGER NOT NULL,
        FOREIGN KEY (meal_id) REFERENCES {MEALS_TABLE}(meal_id)
    )
    """,
    # UNIQUE keeps at most one slot per (day, category) even with several writers
    f"""
    CREATE TABLE IF NOT EXISTS {PLANS_TABLE} (
        plan_id INTEGER PRIMARY KEY,
        day_of_week TEXT NOT NULL,
        meal_category TEXT NOT NULL,
        meal_id INTEGER NOT NULL,
        FOREIGN KEY (meal_id) REFERENCES {MEALS_TABLE}(meal_id),
        UNIQUE (day_of_week, meal_category)
    )
    """,
    f"CREATE INDEX IF NOT EXISTS idx_{INGREDIENTS_TABLE}_meal ON {INGREDIENTS_TABLE}(meal_id)",
    f"CREATE INDEX IF NOT EXISTS idx_{MEALS_TABLE}_name ON {MEALS_TABLE}(meal, category)",
)


def connect(path: Optional[Union[str, Path]] = None) -> sqlite3.Connection:
    """Open a connection with foreign keys enforced and rows addressable by column name.

    ``path`` defaults to MEALS_DB_PATH; pass ":memory:" for a throwaway database.
    """
    db_path = str(path if path is not None else MEALS_DB_PATH)
    try:
        # API requests may run the dependency and the endpoint on different worker threads
        conn = sqlite3.connect(db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        logger.error(f"Cannot open database {db_path}: {e}")
        raise StorageError(f"Cannot open database {db_path}: {e}") from e
    return conn


def create_schema(conn: sqlite3.Connection) -> None:
    with transaction(conn, "Creating schema"):
        for statement in SCHEMA:
            conn.execute(statement)
    logger.debug("Schema ready")


def open_database(path: Optional[Union[str, Path]] = None) -> sqlite3.Connection:
    """connect() + create_schema(); a StorageError here is fatal for the caller."""
    conn = connect(path)
    try:
        create_schema(conn)
    except StorageError:
        conn.close()
        raise
    return conn


@contextmanager
def transaction(conn: sqlite3.Connection, action: str = "Storage operation") -> Iterator[sqlite3.Connection]:
    """Commit on success; roll back on any error.

    sqlite3 errors are logged and re-raised as StorageError, anything else is
    re-raised untouched after the rollback.
    """
    try:
        yield conn
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"{action} failed: {e}")
        raise StorageError(f"{action} failed: {e}") from e
    except Exception:
        conn.rollback()
        raise


def fetch_all(conn: sqlite3.Connection, sql: str, params: Sequence = (),
              action: str = "Query") -> List[sqlite3.Row]:
    try:
        return conn.execute(sql, tuple(params)).fetchall()
    except sqlite3.Error as e:
        logger.error(f"{action} failed: {e}")
        raise StorageError(f"{action} failed: {e}") from e


__all__ = ['connect', 'create_schema', 'open_database', 'transaction', 'fetch_all', 'SCHEMA']
