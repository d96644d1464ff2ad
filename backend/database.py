"""
High-score persistence for the snake engine.

The engine only ever stores one scalar, the best score, under a fixed key.
SQLite holds it between runs; MemoryHighScoreStore keeps it for the
lifetime of the process (tests, --no-persist runs).
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from domain.constants import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """
    Determine the SQLite database path.

    Returns:
        SNAKE_DB_PATH when set, otherwise backend/snake_scores.db
    """
    env_path = os.getenv('SNAKE_DB_PATH')
    if env_path:
        parent = os.path.dirname(env_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return env_path

    backend_dir = Path(__file__).parent
    return str(backend_dir / 'snake_scores.db')


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with row access by column name.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Create the high_scores table. Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS high_scores (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL DEFAULT 0 CHECK(value >= 0),
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


class MemoryHighScoreStore:
    """Keeps the high score in memory only."""

    def __init__(self, initial: int = 0):
        self._value = initial

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = value


class SqliteHighScoreStore:
    """
    Reads and writes the high score row in SQLite.

    Attributes:
        db_path: database file; None means get_database_path()
        key: row key, fixed per game
    """

    def __init__(self, db_path: Optional[str] = None, key: str = HIGH_SCORE_KEY):
        self.db_path = db_path
        self.key = key
        init_database(self.db_path)

    def get(self) -> int:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT value FROM high_scores WHERE key = ?", (self.key,)
            ).fetchone()
            return int(row["value"]) if row else 0
        finally:
            conn.close()

    def set(self, value: int) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """
                INSERT INTO high_scores (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (self.key, int(value)),
            )
            conn.commit()
            logger.debug("Stored high score %s under %s", value, self.key)
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    init_database()
    print(f"Database ready at: {get_database_path()}")
