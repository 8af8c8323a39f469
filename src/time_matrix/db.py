"""SQLite settings database."""
import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path

DEFAULT_DB_PATH = str(Path.home() / ".time_matrix" / "settings.db")

SCHEMA = "CREATE TABLE IF NOT EXISTS user_settings (key TEXT PRIMARY KEY, value TEXT NOT NULL)"


@contextmanager
def connect(db_path: str = DEFAULT_DB_PATH):
    """Open the settings database, creating file and table on first use.

    The block runs in one transaction: committed on success, rolled back if
    it raises. The connection is always closed.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    with closing(sqlite3.connect(db_path)) as conn:
        with conn:
            conn.execute(SCHEMA)
            yield conn
