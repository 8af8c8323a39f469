"""Persisted user settings: the language preference."""
import logging
import sqlite3

from time_matrix.db import connect
from time_matrix.errors import UnsupportedLanguage

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "language"


def read_setting(db_path: str, key: str) -> str | None:
    with connect(db_path) as conn:
        row = conn.execute("SELECT value FROM user_settings WHERE key = ?", (key,)).fetchone()
    return row[0] if row else None


def write_setting(db_path: str, key: str, value: str) -> None:
    with connect(db_path) as conn:
        conn.execute("INSERT OR REPLACE INTO user_settings (key, value) VALUES (?, ?)", (key, value))


class LanguageStore:
    """Load and save the language preference in the settings database."""

    def __init__(self, db_path: str, supported: tuple, default: str):
        self.db_path = db_path
        self.supported = tuple(supported)
        self.default = default

    def load(self) -> str:
        """Stored language, or the default if unset, unreadable or no longer supported."""
        try:
            stored = read_setting(self.db_path, LANGUAGE_KEY)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Could not read language preference from %s: %s", self.db_path, e)
            return self.default
        if stored is None:
            return self.default
        if stored not in self.supported:
            logger.warning("Stored language %r is not supported, using %r", stored, self.default)
            return self.default
        return stored

    def save(self, lang: str) -> None:
        if lang not in self.supported:
            raise UnsupportedLanguage(lang, self.supported)
        write_setting(self.db_path, LANGUAGE_KEY, lang)
