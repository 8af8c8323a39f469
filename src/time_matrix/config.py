"""Application settings.

Defaults live on :class:`QuizConfig`; ``QuizConfig.from_env()`` applies the
``TIME_MATRIX_*`` environment overrides used by the CLI.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from time_matrix.db import DEFAULT_DB_PATH

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

SUPPORTED_LANGUAGES = ("en", "pt")
DEFAULT_LANGUAGE = "en"
DEFAULT_ADVANCE_DELAY = 1.5


@dataclass
class QuizConfig:
    supported_languages: tuple = SUPPORTED_LANGUAGES
    default_language: str = DEFAULT_LANGUAGE
    advance_delay: float = DEFAULT_ADVANCE_DELAY
    data_dir: Path = DATA_DIR
    db_path: str = DEFAULT_DB_PATH

    def __post_init__(self):
        if self.default_language not in self.supported_languages:
            logger.warning(
                "Default language %r is not supported, using %r",
                self.default_language, DEFAULT_LANGUAGE,
            )
            self.default_language = DEFAULT_LANGUAGE
        self.data_dir = Path(self.data_dir)

    def is_supported(self, lang: str) -> bool:
        return lang in self.supported_languages

    @classmethod
    def from_env(cls, environ=None) -> "QuizConfig":
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get("TIME_MATRIX_LANG"):
            kwargs["default_language"] = env["TIME_MATRIX_LANG"].strip().lower()
        if env.get("TIME_MATRIX_DB"):
            kwargs["db_path"] = env["TIME_MATRIX_DB"]
        if env.get("TIME_MATRIX_DATA_DIR"):
            kwargs["data_dir"] = Path(env["TIME_MATRIX_DATA_DIR"])
        if env.get("TIME_MATRIX_DELAY"):
            try:
                delay = float(env["TIME_MATRIX_DELAY"])
            except ValueError:
                delay = -1
            if delay >= 0:
                kwargs["advance_delay"] = delay
            else:
                logger.warning("Ignoring invalid TIME_MATRIX_DELAY=%r", env["TIME_MATRIX_DELAY"])
        return cls(**kwargs)
