"""Content loading and localized text resolution.

Activities and UI labels come from a content provider. ``load_repository``
tries the external provider first and substitutes the embedded dataset on
any :class:`ContentLoadFailure`, so the quiz is always playable.
"""
import copy
import json
import logging
from pathlib import Path

import yaml

from time_matrix import embedded
from time_matrix.errors import ContentLoadFailure
from time_matrix.models import FALLBACK_LANGUAGE, Activity, LocalizedText, PlainText, Quadrant, Text

logger = logging.getLogger(__name__)

REQUIRED_LABEL_KEYS = tuple(
    f"{q.value}_{part}" for q in Quadrant for part in ("title", "examples")
) + ("correct_feedback", "incorrect_feedback")

# Built-in English labels, used whenever a table is absent or incomplete.
DEFAULT_LABELS = embedded.TRANSLATIONS[FALLBACK_LANGUAGE]


def read_data_file(path: Path):
    """Parse a JSON or YAML data file, dispatching on the suffix."""
    suffix = path.suffix.lower()
    try:
        raw = path.read_text(encoding="utf-8")
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(raw)
        return json.loads(raw)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ContentLoadFailure(f"Could not read {path}: {e}") from e


def find_data_file(data_dir: Path, stem: str) -> Path:
    for suffix in (".json", ".yaml", ".yml"):
        candidate = Path(data_dir) / f"{stem}{suffix}"
        if candidate.exists():
            return candidate
    raise ContentLoadFailure(f"No {stem} data file in {data_dir}")


def normalize_text(raw) -> Text:
    """Turn a raw description into the PlainText | LocalizedText variant."""
    if isinstance(raw, str):
        return PlainText(raw)
    if isinstance(raw, dict):
        values = {k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str) and v}
        if values.get(FALLBACK_LANGUAGE):
            return LocalizedText(values)
    raise ContentLoadFailure(f"Invalid localized text: {raw!r}")


def parse_activities(data) -> list[Activity]:
    if not isinstance(data, dict) or not isinstance(data.get("activities"), list):
        raise ContentLoadFailure("Activity data must be an object with an 'activities' list")
    if not data["activities"]:
        raise ContentLoadFailure("No activities found")
    activities = []
    for index, raw in enumerate(data["activities"]):
        if not isinstance(raw, dict) or "description" not in raw or "correctQuadrant" not in raw:
            raise ContentLoadFailure(f"Activity #{index} needs 'description' and 'correctQuadrant'")
        try:
            quadrant = Quadrant(str(raw["correctQuadrant"]).lower())
        except ValueError as e:
            raise ContentLoadFailure(f"Activity #{index} has unknown quadrant {raw['correctQuadrant']!r}") from e
        activities.append(Activity(
            id=raw.get("id", index + 1),
            description=normalize_text(raw["description"]),
            correct_quadrant=quadrant,
        ))
    return activities


def parse_translations(data) -> dict:
    if not isinstance(data, dict) or not data:
        raise ContentLoadFailure("Translation data must be a non-empty mapping of language tables")
    tables = {}
    for lang, table in data.items():
        if not isinstance(table, dict):
            raise ContentLoadFailure(f"Translation table for {lang!r} is not a mapping")
        tables[str(lang)] = {str(k): v for k, v in table.items() if isinstance(v, str)}
    return tables


def missing_label_keys(table: dict) -> list[str]:
    return [key for key in REQUIRED_LABEL_KEYS if not table.get(key)]


class ContentProvider:
    """Source of activities and translation tables."""

    def load_activities(self) -> list[Activity]:
        raise NotImplementedError

    def load_translations(self) -> dict:
        raise NotImplementedError


class FileContentProvider(ContentProvider):
    """Reads ``activities`` and ``translations`` data files from a directory."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def load_activities(self) -> list[Activity]:
        return parse_activities(read_data_file(find_data_file(self.data_dir, "activities")))

    def load_translations(self) -> dict:
        return parse_translations(read_data_file(find_data_file(self.data_dir, "translations")))


class EmbeddedContentProvider(ContentProvider):
    def load_activities(self) -> list[Activity]:
        return parse_activities(copy.deepcopy(embedded.ACTIVITIES))

    def load_translations(self) -> dict:
        return parse_translations(copy.deepcopy(embedded.TRANSLATIONS))


class ContentRepository:
    """Loaded activities plus per-language label tables."""

    def __init__(self, activities: list[Activity], translations: dict):
        self.activities = tuple(activities)
        self.translations = translations

    @property
    def languages(self) -> tuple:
        return tuple(self.translations)

    def resolve(self, text: Text, lang: str) -> str:
        return text.resolve(lang)

    def text(self, key: str, lang: str, **params) -> str:
        """Localized UI string for key; never empty.

        Lookup order: the language's table, the loaded English table, the
        built-in English labels, then the key itself.
        """
        template = None
        for table in (self.translations.get(lang), self.translations.get(FALLBACK_LANGUAGE), DEFAULT_LABELS):
            if table and table.get(key):
                template = table[key]
                break
        if template is None:
            return key
        if not params:
            return template
        try:
            return template.format(**params)
        except (KeyError, IndexError, ValueError):
            logger.warning("Bad placeholder in %r label for %s, using built-in English", key, lang)
            return DEFAULT_LABELS.get(key, key).format(**params)

    def label_for(self, quadrant: Quadrant, lang: str) -> str:
        return self.text(f"{Quadrant(quadrant).value}_title", lang)

    def labels(self, lang: str) -> dict:
        """Every static UI label resolved for lang."""
        return {key: self.text(key, lang) for key in DEFAULT_LABELS}


def load_repository(primary: ContentProvider, fallback: ContentProvider | None = None) -> ContentRepository:
    """Load content from primary, falling back to the embedded dataset."""
    fallback = fallback or EmbeddedContentProvider()
    try:
        activities = primary.load_activities()
    except ContentLoadFailure as e:
        logger.warning("Activity data unavailable (%s), using built-in activities", e)
        activities = fallback.load_activities()

    fallback_tables = fallback.load_translations()
    try:
        tables = primary.load_translations()
    except ContentLoadFailure as e:
        logger.warning("Translation data unavailable (%s), using built-in translations", e)
        tables = fallback_tables

    for lang, builtin in fallback_tables.items():
        table = tables.get(lang, {})
        missing = missing_label_keys(table)
        if missing:
            logger.warning("Translation table %r is missing %s, filling from built-in", lang, ", ".join(missing))
            tables[lang] = {**builtin, **{k: v for k, v in table.items() if v}}
    return ContentRepository(activities, tables)
