"""Data classes for the time matrix domain model."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

FALLBACK_LANGUAGE = "en"


class Quadrant(str, Enum):
    """The four fixed quadrants of the time matrix."""
    Q1 = "q1"  # important + urgent
    Q2 = "q2"  # important + not urgent
    Q3 = "q3"  # not important + urgent
    Q4 = "q4"  # neither

    @classmethod
    def from_key(cls, key: str) -> "Quadrant":
        """Accept a quadrant code ("q1", "Q1") or a number key ("1")."""
        if isinstance(key, cls):
            return key
        key = str(key).strip().lower()
        if key in ("1", "2", "3", "4"):
            key = f"q{key}"
        return cls(key)


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    COMPLETE = "complete"


class Tone(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class PlainText:
    text: str

    def resolve(self, lang: str) -> str:
        return self.text


@dataclass(frozen=True)
class LocalizedText:
    """Text keyed by language code. The fallback language is always present."""
    values: dict

    def resolve(self, lang: str) -> str:
        value = self.values.get(lang)
        if value:
            return value
        return self.values[FALLBACK_LANGUAGE]


Text = Union[PlainText, LocalizedText]


@dataclass(frozen=True)
class Activity:
    id: object
    description: Text
    correct_quadrant: Quadrant


@dataclass(frozen=True)
class EvaluationResult:
    is_correct: bool
    correct_quadrant: Quadrant
    selected: Optional[Quadrant] = None


@dataclass(frozen=True)
class NextItem:
    item: Activity


@dataclass(frozen=True)
class SessionComplete:
    score: int
    total: int
    accuracy: int


@dataclass(frozen=True)
class Feedback:
    message: str
    tone: Tone


@dataclass
class SessionSnapshot:
    phase: Phase
    position: int
    score: int
    total: int
    answered: bool = False
    order_ids: list = field(default_factory=list)
