import random

import pytest

from time_matrix.config import QuizConfig
from time_matrix.content import EmbeddedContentProvider, ContentRepository
from time_matrix.engine import Presenter, QuizEngine
from time_matrix.models import Activity, LocalizedText, Quadrant
from time_matrix.scheduler import Scheduler


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_settings.db")
    return db_path


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


class RecordingPresenter(Presenter):
    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def display_labels(self, labels, lang):
        self._record("labels", labels, lang)

    def display_item(self, text):
        self._record("item", text)

    def display_progress(self, current, total):
        self._record("progress", current, total)

    def display_score(self, score):
        self._record("score", score)

    def display_feedback(self, message, tone):
        self._record("feedback", message, tone)

    def clear_feedback(self):
        self._record("clear")

    def display_completion(self, score, total, accuracy):
        self._record("completion", score, total, accuracy)

    def display_error(self, message):
        self._record("error", message)

    def last(self, name):
        for call_name, args in reversed(self.calls):
            if call_name == name:
                return args
        return None


FOUR_ACTIVITIES = [
    Activity(1, LocalizedText({"en": "Putting out a fire", "pt": "Apagar um incêndio"}), Quadrant.Q1),
    Activity(2, LocalizedText({"en": "Planning the week", "pt": "Planejar a semana"}), Quadrant.Q2),
    Activity(3, LocalizedText({"en": "Answering a ringing phone", "pt": "Atender o telefone"}), Quadrant.Q3),
    Activity(4, LocalizedText({"en": "Watching TV all day", "pt": "Assistir TV o dia todo"}), Quadrant.Q4),
]


@pytest.fixture
def activities():
    return list(FOUR_ACTIVITIES)


@pytest.fixture
def repository(activities):
    return ContentRepository(activities, EmbeddedContentProvider().load_translations())


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock=clock, sleep=clock.sleep)


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def engine(repository, presenter, scheduler):
    config = QuizConfig(advance_delay=1.5)
    return QuizEngine(repository, presenter, config=config, scheduler=scheduler, rng=random.Random(7))
