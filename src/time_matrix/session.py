"""Quiz session state machine.

NOT_STARTED -> ACTIVE on start(); each answered item stays ACTIVE until
advance() moves past the last one, which enters COMPLETE. reset() starts
over with a fresh shuffle and a zero score.
"""
import logging
import math

from time_matrix.errors import AlreadyAnswered, EmptyContent, NoActiveItem
from time_matrix.models import (
    Activity, EvaluationResult, NextItem, Phase, Quadrant, SessionComplete, SessionSnapshot,
)
from time_matrix.sequencer import shuffle

logger = logging.getLogger(__name__)


def calc_accuracy(score: int, total: int) -> int:
    """Percentage of correct answers, rounded half up."""
    if total == 0:
        raise EmptyContent("Cannot compute accuracy without activities")
    return math.floor(score * 100 / total + 0.5)


class QuizSession:
    def __init__(self, activities, rng=None):
        self.activities = tuple(activities)
        self.rng = rng
        self.order: list[Activity] = []
        self.position = 0
        self.score = 0
        self.phase = Phase.NOT_STARTED
        self._answered = False

    @property
    def total(self) -> int:
        return len(self.order)

    @property
    def answered(self) -> bool:
        return self._answered

    def start(self) -> Activity:
        """Shuffle a new order and present the first activity."""
        self.phase = Phase.NOT_STARTED
        self.order = []
        self.position = 0
        self.score = 0
        self._answered = False
        if not self.activities:
            raise EmptyContent("No activities loaded")
        self.order = shuffle(self.activities, self.rng)
        self.phase = Phase.ACTIVE
        logger.debug("Session started with %d activities", len(self.order))
        return self.order[0]

    def reset(self) -> Activity:
        return self.start()

    def current_item(self) -> Activity:
        if self.phase != Phase.ACTIVE:
            raise NoActiveItem(f"No active item (phase={self.phase.value})")
        return self.order[self.position]

    def submit_answer(self, selected: Quadrant) -> EvaluationResult:
        """Evaluate selected against the current item; only one answer per item."""
        item = self.current_item()
        if self._answered:
            raise AlreadyAnswered(f"Activity {item.id!r} was already answered")
        selected = Quadrant(selected)
        is_correct = selected == item.correct_quadrant
        if is_correct:
            self.score += 1
        self._answered = True
        return EvaluationResult(
            is_correct=is_correct, correct_quadrant=item.correct_quadrant, selected=selected,
        )

    def advance(self) -> NextItem | SessionComplete:
        if self.phase != Phase.ACTIVE:
            raise NoActiveItem(f"Cannot advance (phase={self.phase.value})")
        self.position += 1
        self._answered = False
        if self.position >= len(self.order):
            self.phase = Phase.COMPLETE
            logger.info("Session complete: %d/%d", self.score, self.total)
            return SessionComplete(score=self.score, total=self.total, accuracy=self.accuracy())
        return NextItem(item=self.order[self.position])

    def accuracy(self) -> int:
        return calc_accuracy(self.score, len(self.activities))

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self.phase,
            position=self.position,
            score=self.score,
            total=self.total,
            answered=self._answered,
            order_ids=[a.id for a in self.order],
        )
