import random

import pytest

from time_matrix.errors import AlreadyAnswered, EmptyContent, NoActiveItem
from time_matrix.models import NextItem, Phase, Quadrant, SessionComplete
from time_matrix.session import QuizSession, calc_accuracy


def make_session(activities, seed=0):
    session = QuizSession(activities, rng=random.Random(seed))
    session.start()
    return session


def test_new_session_is_not_started(activities):
    session = QuizSession(activities)
    assert session.phase == Phase.NOT_STARTED
    with pytest.raises(NoActiveItem):
        session.current_item()


def test_start_produces_permutation(activities):
    session = make_session(activities)
    assert session.phase == Phase.ACTIVE
    assert sorted(a.id for a in session.order) == [1, 2, 3, 4]
    assert session.position == 0
    assert session.score == 0


def test_start_without_activities_raises():
    session = QuizSession([])
    with pytest.raises(EmptyContent):
        session.start()
    assert session.phase == Phase.NOT_STARTED


def test_correct_answer_increments_score(activities):
    session = make_session(activities)
    item = session.current_item()
    result = session.submit_answer(item.correct_quadrant)
    assert result.is_correct is True
    assert result.correct_quadrant == item.correct_quadrant
    assert session.score == 1


def test_wrong_answer_keeps_score(activities):
    session = make_session(activities)
    item = session.current_item()
    wrong = next(q for q in Quadrant if q != item.correct_quadrant)
    result = session.submit_answer(wrong)
    assert result.is_correct is False
    assert result.correct_quadrant == item.correct_quadrant
    assert session.score == 0


def test_second_answer_for_same_item_rejected(activities):
    session = make_session(activities)
    item = session.current_item()
    session.submit_answer(item.correct_quadrant)
    with pytest.raises(AlreadyAnswered):
        session.submit_answer(item.correct_quadrant)
    assert session.score == 1


def test_advance_returns_next_item(activities):
    session = make_session(activities)
    session.submit_answer(Quadrant.Q1)
    outcome = session.advance()
    assert isinstance(outcome, NextItem)
    assert outcome.item is session.order[1]
    assert session.answered is False


def test_completion_after_exact_number_of_advances(activities):
    session = make_session(activities)
    for _ in range(len(activities) - 1):
        assert isinstance(session.advance(), NextItem)
        assert session.phase == Phase.ACTIVE
    outcome = session.advance()
    assert isinstance(outcome, SessionComplete)
    assert session.phase == Phase.COMPLETE
    assert session.position == len(activities)


def test_no_operations_after_complete(activities):
    session = make_session(activities)
    for _ in activities:
        session.advance()
    with pytest.raises(NoActiveItem):
        session.current_item()
    with pytest.raises(NoActiveItem):
        session.submit_answer(Quadrant.Q1)
    with pytest.raises(NoActiveItem):
        session.advance()


def test_scenario_all_correct(activities):
    session = make_session(activities, seed=3)
    outcome = None
    for _ in activities:
        session.submit_answer(session.current_item().correct_quadrant)
        outcome = session.advance()
    assert outcome == SessionComplete(score=4, total=4, accuracy=100)


def test_scenario_always_q1(activities):
    session = make_session(activities, seed=5)
    outcome = None
    for _ in activities:
        session.submit_answer(Quadrant.Q1)
        outcome = session.advance()
    expected = sum(1 for a in activities if a.correct_quadrant == Quadrant.Q1)
    assert outcome.score == expected
    assert outcome.accuracy == 25


def test_score_monotonic_and_bounded(activities):
    rng = random.Random(11)
    for seed in range(20):
        session = make_session(activities, seed=seed)
        previous = 0
        while session.phase == Phase.ACTIVE:
            session.submit_answer(rng.choice(list(Quadrant)))
            session.advance()
            assert session.score >= previous
            assert 0 <= session.score <= session.position
            previous = session.score


def test_reset_reshuffles_and_zeroes(activities):
    session = make_session(activities)
    session.submit_answer(session.current_item().correct_quadrant)
    session.advance()
    session.reset()
    assert session.phase == Phase.ACTIVE
    assert session.position == 0
    assert session.score == 0
    assert sorted(a.id for a in session.order) == [1, 2, 3, 4]


def test_reset_after_complete(activities):
    session = make_session(activities)
    for _ in activities:
        session.advance()
    session.reset()
    assert session.phase == Phase.ACTIVE


def test_snapshot(activities):
    session = make_session(activities)
    session.submit_answer(Quadrant.Q2)
    snap = session.snapshot()
    assert snap.phase == Phase.ACTIVE
    assert snap.answered is True
    assert snap.total == 4
    assert snap.order_ids == [a.id for a in session.order]


@pytest.mark.parametrize("score, total, expected", [
    (0, 4, 0), (4, 4, 100), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 8, 38),
])
def test_calc_accuracy_rounds_half_up(score, total, expected):
    assert calc_accuracy(score, total) == expected


def test_calc_accuracy_empty():
    with pytest.raises(EmptyContent):
        calc_accuracy(0, 0)
