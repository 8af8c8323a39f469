"""Tests for data model classes."""
import pytest

from time_matrix.models import LocalizedText, PlainText, Quadrant


def test_quadrant_codes():
    assert [q.value for q in Quadrant] == ["q1", "q2", "q3", "q4"]


@pytest.mark.parametrize("key, expected", [
    ("1", Quadrant.Q1), ("q2", Quadrant.Q2), (" Q3 ", Quadrant.Q3), (4, Quadrant.Q4),
])
def test_quadrant_from_key(key, expected):
    assert Quadrant.from_key(key) is expected


def test_quadrant_from_key_accepts_member():
    assert Quadrant.from_key(Quadrant.Q2) is Quadrant.Q2


def test_quadrant_from_key_rejects_unknown():
    with pytest.raises(ValueError):
        Quadrant.from_key("5")


def test_plain_text_ignores_language():
    text = PlainText("Checking email")
    assert text.resolve("en") == "Checking email"
    assert text.resolve("pt") == "Checking email"


def test_localized_text_uses_requested_language():
    text = LocalizedText({"en": "Planning", "pt": "Planejamento"})
    assert text.resolve("pt") == "Planejamento"


def test_localized_text_falls_back_to_english():
    text = LocalizedText({"en": "Planning"})
    assert text.resolve("pt") == "Planning"
    assert text.resolve("xx") == "Planning"
