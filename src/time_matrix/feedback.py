"""Feedback messages for evaluated answers."""
from time_matrix.content import ContentRepository
from time_matrix.models import EvaluationResult, Feedback, Tone


def format_feedback(result: EvaluationResult, lang: str, repository: ContentRepository) -> Feedback:
    if result.is_correct:
        return Feedback(message=repository.text("correct_feedback", lang), tone=Tone.SUCCESS)
    quadrant = repository.label_for(result.correct_quadrant, lang)
    return Feedback(
        message=repository.text("incorrect_feedback", lang, quadrant=quadrant),
        tone=Tone.ERROR,
    )
