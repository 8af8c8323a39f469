"""Quiz engine: owns the session, active language and auto-advance timer.

One trigger is handled at a time (answer, language change, reset). After
each answer an advance is scheduled on the :class:`Scheduler`, tagged with
the session generation it belongs to; starting a new session bumps the
generation, so a stale advance is discarded instead of being applied to
the new session.
"""
import logging
import sqlite3

from time_matrix.config import QuizConfig
from time_matrix.content import ContentRepository
from time_matrix.errors import AlreadyAnswered, EmptyContent, NoActiveItem, UnsupportedLanguage
from time_matrix.feedback import format_feedback
from time_matrix.models import Activity, Feedback, Phase, Quadrant, SessionComplete, Tone
from time_matrix.scheduler import ScheduledCall, Scheduler
from time_matrix.session import QuizSession

logger = logging.getLogger(__name__)


class Presenter:
    """Presentation boundary; the engine only pushes, never reads back."""

    def display_labels(self, labels: dict, lang: str) -> None:
        pass

    def display_item(self, text: str) -> None:
        pass

    def display_progress(self, current: int, total: int) -> None:
        pass

    def display_score(self, score: int) -> None:
        pass

    def display_feedback(self, message: str, tone: Tone) -> None:
        pass

    def clear_feedback(self) -> None:
        pass

    def display_completion(self, score: int, total: int, accuracy: int) -> None:
        pass

    def display_error(self, message: str) -> None:
        pass


class QuizEngine:
    def __init__(
        self,
        repository: ContentRepository,
        presenter: Presenter,
        config: QuizConfig | None = None,
        language_store=None,
        scheduler: Scheduler | None = None,
        rng=None,
    ):
        self.repository = repository
        self.presenter = presenter
        self.config = config or QuizConfig()
        self.language_store = language_store
        self.scheduler = scheduler or Scheduler()
        self.language = language_store.load() if language_store else self.config.default_language
        self.session = QuizSession(repository.activities, rng=rng)
        self.generation = 0
        self._pending: ScheduledCall | None = None

    @property
    def phase(self) -> Phase:
        return self.session.phase

    def start(self) -> bool:
        """Begin a fresh session. Returns False if there is nothing to play."""
        self._cancel_pending()
        self.generation += 1
        self.presenter.display_labels(self.repository.labels(self.language), self.language)
        try:
            first = self.session.start()
        except EmptyContent as e:
            logger.error("Cannot start quiz: %s", e)
            self.presenter.display_error(self.repository.text("error_empty", self.language))
            return False
        logger.info("Session %d started (%s, %d activities)", self.generation, self.language, self.session.total)
        self.presenter.clear_feedback()
        self.presenter.display_score(self.session.score)
        self._present(first)
        return True

    def reset(self) -> bool:
        return self.start()

    def current_text(self) -> str:
        return self.repository.resolve(self.session.current_item().description, self.language)

    def submit(self, quadrant) -> Feedback | None:
        """Input entry point. Ignored (returns None) unless an item awaits an answer."""
        try:
            selected = Quadrant.from_key(quadrant)
        except ValueError:
            logger.warning("Ignoring unknown quadrant %r", quadrant)
            return None
        try:
            result = self.session.submit_answer(selected)
        except (NoActiveItem, AlreadyAnswered) as e:
            logger.warning("Ignoring answer %s: %s", selected.value, e)
            return None
        feedback = format_feedback(result, self.language, self.repository)
        self.presenter.display_score(self.session.score)
        self.presenter.display_feedback(feedback.message, feedback.tone)
        self._pending = self.scheduler.call_later(self.config.advance_delay, self._advance, self.generation)
        return feedback

    def set_language(self, lang: str, restart: bool = True) -> bool:
        """Switch language and restart the quiz.

        ``restart=False`` keeps the current session and only re-renders the
        visible text in the new language. Before the first ``start()`` the
        language is only recorded; nothing is rendered.
        """
        lang = str(lang).strip().lower()
        if not self.config.is_supported(lang):
            logger.warning("%s", UnsupportedLanguage(lang, self.config.supported_languages))
            return False
        if self.language_store:
            try:
                self.language_store.save(lang)
            except (sqlite3.Error, OSError) as e:
                logger.warning("Could not save language preference %r: %s", lang, e)
        self.language = lang
        logger.info("Language set to %s", lang)
        if self.generation == 0:
            return True
        if restart:
            return self.reset()
        self.presenter.display_labels(self.repository.labels(lang), lang)
        self._rerender()
        return True

    def _advance(self, generation: int) -> None:
        if generation != self.generation:
            logger.debug("Discarding advance from session %d (current %d)", generation, self.generation)
            return
        self._pending = None
        outcome = self.session.advance()
        self.presenter.clear_feedback()
        if isinstance(outcome, SessionComplete):
            self.presenter.display_completion(outcome.score, outcome.total, outcome.accuracy)
        else:
            self._present(outcome.item)

    def _present(self, item: Activity) -> None:
        self.presenter.display_item(self.repository.resolve(item.description, self.language))
        self.presenter.display_progress(self.session.position + 1, self.session.total)

    def _rerender(self) -> None:
        if self.session.phase == Phase.ACTIVE:
            self._present(self.session.current_item())
        elif self.session.phase == Phase.COMPLETE:
            self.presenter.display_completion(self.session.score, self.session.total, self.session.accuracy())

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
