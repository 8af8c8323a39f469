"""Exception types raised by the quiz engine."""


class QuizError(Exception):
    """Base class for quiz engine errors."""


class ContentLoadFailure(QuizError):
    """A content or translation source could not be read or parsed."""


class EmptyContent(QuizError):
    """No activities are available, so a session cannot start."""


class NoActiveItem(QuizError):
    """An item was requested or answered while the session is not active."""


class AlreadyAnswered(QuizError):
    """The current item has already been answered."""


class UnsupportedLanguage(QuizError):
    def __init__(self, lang, supported=()):
        self.lang = lang
        self.supported = tuple(supported)
        super().__init__(f"Unsupported language: {lang!r} (supported: {', '.join(self.supported)})")
