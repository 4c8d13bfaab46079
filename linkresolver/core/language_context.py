"""Working-language context.

Middleware sets the current language id in this context variable so that
resolver calls made with the sentinel language id 0 pick up the
caller's working language.
"""

from contextvars import ContextVar

# Current working language for the request (set by middleware).
current_language_id: ContextVar[int | None] = ContextVar(
    "current_language_id", default=None
)


def get_language_id() -> int | None:
    """Return the working language id if set."""
    return current_language_id.get()


class ContextLanguageProvider:
    """Working-language provider backed by the context variable.

    Falls back to the configured default language when the context is
    unset or holds a non-positive id.
    """

    def __init__(self, default_language_id: int) -> None:
        self.default_language_id = default_language_id

    def current_language_id(self) -> int:
        language_id = get_language_id()
        if language_id is None or language_id <= 0:
            return self.default_language_id
        return language_id
