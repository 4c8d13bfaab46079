"""Working-language middleware.

Reads the language id header (X-Language-ID by default) and sets the
working-language context for the request, so resolver calls made with
language id 0 use it. Missing or invalid values leave the context unset
(the configured default language applies). Raw ASGI.
"""

from typing import Callable

from linkresolver.core.language_context import current_language_id

# Language ids are small positive integers; anything longer is rejected.
LANGUAGE_ID_MAX_LENGTH = 9


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _parse_language_id(raw: str | None) -> int | None:
    """Return raw as a positive int, or None when missing or malformed."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw.isascii() or not raw.isdigit() or len(raw) > LANGUAGE_ID_MAX_LENGTH:
        return None
    language_id = int(raw)
    return language_id if language_id > 0 else None


def LanguageContextMiddleware(
    app: Callable, header_name: str = "X-Language-ID"
) -> Callable:
    """Set the working language from header_name for the duration of each request."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        token = current_language_id.set(
            _parse_language_id(_get_header(scope, header_name))
        )
        try:
            await app(scope, receive, send)
        finally:
            current_language_id.reset(token)

    return asgi_app
