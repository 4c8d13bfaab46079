"""HTTP middleware: working-language context.

Applied in main app. Import and use from linkresolver.main.
"""

from linkresolver.middleware.language_context import LanguageContextMiddleware

__all__ = ["LanguageContextMiddleware"]
