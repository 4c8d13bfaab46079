"""Core: config, constants, working-language context, and application bootstrap.

Single place for settings and shared constants.
"""

from linkresolver.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
