"""Virtual-path handling shared by the display-name and link strategies."""

from linkresolver.application.interfaces import IPathExpander
from linkresolver.core.constants import VIRTUAL_PATH_MARKER


def expand_virtual_url(url: str, path_expander: IPathExpander) -> str:
    """Expand '~'-prefixed app-relative paths; return anything else unchanged."""
    if url.startswith(VIRTUAL_PATH_MARKER):
        return path_expander.to_absolute(url)
    return url
