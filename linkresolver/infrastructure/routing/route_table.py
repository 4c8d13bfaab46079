"""Application URL building: virtual-path expansion and named routes.

Implements IPathExpander and IRouter on top of the configured
app_base_path, so every URL the resolver returns is rooted the same way.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from linkresolver.core.constants import VIRTUAL_PATH_MARKER
from linkresolver.domain.exceptions import RouteNotFoundException


def normalize_base_path(base_path: str) -> str:
    """Return base_path with exactly one leading and one trailing slash ('/' for empty)."""
    stripped = base_path.strip().strip("/")
    return f"/{stripped}/" if stripped else "/"


class VirtualPathExpander:
    """Expands '~' and '~/...' to paths under the application base path."""

    def __init__(self, base_path: str = "/") -> None:
        self.base_path = normalize_base_path(base_path)

    def to_absolute(self, virtual_path: str) -> str:
        """Return the absolute path; paths without the '~' marker are returned unchanged."""
        if not virtual_path.startswith(VIRTUAL_PATH_MARKER):
            return virtual_path
        remainder = virtual_path[len(VIRTUAL_PATH_MARKER):].lstrip("/")
        return self.base_path + remainder


class RouteTable:
    """Named route templates (e.g. 'Topic' -> 't/{se_name}') under a base path."""

    def __init__(self, templates: Mapping[str, str], base_path: str = "/") -> None:
        self.templates = dict(templates)
        self.base_path = normalize_base_path(base_path)

    def route_url(self, route_name: str, **values: Any) -> str:
        """Return the URL for route_name with URL-quoted values substituted.

        Raises:
            RouteNotFoundException: If route_name is not configured.
            ValueError: If a placeholder of the template has no value.
        """
        template = self.templates.get(route_name)
        if template is None:
            raise RouteNotFoundException(route_name)
        quoted = {name: quote(str(value), safe="") for name, value in values.items()}
        try:
            path = template.format(**quoted)
        except KeyError as e:
            raise ValueError(
                f"Route {route_name!r} requires a value for {e.args[0]!r}"
            ) from e
        return self.base_path + path.lstrip("/")
