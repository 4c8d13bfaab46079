"""Routing: virtual-path expander and named route table."""

from linkresolver.infrastructure.routing.route_table import (
    RouteTable,
    VirtualPathExpander,
    normalize_base_path,
)

__all__ = ["RouteTable", "VirtualPathExpander", "normalize_base_path"]
