"""External services consumed by the resolver (media URLs)."""
