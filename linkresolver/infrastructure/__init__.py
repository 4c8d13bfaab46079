"""Infrastructure layer: implementations of the application interfaces.

Cache stores, SQLAlchemy stores, media URLs and routing.
"""
