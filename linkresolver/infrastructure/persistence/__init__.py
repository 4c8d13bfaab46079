"""Persistence: SQLAlchemy engine, ORM models and read-only stores."""
