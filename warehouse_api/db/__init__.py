"""Database Declarations — the SQLAlchemy declarative Base shared by all models."""
