"""SQLAlchemy storage backend for shiptrack."""
