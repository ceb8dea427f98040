"""Persistence adapters (SQLAlchemy 2.0 async)."""
