"""Database Declarations — SQLAlchemy Base shared by every ORM model.

Invariants:
    - No engine or connection created at import time (see infrastructure/database.py)
"""
