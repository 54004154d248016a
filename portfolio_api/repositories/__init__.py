"""Repositories — one class per table, binding an entity to its SQL statements.

Invariants:
    - Every value reaches the store as a bound parameter (SQLAlchemy expressions,
      never f-strings or % formatting in statement text)
    - One scoped session per operation; statements inside it run sequentially
    - Repositories raise NotFoundError; store failures arrive as StoreError /
      PoolExhaustedError from DatabaseSessionManager.session()

Design Decisions:
    - Constructed with the DatabaseSessionManager (dependency injection), so a
      test can hand in a manager over a throwaway SQLite file
"""
