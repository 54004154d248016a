"""Core Layer — pure domain pieces, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, repositories/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
