"""Entity Identifiers — turn raw path segments into store ids.

Invariants:
    - Strings: only plain ASCII decimal digits ("12", not "+12", " 12", "1e3", "١٢")
    - Result fits the store's 32-bit INTEGER id column, otherwise None (an
      out-of-range bind would fail in the driver, not read as "not found")
    - Pure function: never raises, never touches IO

Design Decisions:
    - Path ids arrive as str, not int: a non-numeric id must read as "not found",
      not as a 400 from FastAPI's path coercion
"""

from typing import NewType

EntityId = NewType("EntityId", int)

MAX_ENTITY_ID = 2**31 - 1


def parse_entity_id(raw: str | int) -> EntityId | None:
    """Return the integer id named by raw, or None when it cannot name a row."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.isascii() and raw.isdigit():
        value = int(raw)
    else:
        return None
    if value < 0 or value > MAX_ENTITY_ID:
        return None
    return EntityId(value)
