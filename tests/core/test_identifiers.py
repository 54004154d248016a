"""Entity Identifiers — which raw path segments may reach the store.

Tests:
    - Plain decimal strings and non-negative ints parse
    - Signs, whitespace, decimals, non-ASCII digits, bools and overflow are rejected
"""

import pytest

from portfolio_api.core.identifiers import MAX_ENTITY_ID, parse_entity_id


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    ("0042", 42),
    (7, 7),
    (str(MAX_ENTITY_ID), MAX_ENTITY_ID),
])
def test_valid_ids_parse(raw, expected):
    assert parse_entity_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "", "abc", "-1", "+1", " 1", "1 ", "1.0", "1e3", "١٢",
    str(MAX_ENTITY_ID + 1), -5, True, None, 1.0,
])
def test_invalid_ids_rejected(raw):
    assert parse_entity_id(raw) is None
