"""Identifiers — tests for the record key format check.

Tests cover:
    - new_id produces keys accepted by is_valid_id
    - Wrong length, non-hex characters and non-strings are rejected
    - Uppercase keys are accepted and normalised to lowercase
"""

import pytest

from tinmarin.core.identifiers import ID_LENGTH, is_valid_id, new_id, normalize_id


def test_new_id_is_valid_and_lowercase():
    key = new_id()
    assert len(key) == ID_LENGTH
    assert key == key.lower()
    assert is_valid_id(key)


def test_new_id_is_unique():
    assert new_id() != new_id()


@pytest.mark.parametrize("raw", [
    "",
    "abc",
    "0" * 31,
    "0" * 33,
    "g" * 32,
    "0123456789abcdef0123456789abcde ",
    "0123456789abcdef-0123456789abcde",
    None,
    12345,
])
def test_is_valid_id_rejects_malformed(raw):
    assert not is_valid_id(raw)


def test_is_valid_id_accepts_uppercase():
    assert is_valid_id("0123456789ABCDEF0123456789ABCDEF")


def test_normalize_id_lowercases():
    assert normalize_id("0123456789ABCDEF0123456789ABCDEF") == (
        "0123456789abcdef0123456789abcdef"
    )
