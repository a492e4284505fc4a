"""
Tests for the shared input helpers.
"""
import pytest

from utils import MAX_ID, MIN_ID, is_blank, parse_id


@pytest.mark.parametrize('value,expected', [
    (None, True),
    ('', True),
    ('   ', True),
    ('x', False),
    (0, False),
    (False, False),
])
def test_is_blank(value, expected):
    assert is_blank(value) is expected


@pytest.mark.parametrize('value,expected', [
    (7, 7),
    ('7', 7),
    ('-3', -3),
    (str(MAX_ID), MAX_ID),
    (MIN_ID, MIN_ID),
])
def test_parse_id_accepts_integers(value, expected):
    assert parse_id(value) == expected


@pytest.mark.parametrize('value', [
    None, True, 1.5, '', 'abc', '1_0', ' 1', '1 ', '+1', '١٢',
    MAX_ID + 1, MIN_ID - 1, str(MAX_ID + 1), '9' * 400,
])
def test_parse_id_rejects_everything_else(value):
    assert parse_id(value) is None
