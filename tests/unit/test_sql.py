"""Unit tests for SQL identifier quoting and placeholders.
"""
import pytest
from ormgen.sql import make_placeholder, quote_identifier


@pytest.mark.parametrize(('identifier', 'dialect', 'expected'), [
    ('users', 'sqlite', '"users"'),
    ('users', 'postgresql', '"users"'),
    ('full name', 'sqlite', '"full name"'),
    ('say "hi"', 'sqlite', '"say ""hi"""'),
])
def test_quote_identifier(identifier, dialect, expected):
    assert quote_identifier(identifier, dialect) == expected


@pytest.mark.parametrize(('dialect', 'expected'), [
    ('sqlite', '?'),
    ('postgresql', '%s'),
])
def test_make_placeholder(dialect, expected):
    assert make_placeholder(dialect) == expected


@pytest.mark.parametrize('func', [quote_identifier, make_placeholder])
def test_unknown_dialect(func):
    args = ('users', 'oracle') if func is quote_identifier else ('oracle',)
    with pytest.raises(ValueError, match='Unknown dialect'):
        func(*args)
