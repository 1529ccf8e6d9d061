from __future__ import annotations

from datetime import date

import pytest

from bookstore.domain.dates import parse_calendar_date
from bookstore.domain.emails import InvalidEmailError, normalize_email
from bookstore.domain.isbn import compact_isbn, is_valid_isbn


@pytest.mark.parametrize(
    "value",
    ["978-0441172719", "9780441172719", "978 0747538493", "0-306-40615-2", "0441172717", "0-8044-2957-X"],
)
def test_valid_isbns(value):
    assert is_valid_isbn(value)


@pytest.mark.parametrize(
    "value",
    ["978-0441172718", "0-306-40615-3", "12345", "", None, "978044117271X", "0-8044-2957-x", "abcdefghij"],
)
def test_invalid_isbns(value):
    assert not is_valid_isbn(value)


def test_compact_isbn_strips_separators():
    assert compact_isbn(" 978-0-441 17271-9 ") == "9780441172719"


def test_parse_calendar_date_accepts_dash_and_slash():
    assert parse_calendar_date("1965-08-01") == date(1965, 8, 1)
    assert parse_calendar_date("1965/8/1") == date(1965, 8, 1)


@pytest.mark.parametrize("value", ["1965-02-30", "01-08-1965", "1965-08/01", "yesterday", "", None, "1965-13-01"])
def test_parse_calendar_date_rejects(value):
    assert parse_calendar_date(value) is None


def test_normalize_email_lowercases():
    assert normalize_email("  Alice.Smith@Example.COM ") == "alice.smith@example.com"


def test_normalize_email_gmail_rules():
    assert normalize_email("Jane.Doe+news@GoogleMail.com") == "janedoe@gmail.com"


def test_normalize_email_outlook_and_yahoo_subaddress():
    assert normalize_email("bob+shop@outlook.com") == "bob@outlook.com"
    assert normalize_email("carol-promo@yahoo.com") == "carol@yahoo.com"


def test_normalize_email_yahoo_keeps_inner_dashes():
    assert normalize_email("john-doe-news@yahoo.com") == "john-doe@yahoo.com"
    assert normalize_email("john@yahoo.com") == "john@yahoo.com"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("a+x@hotmail.co.uk", "a@hotmail.co.uk"),
        ("a+x@live.de", "a@live.de"),
        ("a+x@me.com", "a@me.com"),
        ("a-x@yahoo.co.uk", "a@yahoo.co.uk"),
        ("a-x@yahoo.de", "a@yahoo.de"),
        ("a.b@ya.ru", "a.b@yandex.ru"),
    ],
)
def test_normalize_email_regional_providers(value, expected):
    assert normalize_email(value) == expected


def test_normalize_email_leaves_other_domains_tags():
    assert normalize_email("a+x-y@example.com") == "a+x-y@example.com"


@pytest.mark.parametrize("value", ["not-an-email", "", None, "a@", "@example.com", "two@@example.com"])
def test_normalize_email_rejects_invalid(value):
    with pytest.raises(InvalidEmailError):
        normalize_email(value)
