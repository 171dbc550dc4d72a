import datetime

import pytest

from src.domain.base import utcnow
from src.domain.filters import Filters
from src.domain.validation import (
    validate_fitness_record,
    validate_filters,
    validate_password_plaintext,
    validate_user,
)
from src.domain.validator import EMAIL_RX, Validator, matches, permitted_value, unique


def test_first_error_for_a_field_wins():
    v = Validator()

    v.add_error("email", "first")
    v.add_error("email", "second")

    assert not v.valid()
    assert v.errors == {"email": "first"}


def test_check_only_records_failures():
    v = Validator()

    v.check(True, "name", "must be provided")
    assert v.valid()

    v.check(False, "name", "must be provided")
    assert v.errors == {"name": "must be provided"}


def test_helpers():
    assert permitted_value("id", "id", "-id")
    assert not permitted_value("name", "id", "-id")
    assert unique(["a", "b"])
    assert not unique(["a", "a"])


@pytest.mark.parametrize("email", ["alice@example.com", "a.b+c@sub.example.org"])
def test_email_accepted(email):
    assert matches(email, EMAIL_RX)


@pytest.mark.parametrize(
    "email",
    ["", "alice", "alice@", "@example.com", "alice@-example.com", "alice@example.com\n"],
)
def test_email_rejected(email):
    assert not matches(email, EMAIL_RX)


def test_password_length_counts_bytes():
    v = Validator()
    # 24 three-byte characters = 72 bytes, one more is too long
    validate_password_plaintext(v, "€" * 24)
    assert v.valid()

    validate_password_plaintext(v, "€" * 25)
    assert v.errors == {"password": "must not be more than 72 bytes long"}


def test_user_without_password_skips_password_rules():
    v = Validator()

    validate_user(v, "Alice", "alice@example.com", None)

    assert v.valid()


def test_name_over_500_bytes():
    v = Validator()

    validate_user(v, "n" * 501, "alice@example.com", "pa55word")

    assert v.errors == {"name": "must not be more than 500 bytes long"}


def test_filters_bounds():
    v = Validator()

    validate_filters(v, Filters(page=1001, page_size=0, sort="id", sort_safelist=["id"]))

    assert v.errors == {
        "page": "must be a maximum of 1000",
        "page_size": "must be greater than zero",
    }


def test_fitness_record_today_is_allowed():
    v = Validator()

    validate_fitness_record(v, 0, 0, utcnow().date())

    assert v.valid()


def test_fitness_record_future_date():
    v = Validator()

    validate_fitness_record(v, 10, 1, utcnow().date() + datetime.timedelta(days=2))

    assert v.errors == {"date": "must not be in the future"}
