"""
Input validation rules shared by the use cases.
"""

import datetime
from typing import Optional

from src.domain.base import utcnow
from src.domain.filters import Filters
from src.domain.tokens import TOKEN_PLAINTEXT_LENGTH
from src.domain.validator import EMAIL_RX, Validator, matches, permitted_value

MAX_STEPS = 1_000_000
MAX_CUPS = 1_000


def validate_email(v: Validator, email: str) -> None:
    v.check(email != "", "email", "must be provided")
    v.check(matches(email, EMAIL_RX), "email", "must be a valid email address")


def validate_password_plaintext(v: Validator, password: str, key: str = "password") -> None:
    # bcrypt only looks at the first 72 bytes
    v.check(password != "", key, "must be provided")
    v.check(len(password.encode("utf-8")) >= 8, key, "must be at least 8 bytes long")
    v.check(len(password.encode("utf-8")) <= 72, key, "must not be more than 72 bytes long")


def validate_user(v: Validator, name: str, email: str, password: Optional[str]) -> None:
    v.check(name != "", "name", "must be provided")
    v.check(len(name.encode("utf-8")) <= 500, "name", "must not be more than 500 bytes long")

    validate_email(v, email)

    if password is not None:
        validate_password_plaintext(v, password)


def validate_token_plaintext(v: Validator, plaintext: str) -> None:
    v.check(plaintext != "", "token", "must be provided")
    v.check(
        len(plaintext) == TOKEN_PLAINTEXT_LENGTH,
        "token",
        f"must be {TOKEN_PLAINTEXT_LENGTH} bytes long",
    )


def validate_filters(v: Validator, f: Filters) -> None:
    v.check(f.page > 0, "page", "must be greater than zero")
    v.check(f.page <= 1000, "page", "must be a maximum of 1000")
    v.check(f.page_size > 0, "page_size", "must be greater than zero")
    v.check(f.page_size <= 100, "page_size", "must be a maximum of 100")
    v.check(permitted_value(f.sort, *f.sort_safelist), "sort", "invalid sort value")


def validate_fitness_record(
    v: Validator, steps: int, cups: int, date: Optional[datetime.date]
) -> None:
    v.check(steps >= 0, "steps", "must not be negative")
    v.check(steps <= MAX_STEPS, "steps", f"must not be more than {MAX_STEPS}")
    v.check(cups >= 0, "cups", "must not be negative")
    v.check(cups <= MAX_CUPS, "cups", f"must not be more than {MAX_CUPS}")
    if date is not None:
        v.check(date <= utcnow().date(), "date", "must not be in the future")
