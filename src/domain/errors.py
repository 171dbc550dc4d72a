"""
Domain exceptions raised by repositories.

Use cases catch these and turn them into ``Result`` errors.
"""


class DuplicateEmailError(Exception):
    """A user with the same email address already exists."""


class EditConflictError(Exception):
    """The stored version no longer matches the version that was read."""


class PasswordComparisonError(Exception):
    """A stored password hash could not be checked."""
