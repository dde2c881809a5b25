from __future__ import annotations


class IcebreakerError(Exception):
    """Base for errors that map straight onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(IcebreakerError):
    status_code = 400


class NotFound(IcebreakerError):
    status_code = 404


class Conflict(IcebreakerError):
    status_code = 409


class Exhausted(IcebreakerError):
    """The team has used or skipped every question in the bank."""

    status_code = 404
