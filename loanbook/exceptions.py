# loanbook/exceptions.py


class LoanbookError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LoanbookError):
    status_code = 400


class NotFoundError(LoanbookError):
    status_code = 404
