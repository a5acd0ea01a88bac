# app/core/errors.py
"""
Domain errors raised by the services.

The API layer maps each kind to an HTTP status; services never raise
HTTPException themselves.
"""


class DomainError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404


class InvalidScheduleError(DomainError):
    status_code = 400


class ConflictError(DomainError):
    status_code = 409


class InputValidationError(DomainError):
    status_code = 422
