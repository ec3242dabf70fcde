# portfolio/core/exceptions.py
from typing import Optional


class PortfolioError(Exception):
    """Base error; carries the HTTP status and a short public message."""

    status_code = 500
    kind = "server_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PortfolioError):
    status_code = 404
    kind = "not_found"

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found.")
        self.resource = resource


class PersistenceError(PortfolioError):
    """A store operation failed. ``cause`` is logged, never returned."""

    status_code = 500
    kind = "server_error"

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__("Server error.")
        self.operation = operation
        self.cause = cause


class SmsNotAvailableError(PortfolioError):
    status_code = 501
    kind = "not_implemented"
