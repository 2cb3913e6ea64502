"""Errors raised by the service layer and rendered by the API."""


class StockroomError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StockroomError, ValueError):
    status_code = 400


class NotFoundError(StockroomError, LookupError):
    status_code = 404


class ConflictError(StockroomError):
    status_code = 409
