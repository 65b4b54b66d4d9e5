"""Domain errors. Each carries the wire code and HTTP status it is rendered with."""

from fastapi import status


class ShipcoError(Exception):
    code = "internal_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)


class MissingFields(ShipcoError):
    code = "missing_fields"
    status_code = status.HTTP_400_BAD_REQUEST


class RegistrationClosed(ShipcoError):
    code = "registration_closed"
    status_code = status.HTTP_403_FORBIDDEN


class InvalidCredentials(ShipcoError):
    code = "invalid_credentials"
    status_code = status.HTTP_401_UNAUTHORIZED


class MissingToken(ShipcoError):
    code = "missing_token"
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidToken(ShipcoError):
    code = "invalid_token"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ShipcoError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
