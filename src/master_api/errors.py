"""Domain exceptions raised by account and geo services.

Handlers never catch these. They travel up to the global exception
handlers registered in ``master_api.api.error_handlers``, which map
each type to an HTTP status and a ``{"error_code", "message"}`` body.
"""


class MasterApiError(Exception):
    """Base class for errors raised by domain services."""

    error_code = "REQUEST_FAILED"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AccountError(MasterApiError):
    error_code = "ACCOUNT_ERROR"


class InvalidCredentialsError(AccountError):
    error_code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid username or password.") -> None:
        super().__init__(message)


class AccountNotClosedError(AccountError):
    error_code = "ACCOUNT_NOT_CLOSED"

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Account '{username}' is not closed and cannot be reopened.")


class GeoError(MasterApiError):
    error_code = "GEO_ERROR"


class CountryNotFoundError(GeoError):
    error_code = "COUNTRY_NOT_FOUND"

    def __init__(self, iso2: str) -> None:
        self.iso2 = iso2
        super().__init__(f"Country '{iso2}' was not found.")


class LanguageNotFoundError(GeoError):
    error_code = "LANGUAGE_NOT_FOUND"

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Language '{code}' was not found.")


class ServiceUnavailableError(MasterApiError):
    error_code = "SERVICE_UNAVAILABLE"
