"""Exception hierarchy shared by the fetch, parse and CLI layers."""


class KivaKeliError(Exception):
    """Base class for every error reported by the CLI."""


class MalformedUrlError(KivaKeliError):
    """Raised when a request URL cannot be constructed or used."""


class NetworkError(KivaKeliError):
    """Raised on transport failures and non-2xx HTTP responses."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(NetworkError):
    """Raised when the weather service rejects the API key (HTTP 401)."""


class MalformedDocumentError(KivaKeliError):
    """Raised when a response body is not the JSON shape we expect."""


class MissingFieldError(MalformedDocumentError):
    """Raised when a JSON document lacks a requested member."""

    def __init__(self, name: str):
        super().__init__(f"Field not found: {name}")
        self.name = name


class InvalidArgumentError(KivaKeliError):
    """Raised on bad command-line usage."""


class CredentialError(KivaKeliError):
    """Raised when the API key cannot be read, written or is empty."""
