"""
clawboard-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1: validation, not-found, network, parse errors."""

    exit_code = 1


class SetupError(CliError):
    """Exit code 2: credentials or board config missing/malformed."""

    exit_code = 2


class ValidationError(CliError):
    """Bad user input caught before any remote call (list key, due date)."""


class ResolutionError(CliError):
    """A card reference could not be turned into a canonical card id."""

    def __init__(self, ref):
        self.ref = ref
        super().__init__(f"[ERROR] Could not resolve card id from: {ref}")


class ApiError(CliError):
    """Non-2xx response from the board service."""

    def __init__(self, message, status=None, body=None, url=None):
        super().__init__(message)
        self.status = status
        self.body = body
        self.url = url


class AuthError(ApiError):
    """The board service rejected the key/token pair (401/403)."""


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors that callers want to handle."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
