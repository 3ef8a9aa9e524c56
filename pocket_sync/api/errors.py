"""
Exceptions raised by the Pocket API client.
"""


class PocketAPIError(Exception):
    """Base class for Pocket API client errors."""


class MissingRequestTokenError(PocketAPIError):
    """An access token was requested without a pending request token."""

    def __init__(self, message="could not find stored request token"):
        super().__init__(message)


class TransportError(PocketAPIError):
    """The HTTP request failed or Pocket answered with an error status."""

    def __init__(self, message, status_code=None, x_error=None):
        super().__init__(message)
        self.status_code = status_code
        self.x_error = x_error


class MalformedResponseError(PocketAPIError):
    """A response body is missing a field the caller depends on."""

    def __init__(self, field, body=None):
        super().__init__(f"Pocket response is missing '{field}'")
        self.field = field
        self.body = body
