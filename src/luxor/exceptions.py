"""Custom exceptions for the Luxor pool client.

All transport, credential and normalization exceptions live here
to avoid circular imports between modules.
"""


class LuxorError(Exception):
    """Base exception for all client errors."""


class MissingCredential(LuxorError):
    """Raised when no API key is configured. Checked before any network call."""


class TransportError(LuxorError):
    """Raised when the query transport fails (network, HTTP status, GraphQL errors)."""


class UnknownUnit(LuxorError, ValueError):
    """Raised when a hash rate unit symbol is not one of H..ZH."""


class ResponseDataError(LuxorError):
    """Base for upstream data the normalization layer cannot interpret."""


class InvalidNumericLiteral(ResponseDataError):
    """Raised when a non-empty value is not a base-10 number."""


class InvalidTimestamp(ResponseDataError):
    """Raised when a timestamp string cannot be parsed."""


class MalformedResponseShape(ResponseDataError):
    """Raised when a response tree lacks the expected envelope or field."""
