"""Error types raised by the explorer core.

Every error is scoped to a single operation; none of them invalidates
the loaded catalogue or the route state.
"""

from enum import Enum

from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Closed set of failure categories shown to the user."""

    SCHEMA_LOOKUP = "schema_lookup"
    USER_INPUT = "user_input"
    NETWORK = "network"
    RESPONSE_PARSE = "response_parse"


class DisplayError(BaseModel):
    """Structured error value handed to the presentation layer."""

    kind: ErrorKind
    message: str


class ExplorerError(Exception):
    """Base class for explorer errors."""

    kind: ErrorKind

    def to_display(self) -> DisplayError:
        return DisplayError(kind=self.kind, message=str(self))


class SchemaLookupError(ExplorerError):
    """Raised when an endpoint id or a payload schema is not in the catalogue."""

    kind = ErrorKind.SCHEMA_LOOKUP


class UserInputParseError(ExplorerError):
    """Raised when the payload text entered by the user is not valid JSON."""

    kind = ErrorKind.USER_INPUT


class NetworkError(ExplorerError):
    """Raised when the HTTP call fails or answers with a non-2xx status."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseParseError(ExplorerError):
    """Raised when the server answered but the body is not valid JSON."""

    kind = ErrorKind.RESPONSE_PARSE
