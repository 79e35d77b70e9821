"""
Failure Classification and Response Envelope.

Every failure the core can produce is a KnownError subclass carrying a
FailureKind. The host maps them to a response envelope (ApiResponse) and a
status code; nothing in the core retries or recovers.

Response types:
- Success: Decklist resolved completely
- KnownFailure: The input (or the dataset) deterministically caused the failure
- UnknownFailure: Anything else
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Decklist input failures
    DECKLIST_PARSE_ERROR = "decklist_parse_error"
    TOO_MANY_CARDS = "too_many_cards"

    # Resolution failures
    INVALID_CARD_NAME = "invalid_card_name"
    MULTICARD_NO_NAMES = "multicard_no_names"
    MULTICARD_MALFORMED_NAMES = "multicard_malformed_names"

    # Startup / service failures
    DATASET_LOAD_FAILED = "dataset_load_failed"
    SERVICE_UNAVAILABLE = "service_unavailable"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Universal response envelope for JSON endpoints.

    Every response is classified into one of three outcome types.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )


STANDARD_UNKNOWN_MESSAGE = "Something went wrong while building your proxies. Please retry."


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return create_known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class DecklistParseError(KnownError):
    """A decklist line matched no recognizable count/name grammar."""

    def __init__(self, line: str, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            kind=FailureKind.DECKLIST_PARSE_ERROR,
            message=f"Could not understand decklist line{where}: {line!r}",
            detail=line,
            suggestion="Write each line as '<count>x <card name>', e.g. '4x Lightning Bolt'.",
            status_code=400,
        )


class TooManyCardsError(KnownError):
    """
    The cumulative requested count exceeded the configured ceiling.

    Raised at the first line that pushes the running total over the limit.
    """

    def __init__(self, limit: int, total: int, line: str | None = None):
        self.limit = limit
        self.total = total
        self.line = line
        super().__init__(
            kind=FailureKind.TOO_MANY_CARDS,
            message=f"Decklist requests more than {limit} cards.",
            detail=f"Running total reached {total} at line {line!r}" if line else None,
            suggestion="Split the decklist into smaller batches.",
            status_code=400,
        )


class InvalidCardNameError(KnownError):
    """The sanitized name is not present in the reference store."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            kind=FailureKind.INVALID_CARD_NAME,
            message=f"Unknown card name: {name!r}",
            detail=name,
            suggestion="Check the spelling. For split cards, use the first half's name.",
            status_code=404,
        )


class MulticardNoNamesError(KnownError):
    """A composite-layout record has no list of part names."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            kind=FailureKind.MULTICARD_NO_NAMES,
            message=f"Card {name!r} has a multi-part layout but lists no parts.",
            detail=name,
            status_code=422,
        )


class MulticardMalformedNamesError(KnownError):
    """A composite-layout record lists a number of parts other than two."""

    def __init__(self, name: str, names: tuple[str, ...] = ()):
        self.name = name
        self.names = names
        super().__init__(
            kind=FailureKind.MULTICARD_MALFORMED_NAMES,
            message=f"Card {name!r} must list exactly 2 parts, found {len(names)}.",
            detail=", ".join(names) or None,
            status_code=422,
        )


class DatasetLoadError(KnownError):
    """
    The reference dataset could not be loaded.

    Fatal at startup: the service cannot resolve anything without it.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            kind=FailureKind.DATASET_LOAD_FAILED,
            message="Card reference dataset could not be loaded.",
            detail=reason,
            status_code=503,
        )


def create_success(data: T) -> ApiResponse[T]:
    """
    Create a success response.

    Args:
        data: The response data

    Returns:
        A success response
    """
    return ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data)


def create_known_failure(
    kind: FailureKind,
    message: str,
    detail: str | None = None,
    suggestion: str | None = None,
) -> ApiResponse[Any]:
    """
    Create a known failure response.

    Use when the system knows exactly why the operation failed.
    Example: unknown card name, malformed decklist line.
    """
    return ApiResponse[Any](
        outcome=OutcomeType.KNOWN_FAILURE,
        failure=FailureDetail(
            kind=kind,
            message=message,
            detail=detail,
            suggestion=suggestion,
        ),
    )


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed and cannot be customized.

    Args:
        exception: The exception that caused the failure
        include_type: Whether to include exception type in detail

    Returns:
        An unknown failure response
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    return ApiResponse[Any](
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=STANDARD_UNKNOWN_MESSAGE,
            detail=detail,
            suggestion="If this persists, please report the issue.",
        ),
    )
