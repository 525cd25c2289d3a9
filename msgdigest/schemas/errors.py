"""
Error taxonomy for message digest construction.

Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Construction Errors
    INVALID_MESSAGE_LENGTH = "INVALID_MESSAGE_LENGTH"

    # Collaborator Boundary Errors
    INVALID_HEX_ENCODING = "INVALID_HEX_ENCODING"
    UNSUPPORTED_HASH_ALGORITHM = "UNSUPPORTED_HASH_ALGORITHM"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class DigestError(BaseModel):
    """
    Base error model for structured error communication.

    Lets callers that handle untrusted input report a rejected digest
    without raising, e.g. in an API response body.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_MESSAGE_LENGTH],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "DigestException":
        """Convert this error model to a raised exception."""
        if self.code == ErrorCodes.INVALID_MESSAGE_LENGTH:
            return InvalidMessageLengthException(
                expected=self.details.get("expected", 32),
                actual=self.details.get("actual", -1),
            )
        return DigestException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


class MessageLengthError(DigestError):
    """Error model for digests of the wrong length."""

    code: str = Field(default=ErrorCodes.INVALID_MESSAGE_LENGTH)
    expected: int | None = Field(
        default=None,
        description="Required digest length in bytes",
    )
    actual: int | None = Field(
        default=None,
        description="Length of the rejected input in bytes",
    )

    def to_exception(self) -> "InvalidMessageLengthException":
        """Convert to an exception, preferring the typed length fields."""
        expected = self.expected if self.expected is not None else self.details.get("expected", 32)
        actual = self.actual if self.actual is not None else self.details.get("actual", -1)
        return InvalidMessageLengthException(
            expected=expected,
            actual=actual,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class DigestException(Exception):
    """
    Base exception for all msgdigest errors.

    This exception carries structured error information and can be
    converted to/from DigestError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "DIGEST_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = dict(details or {})
        self.retryable = retryable

    def __reduce__(self):
        return (type(self), (self.message, self.code, self.details, self.retryable))

    def to_error_model(self) -> DigestError:
        """Convert this exception to a DigestError model."""
        return DigestError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidMessageLengthException(DigestException, ValueError):
    """Exception raised when a digest is not exactly the required length."""

    def __init__(
        self,
        expected: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        full_details["expected"] = expected
        full_details["actual"] = actual
        super().__init__(
            message=f"Message digest must be exactly {expected} bytes, got {actual}",
            code=ErrorCodes.INVALID_MESSAGE_LENGTH,
            details=full_details,
            retryable=False,
        )
        self.expected = expected
        self.actual = actual

    def __reduce__(self):
        return (type(self), (self.expected, self.actual, self.details))

    def to_error_model(self) -> MessageLengthError:
        return MessageLengthError(
            message=self.message,
            details=self.details,
            expected=self.expected,
            actual=self.actual,
        )


# Short name for the single construction failure.
InvalidLength = InvalidMessageLengthException


class HexDecodingException(DigestException, ValueError):
    """Exception raised when a hex-encoded digest cannot be decoded."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_HEX_ENCODING,
            details=details,
            retryable=False,
        )

    def __reduce__(self):
        return (type(self), (self.message, self.details))


class UnsupportedHashAlgorithmException(DigestException, ValueError):
    """Exception raised when a hash algorithm does not yield a 32-byte digest."""

    def __init__(
        self,
        algorithm: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        full_details["algorithm"] = algorithm
        super().__init__(
            message=f"Unsupported hash algorithm: {algorithm!r}",
            code=ErrorCodes.UNSUPPORTED_HASH_ALGORITHM,
            details=full_details,
            retryable=False,
        )
        self.algorithm = algorithm

    def __reduce__(self):
        return (type(self), (self.algorithm, self.details))
