"""
Error types for the Jito SDK

Every failure surfaced by the SDK is a JitoSdkError tagged with the category
that produced it, so callers can tell connection problems from malformed
responses without matching on message text.
"""

from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """Categories of SDK errors"""
    CONNECTION = "connection"
    REMOTE_CALL = "remote_call"
    RESPONSE_SHAPE = "response_shape"
    PRECONDITION = "precondition"


class BundleValidationErrorType(Enum):
    """Which bundle parameter invariant was violated"""
    INVALID_FORMAT = "invalid_format"
    NOT_AN_ARRAY = "not_an_array"
    EMPTY_BUNDLE = "empty_bundle"
    TOO_MANY_TRANSACTIONS = "too_many_transactions"
    INVALID_ENCODING = "invalid_encoding"


class JitoSdkError(Exception):
    """Base class for all SDK errors"""
    category: ErrorCategory = ErrorCategory.REMOTE_CALL


class EndpointConnectionError(JitoSdkError):
    """The remote endpoint could not be reached or the address is malformed"""
    category = ErrorCategory.CONNECTION


class ChannelNotReadyError(JitoSdkError):
    """The gRPC channel did not report ready before an attempt"""
    category = ErrorCategory.REMOTE_CALL


class RemoteCallError(JitoSdkError):
    """A remote call failed and will not be retried any further"""
    category = ErrorCategory.REMOTE_CALL

    def __init__(self, message: str, attempts: int = 1):
        super().__init__(message)
        self.attempts = attempts


class ResponseShapeError(JitoSdkError):
    """A response is missing a field, has the wrong type or is empty"""
    category = ErrorCategory.RESPONSE_SHAPE


class ResponseParseError(JitoSdkError):
    """A response payload could not be parsed at all"""
    category = ErrorCategory.RESPONSE_SHAPE


class PreconditionError(JitoSdkError):
    """A call was rejected before any network activity"""
    category = ErrorCategory.PRECONDITION


class GrpcNotEnabledError(PreconditionError):
    """A gRPC method was used before enable_grpc()"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "gRPC is not enabled; call enable_grpc() first")


class BundleValidationError(PreconditionError, ValueError):
    """Bundle parameters failed structural validation"""

    def __init__(self, error_type: BundleValidationErrorType, message: str):
        super().__init__(message)
        self.error_type = error_type
