"""
Exception classes for HTTP signature generation
"""

from typing import Optional, Dict, Any, List


ERROR_MESSAGE = "Unable to generate HTTP Signature:"


class ErrorCodes:
    """Standard error codes for signature generation"""

    # Boundary failure code reported to the request pipeline
    HTTP_SIGNATURE_IMPOSSIBLE_GENERATION = "HTTP_SIGNATURE_IMPOSSIBLE_GENERATION"

    # Validation errors
    MISSING_REQUIRED_HEADERS = "MISSING_REQUIRED_HEADERS"
    MISSING_DATE_HEADER = "MISSING_DATE_HEADER"
    MISSING_HEADER_AT_SIGN_TIME = "MISSING_HEADER_AT_SIGN_TIME"

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    FILE_ERROR = "FILE_ERROR"

    # Signing errors
    SIGNING_FAILED = "SIGNING_FAILED"


class HttpSignatureError(Exception):
    """Base exception for all HTTP signature errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class MissingHeadersError(HttpSignatureError):
    """Raised when the request lacks headers the configuration requires"""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            f"{ERROR_MESSAGE} those headers are missing [{', '.join(self.missing)}]",
            ErrorCodes.MISSING_REQUIRED_HEADERS,
            {"missing_headers": self.missing}
        )


class MissingDateError(HttpSignatureError):
    """Raised when no header list is configured and the request has no Date header"""

    def __init__(self):
        super().__init__(
            f"{ERROR_MESSAGE} 'Date' header is missing",
            ErrorCodes.MISSING_DATE_HEADER
        )


class SigningConfigError(HttpSignatureError):
    """Raised for inconsistent signature parameters, e.g. (expires) without a timestamp"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCodes.INVALID_CONFIG, details)


class MissingHeaderAtSignTimeError(HttpSignatureError):
    """Raised when a signed header has no value while building the signing string"""

    def __init__(self, header: str):
        self.header = header
        super().__init__(
            f"Missing required header for signing: {header}",
            ErrorCodes.MISSING_HEADER_AT_SIGN_TIME,
            {"header": header}
        )


class SigningError(HttpSignatureError):
    """
    Raised when computing the keyed-hash digest fails.

    Attributes:
        cause: Message of the underlying failure
    """

    def __init__(self, cause: str, details: Optional[Dict[str, Any]] = None):
        self.cause = cause
        super().__init__(cause, ErrorCodes.SIGNING_FAILED, details)


class ConfigurationError(HttpSignatureError):
    """Exception raised for configuration loading and validation errors"""

    def __init__(self, message: str, error_code: str = ErrorCodes.INVALID_CONFIG,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class SignatureGenerationError(HttpSignatureError):
    """
    Terminal failure reported to the request pipeline.

    Wraps any error raised while generating a signature. The request must
    not proceed once this is raised.

    Attributes:
        failure: Structured failure (error code, HTTP status, message)
    """

    def __init__(self, failure, details: Optional[Dict[str, Any]] = None):
        super().__init__(failure.message, failure.error_code, details)
        self.failure = failure
        self.http_status = failure.http_status
