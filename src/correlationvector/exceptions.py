"""Domain-specific exceptions for correlation vectors.

Malformed input is only an error when strict validation is enabled. In
lenient mode every parsing path has a fallback and oversized vectors are
frozen instead of rejected, so none of these are raised.
"""

from correlationvector.models import FormatError, FormatErrorReason


class CorrelationVectorError(Exception):
    """Base exception for all correlation vector errors."""


class InvalidCorrelationVectorError(CorrelationVectorError):
    """An inbound correlation vector failed strict validation.

    The derivation (extend or spin) is not attempted. The attached
    ``FormatError`` tells callers which constraint was violated.

    Examples:
        - Value is missing or longer than the version allows
        - Base segment has the wrong length for the inferred version
        - An extension segment is not a non-negative integer
    """

    def __init__(self, error: FormatError):
        super().__init__(error.message)
        self.error = error

    @property
    def reason(self) -> FormatErrorReason:
        return self.error.reason


class UnsupportedVersionError(CorrelationVectorError, ValueError):
    """A version value other than V1 or V2 was supplied."""
