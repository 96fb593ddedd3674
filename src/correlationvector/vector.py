"""
Correlation vector value type and its encoding rules.

Wire format: <base>.<ext1>[.<ext2>...][!]
    - base is 16 (V1) or 22 (V2) characters from the base64 alphabet
    - each extension is a decimal non-negative integer
    - a trailing "!" marks a frozen vector that must not grow any further
"""

from correlationvector.models import CorrelationVectorVersion
from correlationvector.utils.helpers import digit_count

# Header used between services to pass the correlation vector
HEADER_NAME = "MS-CV"

# Appended when a vector runs out of room
TERMINATION_SIGN = "!"

BASE64_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

MAX_EXTENSION = 2**53 - 1


def is_immutable(correlation_vector: str | None) -> bool:
    """Check whether a rendered vector carries the termination sign."""
    return bool(correlation_vector) and correlation_vector.endswith(TERMINATION_SIGN)


def infer_version(correlation_vector: str | None) -> CorrelationVectorVersion:
    """
    Infer the version from the position of the first separator.

    Inference is lenient: anything that doesn't look like V2 is treated as V1.
    """
    index = correlation_vector.find(".") if correlation_vector else -1

    if index == CorrelationVectorVersion.V2.base_length:
        return CorrelationVectorVersion.V2
    return CorrelationVectorVersion.V1


def is_oversized(
    base_vector: str | None, extension: int, version: CorrelationVectorVersion
) -> bool:
    """Check whether base + "." + extension exceeds the version's max length."""
    if not base_vector:
        return False
    size = len(base_vector) + 1 + digit_count(extension)
    return size > version.max_length


class CorrelationVector:
    """
    Lightweight vector for identifying and measuring causality.

    Instances are created through ``CorrelationVectorEngine`` (create, extend,
    spin, parse). The only mutation is ``increment``, which advances the
    extension. A vector is owned by a single operation; there is no internal
    locking.
    """

    def __init__(
        self,
        base_vector: str,
        extension: int = 0,
        version: CorrelationVectorVersion = CorrelationVectorVersion.V1,
        immutable: bool = False,
    ):
        self._base_vector = base_vector
        self._extension = extension
        self._version = version
        self._immutable = immutable or is_oversized(base_vector, extension, version)

    @property
    def base_vector(self) -> str:
        return self._base_vector

    @property
    def extension(self) -> int:
        return self._extension

    @property
    def version(self) -> CorrelationVectorVersion:
        return self._version

    @property
    def immutable(self) -> bool:
        return self._immutable

    @property
    def value(self) -> str:
        """The rendered vector, suitable for the outbound header."""
        suffix = TERMINATION_SIGN if self._immutable else ""
        return f"{self._base_vector}.{self._extension}{suffix}"

    def increment(self) -> str:
        """
        Increment the extension by one.

        Call this before passing the value to an outbound message header.
        If the incremented value would not fit, the vector is frozen instead
        and the extension stays unchanged.

        Returns:
            The rendered value after the increment (or the unchanged value)
        """
        if self._immutable or self._extension >= MAX_EXTENSION:
            return self.value

        next_extension = self._extension + 1
        if is_oversized(self._base_vector, next_extension, self._version):
            self._immutable = True
            return self.value

        self._extension = next_extension
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return (
            f"CorrelationVector(value={self.value!r}, "
            f"version={self._version.value})"
        )
