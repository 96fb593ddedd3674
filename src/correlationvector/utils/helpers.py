import re

from correlationvector.models import CorrelationVectorVersion

_EXTENSION_PATTERN = re.compile(r"[0-9]+")

# No segment of a well-formed vector can be longer than the longest vector
_MAX_SEGMENT_LENGTH = CorrelationVectorVersion.V2.max_length


def digit_count(value: int) -> int:
    """
    Number of decimal digits needed to render a non-negative integer.

    Examples:
        - 0 -> 1
        - 9 -> 1
        - 10 -> 2
    """
    return len(str(value)) if value > 0 else 1


def parse_extension(segment: str) -> int | None:
    """
    Parse a single extension segment.

    Only plain decimal digits are accepted, so signs, whitespace and
    underscores are rejected. Segments longer than any valid vector are
    rejected before conversion.

    Returns:
        The non-negative integer value, or None if the segment is not one
    """
    if len(segment) > _MAX_SEGMENT_LENGTH:
        return None
    if not _EXTENSION_PATTERN.fullmatch(segment):
        return None
    return int(segment)
