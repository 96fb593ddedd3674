"""Correlation vectors for tracing causally related operations across services."""

from .engine import (
    CorrelationVectorEngine,
    create_correlation_vector,
    extend,
    get_engine,
    parse,
    spin,
)
from .exceptions import (
    CorrelationVectorError,
    InvalidCorrelationVectorError,
    UnsupportedVersionError,
)
from .models import (
    CorrelationVectorVersion,
    FormatError,
    FormatErrorReason,
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)
from .settings import CorrelationVectorSettings
from .vector import HEADER_NAME, TERMINATION_SIGN, CorrelationVector

__all__ = [
    "HEADER_NAME",
    "TERMINATION_SIGN",
    "CorrelationVector",
    "CorrelationVectorEngine",
    "CorrelationVectorError",
    "CorrelationVectorSettings",
    "CorrelationVectorVersion",
    "FormatError",
    "FormatErrorReason",
    "InvalidCorrelationVectorError",
    "SpinCounterInterval",
    "SpinCounterPeriodicity",
    "SpinEntropy",
    "SpinParameters",
    "UnsupportedVersionError",
    "create_correlation_vector",
    "extend",
    "get_engine",
    "parse",
    "spin",
]
