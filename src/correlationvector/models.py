from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class CorrelationVectorVersion(str, Enum):
    """Implementation version, selecting base length and maximum length."""

    V1 = "V1"
    V2 = "V2"

    @property
    def base_length(self) -> int:
        return 16 if self is CorrelationVectorVersion.V1 else 22

    @property
    def max_length(self) -> int:
        return 63 if self is CorrelationVectorVersion.V1 else 127


class SpinCounterInterval(IntEnum):
    """
    Granularity of the spin time counter.

    The value is the number of low bits dropped from a 100ns tick counter:
        - COARSE: 2^24 * 100ns, roughly 1.68 seconds
        - FINE: 2^16 * 100ns, roughly 6.55 milliseconds
    """

    COARSE = 24
    FINE = 16


class SpinCounterPeriodicity(IntEnum):
    """Number of time bits kept in the spin value."""

    NONE = 0
    SHORT = 16
    MEDIUM = 24
    LONG = 32


class SpinEntropy(IntEnum):
    """Number of random bytes mixed into the spin value."""

    NONE = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


class SpinParameters(BaseModel):
    """Parameters controlling how the spin operator samples time and randomness."""

    model_config = ConfigDict(frozen=True)

    interval: SpinCounterInterval = SpinCounterInterval.COARSE
    periodicity: SpinCounterPeriodicity = SpinCounterPeriodicity.SHORT
    entropy: SpinEntropy = SpinEntropy.TWO

    @property
    def ticks_bits_to_drop(self) -> int:
        return int(self.interval)

    @property
    def entropy_bits(self) -> int:
        return int(self.entropy) * 8

    @property
    def total_bits(self) -> int:
        """Width of the spin segment in bits."""
        return int(self.periodicity) + self.entropy_bits


class FormatErrorReason(str, Enum):
    """Why a correlation vector failed strict validation."""

    NULL_OR_OVERSIZED = "NullOrOversized"
    BAD_BASE_LENGTH = "BadBaseLength"
    BAD_EXTENSION_VALUE = "BadExtensionValue"


class FormatError(BaseModel):
    """Result of a failed validation."""

    model_config = ConfigDict(frozen=True)

    reason: FormatErrorReason
    message: str = Field(..., description="Human readable description")
    value: str | None = Field(None, description="The rejected correlation vector")
