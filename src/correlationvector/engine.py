"""
Correlation vector engine.
Creates, derives (extend / spin), parses and validates correlation vectors.
"""

from correlationvector.exceptions import (
    InvalidCorrelationVectorError,
    UnsupportedVersionError,
)
from correlationvector.models import (
    CorrelationVectorVersion,
    FormatError,
    FormatErrorReason,
    SpinParameters,
)
from correlationvector.randomness import (
    Clock,
    RandomSource,
    SystemRandomSource,
    system_clock,
)
from correlationvector.settings import CorrelationVectorSettings
from correlationvector.utils.helpers import parse_extension
from correlationvector.utils.logger import get_logger
from correlationvector.vector import (
    BASE64_CHARSET,
    TERMINATION_SIGN,
    CorrelationVector,
    infer_version,
    is_immutable,
    is_oversized,
)

logger = get_logger(__name__)

# Length of one clock tick in nanoseconds (the spin counter's 100ns unit)
_TICK_NS = 100


def coerce_version(
    version: CorrelationVectorVersion | str,
) -> CorrelationVectorVersion:
    """Convert a version value ("V1", "V2" or the enum) into the enum."""
    try:
        return CorrelationVectorVersion(version)
    except ValueError as e:
        raise UnsupportedVersionError(
            f"Unsupported correlation vector version: {version}"
        ) from e


class CorrelationVectorEngine:
    """
    Factory for correlation vectors.

    Configuration (strict validation, default version, spin defaults) is
    taken from the settings object instead of process-wide state. The random
    source and clock are injectable so generation can be made deterministic.

    Usage:
        engine = CorrelationVectorEngine()
        cv = engine.extend(request.headers.get(HEADER_NAME))
        outbound_headers[HEADER_NAME] = cv.increment()
    """

    def __init__(
        self,
        settings: CorrelationVectorSettings | None = None,
        random_source: RandomSource | None = None,
        clock: Clock | None = None,
    ):
        self.settings = settings or CorrelationVectorSettings()
        self.random_source = random_source or SystemRandomSource()
        self.clock = clock or system_clock

    def create(
        self, version: CorrelationVectorVersion | str | None = None
    ) -> CorrelationVector:
        """
        Create a new correlation vector with a random base.

        Use this only when no correlation vector was received.

        Args:
            version: Implementation version (defaults to settings.default_version)

        Returns:
            A fresh, mutable vector with extension 0
        """
        version = coerce_version(version or self.settings.default_version)
        cv = CorrelationVector(self._seed(version), 0, version, False)
        logger.debug("Created correlation vector %s", cv.value)
        return cv

    def extend(self, correlation_vector: str | None) -> CorrelationVector:
        """
        Create a new vector by extending a received value.

        This should be done at the entry point of an operation.

        Args:
            correlation_vector: Value taken from the inbound header

        Returns:
            A vector whose base is the whole received value, extension 0

        Raises:
            InvalidCorrelationVectorError: strict validation is enabled and
                the received value is malformed
        """
        if is_immutable(correlation_vector):
            return self.parse(correlation_vector)

        version = self._check_inbound(correlation_vector)
        if not correlation_vector:
            return self.create()

        if is_oversized(correlation_vector, 0, version):
            return self._freeze(correlation_vector)

        return CorrelationVector(correlation_vector, 0, version, False)

    def spin(
        self,
        correlation_vector: str | None,
        parameters: SpinParameters | None = None,
    ) -> CorrelationVector:
        """
        Create a new vector by applying the spin operator to a received value.

        A time and entropy derived segment is appended to the base. If that
        segment would not fit, it is discarded and the received value is
        returned frozen.

        Args:
            correlation_vector: Value taken from the inbound header
            parameters: Spin parameters (defaults from settings)

        Returns:
            A vector with the spin segment appended to its base, extension 0

        Raises:
            InvalidCorrelationVectorError: strict validation is enabled and
                the received value is malformed
        """
        if is_immutable(correlation_vector):
            return self.parse(correlation_vector)

        version = self._check_inbound(correlation_vector)
        if not correlation_vector:
            return self.create()

        parameters = parameters or self.settings.default_spin_parameters()

        value = self._spin_ticks(parameters)
        if parameters.entropy > 0:
            entropy_bytes = self.random_source.token_bytes(int(parameters.entropy))
            # Top bit is dropped, leaving entropy * 8 - 1 random bits
            entropy = int.from_bytes(entropy_bytes, "big") >> 1
            value = (value << parameters.entropy_bits) | entropy

        spin_value = value & ((1 << parameters.total_bits) - 1)

        base_vector = f"{correlation_vector}.{spin_value}"
        if is_oversized(base_vector, 0, version):
            return self._freeze(correlation_vector)

        return CorrelationVector(base_vector, 0, version, False)

    def parse(self, correlation_vector: str | None) -> CorrelationVector:
        """
        Reconstruct a vector from its rendered value.

        Parsing never fails: values without a numeric trailing segment are
        replaced by a freshly created vector.
        """
        if correlation_vector:
            index = correlation_vector.rfind(".")
            immutable = is_immutable(correlation_vector)
            if index > 0:
                segment = correlation_vector[index + 1 :]
                if immutable:
                    segment = segment[: -len(TERMINATION_SIGN)]
                extension = parse_extension(segment)
                if extension is not None:
                    return CorrelationVector(
                        correlation_vector[:index],
                        extension,
                        infer_version(correlation_vector),
                        immutable,
                    )

        logger.debug(
            "Unparseable correlation vector %r, creating a new one",
            correlation_vector,
        )
        return self.create()

    def validate(
        self,
        correlation_vector: str | None,
        version: CorrelationVectorVersion | str | None = None,
    ) -> FormatError | None:
        """
        Strictly validate a rendered vector.

        Args:
            correlation_vector: Value to validate
            version: Expected version (inferred from the value if omitted)

        Returns:
            None if the value is valid, otherwise a FormatError naming the
            violated constraint
        """
        if version is None:
            version = infer_version(correlation_vector)
        version = coerce_version(version)

        if not correlation_vector or len(correlation_vector) > version.max_length:
            return FormatError(
                reason=FormatErrorReason.NULL_OR_OVERSIZED,
                message=(
                    f"The {version.value} correlation vector can not be null or "
                    f"bigger than {version.max_length} characters"
                ),
                value=correlation_vector,
            )

        parts = correlation_vector.split(".")

        if len(parts) < 2 or len(parts[0]) != version.base_length:
            return FormatError(
                reason=FormatErrorReason.BAD_BASE_LENGTH,
                message=(
                    f"Invalid correlation vector {correlation_vector}. "
                    f"Invalid base value {parts[0]}"
                ),
                value=correlation_vector,
            )

        for part in parts[1:]:
            if parse_extension(part) is None:
                return FormatError(
                    reason=FormatErrorReason.BAD_EXTENSION_VALUE,
                    message=(
                        f"Invalid correlation vector {correlation_vector}. "
                        f"Invalid extension value {part}"
                    ),
                    value=correlation_vector,
                )

        return None

    def _check_inbound(
        self, correlation_vector: str | None
    ) -> CorrelationVectorVersion:
        """Infer the version of a received value, validating it in strict mode."""
        version = infer_version(correlation_vector)

        if self.settings.validate_during_creation:
            error = self.validate(correlation_vector, version)
            if error is not None:
                logger.warning(
                    "Rejected correlation vector (%s): %s",
                    error.reason.value,
                    error.message,
                )
                raise InvalidCorrelationVectorError(error)

        return version

    def _freeze(self, correlation_vector: str) -> CorrelationVector:
        logger.debug(
            "Correlation vector %s reached its maximum length, freezing",
            correlation_vector,
        )
        return self.parse(correlation_vector + TERMINATION_SIGN)

    def _seed(self, version: CorrelationVectorVersion) -> str:
        """Generate a random base of the version's length."""
        # 256 is a multiple of 64, so masking each byte keeps the draw uniform
        random_bytes = self.random_source.token_bytes(version.base_length)
        return "".join(BASE64_CHARSET[byte & 0x3F] for byte in random_bytes)

    def _spin_ticks(self, parameters: SpinParameters) -> int:
        """Current time in 100ns ticks, rounded to the interval's granularity."""
        ticks = self.clock() // _TICK_NS
        drop = parameters.ticks_bits_to_drop
        return (ticks + (1 << (drop - 1))) >> drop


_engine: CorrelationVectorEngine | None = None


def get_engine() -> CorrelationVectorEngine:
    """Get or create the default engine singleton (settings from environment)."""
    global _engine
    if _engine is None:
        _engine = CorrelationVectorEngine()
    return _engine


def create_correlation_vector(
    version: CorrelationVectorVersion | str | None = None,
) -> CorrelationVector:
    """Convenience function to create a fresh vector with the default engine."""
    return get_engine().create(version)


def extend(correlation_vector: str | None) -> CorrelationVector:
    """Convenience function to extend a received value with the default engine."""
    return get_engine().extend(correlation_vector)


def spin(
    correlation_vector: str | None, parameters: SpinParameters | None = None
) -> CorrelationVector:
    """Convenience function to spin a received value with the default engine."""
    return get_engine().spin(correlation_vector, parameters)


def parse(correlation_vector: str | None) -> CorrelationVector:
    """Convenience function to parse a rendered value with the default engine."""
    return get_engine().parse(correlation_vector)
