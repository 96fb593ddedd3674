from pydantic_settings import BaseSettings, SettingsConfigDict

from correlationvector.models import (
    CorrelationVectorVersion,
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)


class CorrelationVectorSettings(BaseSettings):
    """Settings for creating and deriving correlation vectors."""

    model_config = SettingsConfigDict(
        env_prefix="CORRELATION_VECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Strictly validate inbound values on extend/spin (lenient by default)
    validate_during_creation: bool = False

    # Used by create() without an explicit version and by parse() fallbacks
    default_version: CorrelationVectorVersion = CorrelationVectorVersion.V1

    # Spin defaults, applied when spin() is called without parameters
    spin_interval: SpinCounterInterval = SpinCounterInterval.COARSE
    spin_periodicity: SpinCounterPeriodicity = SpinCounterPeriodicity.SHORT
    spin_entropy: SpinEntropy = SpinEntropy.TWO

    def default_spin_parameters(self) -> SpinParameters:
        return SpinParameters(
            interval=self.spin_interval,
            periodicity=self.spin_periodicity,
            entropy=self.spin_entropy,
        )
