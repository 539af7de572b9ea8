"""Configuration management for emi-tracker."""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from emi_tracker.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class AdvisorConfig:
    """Thresholds used by the suggestion rules and loan analysis."""

    reference_part_payment: Decimal = Decimal("50000")
    analysis_part_payment: Decimal = Decimal("100000")
    part_payment_min_remaining_emis: int = 12
    short_term_emis: int = 24
    high_rate_threshold: Decimal = Decimal("8")


@dataclass
class StorageConfig:
    """Export document location."""

    data_file: Path = field(default_factory=lambda: Path("output") / "portfolio.json")
    pretty_json: bool = True


@dataclass
class TrackerConfig:
    """Main configuration for emi-tracker."""

    advisor: AdvisorConfig = field(default_factory=AdvisorConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "TrackerConfig":
        """Create config from environment variables."""
        import os

        log_format = os.getenv("EMI_TRACKER_LOG_FORMAT", "standard")
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {log_format}")

        try:
            advisor = AdvisorConfig(
                reference_part_payment=Decimal(os.getenv("EMI_TRACKER_REFERENCE_PART_PAYMENT", "50000")),
                analysis_part_payment=Decimal(os.getenv("EMI_TRACKER_ANALYSIS_PART_PAYMENT", "100000")),
                part_payment_min_remaining_emis=int(os.getenv("EMI_TRACKER_PART_PAYMENT_MIN_EMIS", "12")),
                short_term_emis=int(os.getenv("EMI_TRACKER_SHORT_TERM_EMIS", "24")),
                high_rate_threshold=Decimal(os.getenv("EMI_TRACKER_HIGH_RATE_THRESHOLD", "8")),
            )
            seed = int(os.getenv("EMI_TRACKER_SEED")) if os.getenv("EMI_TRACKER_SEED") else None
        except (ArithmeticError, ValueError) as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        storage = StorageConfig(
            data_file=Path(os.getenv("EMI_TRACKER_DATA_FILE", str(Path("output") / "portfolio.json"))),
            pretty_json=os.getenv("EMI_TRACKER_PRETTY_JSON", "true").lower() == "true",
        )

        return cls(
            advisor=advisor,
            storage=storage,
            log_level=os.getenv("EMI_TRACKER_LOG_LEVEL", "INFO"),
            log_format=log_format,
            seed=seed,
        )
