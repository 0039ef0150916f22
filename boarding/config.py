"""
Centralized configuration with environment variable overrides.

Capacity, reminder settings and the full pricing table live here. Pricing
and selection logic read rates, tax and package thresholds from
``RateTable`` and never hardcode them.
"""

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv

from boarding.schemas.pet_schema import DogSize, PetCount, PetType

load_dotenv()

logger = logging.getLogger(__name__)

RateKey = tuple[PetType, PetCount, Optional[DogSize]]


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_decimal(env_var: str, default: str) -> Decimal:
    """Parse a Decimal from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return Decimal(raw)
    except (InvalidOperation, TypeError):
        raise ValueError(
            f"Invalid decimal for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    raw = os.getenv(env_var, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class PackageTier:
    """Flat pre-tax price replacing the nightly rate for long stays."""

    pet_type: PetType
    pet_count: PetCount
    dog_size: Optional[DogSize]
    min_nights: int
    base_price: Decimal


def _default_nightly_rates() -> tuple[tuple[RateKey, Decimal], ...]:
    return (
        ((PetType.CAT, PetCount.ONE, None), Decimal("25")),
        ((PetType.CAT, PetCount.TWO, None), Decimal("40")),
        ((PetType.DOG, PetCount.ONE, DogSize.SMALL), Decimal("40")),
        ((PetType.DOG, PetCount.ONE, DogSize.LARGE), Decimal("60")),
        ((PetType.DOG, PetCount.TWO, DogSize.SMALL), Decimal("70")),
        ((PetType.DOG, PetCount.TWO, DogSize.LARGE), Decimal("110")),
    )


def _default_packages() -> tuple[PackageTier, ...]:
    return (
        PackageTier(PetType.CAT, PetCount.ONE, None, 60, Decimal("1400")),
        PackageTier(PetType.CAT, PetCount.ONE, None, 30, Decimal("700")),
        PackageTier(PetType.DOG, PetCount.ONE, DogSize.SMALL, 30, Decimal("1000")),
        PackageTier(PetType.DOG, PetCount.ONE, DogSize.LARGE, 30, Decimal("1500")),
    )


@dataclass(frozen=True)
class BusinessConfig:
    """Business-specific settings loaded from environment or defaults."""

    name: str = os.getenv("BUSINESS_NAME", "Coco's Pet Paradise")
    total_spots: int = _safe_int("TOTAL_SPOTS", "5")
    limited_spots_threshold: int = _safe_int("LIMITED_SPOTS_THRESHOLD", "2")


@dataclass(frozen=True)
class RateTable:
    """Every number that drives a price quote.

    Tax is Massachusetts sales tax, applied once to the whole subtotal.
    Package prices are pre-tax; the quoted package price includes tax.
    """

    tax_rate: Decimal = _safe_decimal("TAX_RATE", "0.0625")
    nightly_rates: tuple[tuple[RateKey, Decimal], ...] = field(
        default_factory=_default_nightly_rates
    )
    packages: tuple[PackageTier, ...] = field(default_factory=_default_packages)
    grooming_fee: Decimal = _safe_decimal("GROOMING_FEE", "15")
    pickup_fee: Decimal = _safe_decimal("PICKUP_FEE", "20")
    pickup_free_radius_miles: Decimal = _safe_decimal("PICKUP_FREE_RADIUS_MILES", "10")

    @property
    def tax_multiplier(self) -> Decimal:
        return 1 + self.tax_rate

    def nightly_rate(self, key: RateKey) -> Optional[Decimal]:
        for rate_key, rate in self.nightly_rates:
            if rate_key == key:
                return rate
        return None


@dataclass(frozen=True)
class ReminderConfig:
    """Local reminder scheduling for upcoming stays."""

    enabled: bool = _safe_bool("REMINDERS_ENABLED", "true")
    lead_days: int = _safe_int("REMINDER_LEAD_DAYS", "1")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    pricing: RateTable = field(default_factory=RateTable)
    reminders: ReminderConfig = field(default_factory=ReminderConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not Decimal("0") <= config.pricing.tax_rate < Decimal("1"):
        raise ValueError(
            f"TAX_RATE must be between 0 and 1, got {config.pricing.tax_rate}"
        )
    if config.business.total_spots < 1:
        raise ValueError(
            f"TOTAL_SPOTS must be >= 1, got {config.business.total_spots}"
        )
    if not 0 <= config.business.limited_spots_threshold < config.business.total_spots:
        raise ValueError(
            "LIMITED_SPOTS_THRESHOLD must be between 0 and TOTAL_SPOTS - 1, "
            f"got {config.business.limited_spots_threshold}"
        )
    if config.reminders.lead_days < 0:
        raise ValueError(
            f"REMINDER_LEAD_DAYS must be >= 0, got {config.reminders.lead_days}"
        )

    for fee_name, fee_value in [
        ("GROOMING_FEE", config.pricing.grooming_fee),
        ("PICKUP_FEE", config.pricing.pickup_fee),
        ("PICKUP_FREE_RADIUS_MILES", config.pricing.pickup_free_radius_miles),
    ]:
        if fee_value < 0:
            raise ValueError(f"{fee_name} must be >= 0, got {fee_value}")

    for key, rate in config.pricing.nightly_rates:
        if rate <= 0:
            raise ValueError(f"Nightly rate for {key} must be > 0, got {rate}")
    for tier in config.pricing.packages:
        if tier.min_nights < 1 or tier.base_price <= 0:
            raise ValueError(f"Invalid package tier: {tier}")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
