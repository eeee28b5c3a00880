"""Runtime configuration, loaded from ``LINKIT_*`` environment variables.

Business-policy values (surcharge, tier price, delivery days) live here
rather than in the domain, and are handed to the domain as plain policy
objects.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkit.domain.model.value_objects import SUPPORTED_CURRENCIES
from linkit.domain.service.delivery_estimate import DeliveryPolicy
from linkit.domain.service.pricing import PricingPolicy


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="LINKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    data_dir: Path = Field(Path("data"), description="Directory holding the JSON data files")

    # Pricing
    currency: str = Field("JOD", description="Currency every price is expressed in")
    logo_surcharge: Decimal = Field(
        Decimal("0"), ge=0, description="Added to an order that includes a printed logo"
    )
    standard_price_per_card: Decimal = Field(
        Decimal("15"), gt=0, description="Fixed per-card price of the 50-99 tier"
    )
    max_price_per_card: Decimal = Field(
        Decimal("1000"), gt=0, description="Sanity ceiling for a quoted per-card price"
    )
    max_quote_total: Decimal = Field(
        Decimal("1000000"), gt=0, description="Sanity ceiling for a quoted total"
    )

    # Delivery estimates
    domestic_country_code: str = Field("JO", description="Country treated as domestic")
    domestic_delivery_days: int = Field(3, ge=0)
    international_delivery_days: int = Field(5, ge=0)
    custom_order_delivery_days: int = Field(10, ge=0)

    # Logging
    log_level: str = Field("INFO", description="Root log level")
    log_json: bool = Field(True, description="Emit JSON log lines instead of plain text")

    @field_validator("currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        value = value.upper()
        if value not in SUPPORTED_CURRENCIES:
            raise ValueError(f"currency must be one of {', '.join(SUPPORTED_CURRENCIES)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    def pricing_policy(self) -> PricingPolicy:
        return PricingPolicy(
            currency=self.currency,
            logo_surcharge=self.logo_surcharge,
            standard_price_per_card=self.standard_price_per_card,
            max_price_per_card=self.max_price_per_card,
            max_quote_total=self.max_quote_total,
        )

    def delivery_policy(self) -> DeliveryPolicy:
        return DeliveryPolicy(
            domestic_country_code=self.domestic_country_code,
            domestic_days=self.domestic_delivery_days,
            international_days=self.international_delivery_days,
            custom_order_days=self.custom_order_delivery_days,
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; call ``get_settings.cache_clear()`` in tests."""
    return Settings()
