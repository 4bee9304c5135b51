from functools import lru_cache
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from pydantic import AnyUrl, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _ensure_sqlalchemy_postgres_scheme(value: str) -> str:
    if not value.lower().startswith("postgres"):
        return value

    parsed = urlparse(value)
    scheme = parsed.scheme.lower()

    if scheme == "postgres":
        scheme = "postgresql"

    if scheme == "postgresql":
        scheme = "postgresql+psycopg"

    if scheme not in {"postgresql+psycopg", "postgresql+asyncpg"}:
        scheme = "postgresql+psycopg"

    query_params = dict(parse_qsl(parsed.query, keep_blank_values=True))
    query_params.setdefault("target_session_attrs", "any")
    new_query = urlencode(query_params, doseq=True)

    return urlunparse(parsed._replace(scheme=scheme, query=new_query))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    debug: bool = Field(False, description="Enable FastAPI debug mode")
    environment: str = Field(
        default="development",
        description="Runtime environment (development|staging|production)",
    )
    database_url: AnyUrl | str = Field(
        default="sqlite:///./explorer.db",
        description="SQLAlchemy compatible URL of the explorer reader database",
    )
    genesis_timestamp: int = Field(
        default=1606824023,
        description="Unix timestamp of slot 0",
        ge=0,
    )
    seconds_per_slot: int = Field(default=12, ge=1)
    slots_per_epoch: int = Field(default=32, ge=1)
    seconds_per_day: int = Field(
        default=86400,
        description="Length of one validator_stats rollup day in seconds",
        ge=1,
    )
    default_currency: str = Field(
        default="ETH",
        description="Display currency used when the caller does not select a supported one",
    )
    currency_rates: dict[str, float] = Field(
        default_factory=lambda: {"ETH": 1.0},
        description="Price of one whole native unit in each display currency",
    )
    default_validator_limit: int = Field(
        default=200,
        description="Maximum validators per request for callers without a known tier",
        ge=1,
    )
    tier_validator_limits: dict[str, int] = Field(
        default_factory=dict,
        description="Per-tier overrides of the validator limit keyed by tier name",
    )

    @field_validator("default_currency", mode="after")
    @classmethod
    def _upper_default_currency(cls, value: str) -> str:
        candidate = value.strip().upper()
        if not candidate:
            raise ValueError("DEFAULT_CURRENCY must not be blank")
        return candidate

    @field_validator("currency_rates", mode="after")
    @classmethod
    def _normalize_currency_rates(cls, value: dict[str, float]) -> dict[str, float]:
        rates: dict[str, float] = {}
        for code, rate in value.items():
            key = str(code).strip().upper()
            if not key:
                raise ValueError("CURRENCY_RATES keys must be non-empty currency codes")
            if rate < 0:
                raise ValueError(f"CURRENCY_RATES[{key}] must not be negative")
            rates[key] = float(rate)
        return rates

    @field_validator("tier_validator_limits", mode="after")
    @classmethod
    def _validate_tier_limits(cls, value: dict[str, int]) -> dict[str, int]:
        limits: dict[str, int] = {}
        for tier, limit in value.items():
            if limit < 1:
                raise ValueError(f"TIER_VALIDATOR_LIMITS[{tier}] must be at least 1")
            limits[str(tier).strip().lower()] = int(limit)
        return limits

    @field_validator("database_url", mode="before")
    @classmethod
    def _normalize_postgres_url(cls, value: Any) -> Any:
        if value is None or not isinstance(value, str):
            return value
        if value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://") :]
        return value

    @model_validator(mode="after")
    def _require_default_rate(self) -> "Settings":
        if self.default_currency not in self.currency_rates:
            raise ValueError(
                f"CURRENCY_RATES must define a rate for the default currency {self.default_currency}"
            )
        return self

    @property
    def resolved_database_url(self) -> str:
        return _ensure_sqlalchemy_postgres_scheme(str(self.database_url))

    @property
    def seconds_per_epoch(self) -> int:
        return self.seconds_per_slot * self.slots_per_epoch


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
