"""Process-wide collaborators: prices, caller tiers and the chain head."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone

from beacon_dashboard.domain.currency import CurrencyConverter
from beacon_dashboard.domain.timebase import ChainClock


class PriceService:
    """Read-only view over configured display-currency rates."""

    def __init__(self, rates: Mapping[str, float], default_currency: str) -> None:
        self._rates = {code.upper(): float(rate) for code, rate in rates.items()}
        self._default = default_currency.upper()

    @property
    def default_currency(self) -> str:
        return self._default

    def supports(self, currency: str) -> bool:
        return currency.upper() in self._rates

    def resolve_currency(self, requested: str | None) -> str:
        """Map a caller selection to a supported code, falling back to the default."""

        if requested:
            candidate = requested.strip().upper()
            if candidate in self._rates:
                return candidate
        return self._default

    def get_rate(self, currency: str) -> float:
        return self._rates[currency.upper()]

    def converter(self, currency: str) -> CurrencyConverter:
        code = currency.upper()
        return CurrencyConverter(currency=code, rate=self.get_rate(code))


class TierService:
    """Translate a caller tier into the maximum validators per request."""

    def __init__(self, limits: Mapping[str, int], default_limit: int) -> None:
        self._limits = {tier.lower(): int(limit) for tier, limit in limits.items()}
        self._default = default_limit

    def max_identifiers(self, tier: str | None) -> int:
        if not tier:
            return self._default
        return self._limits.get(tier.strip().lower(), self._default)


class LatestEpochProvider:
    """Derive the current epoch from the wall clock and the chain clock."""

    def __init__(
        self,
        clock: ChainClock,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._clock = clock
        self._now = now or (lambda: datetime.now(timezone.utc))

    def latest_epoch(self) -> int:
        return self._clock.epoch_at(self._now())


__all__ = ["LatestEpochProvider", "PriceService", "TierService"]
