"""Display-currency conversion of native base-unit (gwei) amounts."""

from __future__ import annotations

from dataclasses import dataclass

GWEI_PER_UNIT = 1e9


@dataclass(frozen=True, slots=True)
class CurrencyConverter:
    currency: str
    rate: float

    def to_display(self, amount_base: int) -> float:
        return amount_base / GWEI_PER_UNIT * self.rate

    def format_amount(self, amount_base: int, decimals: int) -> str:
        return f"{self.to_display(amount_base):.{decimals}f} {self.currency}"

    def format_income(self, amount_base: int) -> str:
        return f"{self.to_display(amount_base):+.4f} {self.currency}"


__all__ = ["CurrencyConverter", "GWEI_PER_UNIT"]
