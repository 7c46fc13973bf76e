from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

DEFAULT_CURRENCY = "USD"
_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    amount_cents: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if self.amount_cents < 0:
            raise ValueError("amount_cents must be >= 0")
        if len(self.currency) != 3 or not self.currency.isalpha() or not self.currency.isupper():
            raise ValueError("currency must be a 3-letter uppercase code")

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        cents = (amount.quantize(_CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value()
        return cls(amount_cents=int(cents), currency=currency)

    def as_decimal(self) -> Decimal:
        return (Decimal(self.amount_cents) * _CENT).quantize(_CENT)

    def times(self, quantity: int) -> Money:
        return Money(amount_cents=self.amount_cents * quantity, currency=self.currency)

    def format(self) -> str:
        return f"{self.amount_cents // 100}.{self.amount_cents % 100:02d}"
