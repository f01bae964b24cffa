from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    金額は Decimal で保持し、通貨の補助単位より細かい端数は持たない。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(self.amount))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        exponent = self.amount.as_tuple().exponent
        if isinstance(exponent, int) and -exponent > self.currency.minor_units:
            raise ValueError(
                f"Amount {self.amount} has more decimal places than "
                f"{self.currency} allows ({self.currency.minor_units})"
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, factor: int) -> Money:
        """整数倍した金額を返す（泊数・室数の掛け算用）"""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(amount=self.amount * factor, currency=self.currency)

    @classmethod
    def of(cls, amount: str | Decimal, currency_code: str) -> Money:
        """永続化された文字列表現から生成する"""
        try:
            value = Decimal(amount)
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {amount!r}") from e
        if not value.is_finite():
            raise ValueError(f"Invalid amount: {amount!r}")
        return cls(amount=value, currency=Currency(currency_code))

    @classmethod
    def jpy(cls, amount: Decimal) -> Money:
        """日本円で Money を生成"""
        return cls(amount, Currency.jpy())

    @classmethod
    def usd(cls, amount: Decimal) -> Money:
        """米ドルで Money を生成"""
        return cls(amount, Currency.usd())
