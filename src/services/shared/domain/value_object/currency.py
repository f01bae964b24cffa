from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: JPY, USD, EUR
    """

    # 補助単位の桁数（JPY は補助単位なし）
    MINOR_UNITS: ClassVar[dict[str, int]] = {"JPY": 0, "USD": 2, "EUR": 2}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.MINOR_UNITS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.MINOR_UNITS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def minor_units(self) -> int:
        return self.MINOR_UNITS[self.code]

    @classmethod
    def jpy(cls) -> Currency:
        """日本円"""
        return cls("JPY")

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")
