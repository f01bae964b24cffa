from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間（半開区間 [チェックイン日, チェックアウト日)）

    チェックアウト日は宿泊日に含まない。
    そのため、ある予約のチェックアウト日に次の予約がチェックインしても重ならない。
    """

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise ValueError("Check-out date must be after check-in date")

    @classmethod
    def from_strings(cls, check_in: str, check_out: str) -> StayPeriod:
        """YYYY-MM-DD 形式の文字列から生成する"""
        try:
            check_in_date = date.fromisoformat(check_in)
            check_out_date = date.fromisoformat(check_out)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid date format: {e}") from e
        return cls(check_in=check_in_date, check_out=check_out_date)

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days

    def overlaps(self, other: StayPeriod) -> bool:
        """他の滞在期間と1泊でも重なるか"""
        return self.check_in < other.check_out and other.check_in < self.check_out

    def covers(self, night: date) -> bool:
        """指定日の夜を含むか"""
        return self.check_in <= night < self.check_out

    def each_night(self) -> Iterator[date]:
        """宿泊する各日付を順に返す"""
        for offset in range(self.nights()):
            yield self.check_in + timedelta(days=offset)
