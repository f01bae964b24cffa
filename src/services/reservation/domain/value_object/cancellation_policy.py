from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class CancellationPolicy:
    """無料キャンセルの受付期限

    チェックイン日の free_cancellation_days 日前（当日を含む）までキャンセルできる。
    0 の場合はチェックイン当日までキャンセルできる。
    """

    free_cancellation_days: int = 1

    def __post_init__(self) -> None:
        if self.free_cancellation_days < 0:
            raise ValueError("free_cancellation_days cannot be negative")

    def deadline(self, check_in: date) -> date:
        """キャンセル可能な最終日"""
        return check_in - timedelta(days=self.free_cancellation_days)

    def allows(self, check_in: date, today: date) -> bool:
        return today <= self.deadline(check_in)

    @classmethod
    def from_env(cls) -> CancellationPolicy:
        """環境変数 FREE_CANCELLATION_DAYS から生成する"""
        return cls(free_cancellation_days=int(os.getenv("FREE_CANCELLATION_DAYS", "1")))
