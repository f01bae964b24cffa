from enum import Enum


class ReservationStatus(str, Enum):
    """予約ステータス

    CONFIRMED の予約だけが在庫を消費する。
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
