from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """現在時刻（UTC, タイムゾーン付き）"""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """UTC 基準の本日の日付"""
    return utc_now().date()
