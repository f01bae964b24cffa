from datetime import date

from services.reservation.domain.exception import InvalidDateRangeException
from services.reservation.domain.value_object import StayPeriod


def parse_stay_period(
    check_in: str, check_out: str, not_before: date | None = None
) -> StayPeriod:
    """入力文字列を滞在期間に変換する

    not_before を指定した場合、それより前のチェックインは受け付けない。
    """
    try:
        stay_period = StayPeriod.from_strings(check_in, check_out)
    except ValueError as e:
        raise InvalidDateRangeException(str(e)) from e

    if not_before is not None and stay_period.check_in < not_before:
        raise InvalidDateRangeException(
            f"Check-in date cannot be in the past: {stay_period.check_in}"
        )
    return stay_period
