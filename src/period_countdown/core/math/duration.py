"""
Duration — Разложение остатка времени для отображения

ФОРМУЛЫ:
    seconds = floor(target_epoch - now_epoch)     (целые секунды, может быть < 0)
    s       = max(seconds, 0)                     (прошедшая цель → 0)
    days    = s // 86400
    hours   = (s % 86400) // 3600
    minutes = (s % 3600) // 60
    secs    = s % 60

Только целочисленная арифметика, без округления.
"""

from typing import Final

from period_countdown.core.domain.countdown import DurationBreakdown
from period_countdown.core.domain.instant import NS_PER_SECOND, Instant


SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 3_600
SECONDS_PER_DAY: Final[int] = 86_400


def seconds_between(now: Instant, target: Instant) -> int:
    """
    floor((target - now) / 1s).

    Отрицательно, если target уже прошёл.

    Examples:
        target - now = 1.999999999s → 1
        target - now = -0.5s        → -1
    """
    return (target.epoch_ns - now.epoch_ns) // NS_PER_SECOND


def decompose_duration(seconds: int) -> DurationBreakdown:
    """
    Разложение секунд на дни/часы/минуты/секунды.

    Отрицательные значения обрезаются до 0.

    Examples:
        >>> decompose_duration(90061)
        DurationBreakdown(days=1, hours=1, minutes=1, seconds=1)
        >>> decompose_duration(-5)
        DurationBreakdown(days=0, hours=0, minutes=0, seconds=0)
    """
    s = max(seconds, 0)
    return DurationBreakdown(
        days=s // SECONDS_PER_DAY,
        hours=(s % SECONDS_PER_DAY) // SECONDS_PER_HOUR,
        minutes=(s % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE,
        seconds=s % SECONDS_PER_MINUTE,
    )


def format_duration(seconds: int) -> str:
    """
    Подпись остатка времени (локаль ja).

    Examples:
        >>> format_duration(90061)
        '1日 1時間 1分 1秒'
    """
    d = decompose_duration(seconds)
    return f"{d.days}日 {d.hours}時間 {d.minutes}分 {d.seconds}秒"


def format_business_days(business_days: int) -> str:
    """
    Examples:
        >>> format_business_days(4)
        '4営業日'
    """
    return f"{max(business_days, 0)}営業日"
