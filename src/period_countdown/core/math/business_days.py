"""
Business Days — Подсчёт рабочих дней

Рабочий день: ISO weekday 1–5 (Mon–Fri) и не праздник юрисдикции.

Интервал подсчёта (start, end]:
- start исключается (сегодняшний день уже идёт);
- end включается (день дедлайна).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат >= 0
2. end <= start → 0 (обратный интервал не итерируется)
3. Праздники запрашиваются предикатом по каждой дате, таблица не встроена
"""

from datetime import date, timedelta
from typing import Callable, Final


# Выходные: 6=Saturday, 7=Sunday (ISO numbering, 1=Monday)
WEEKEND_ISO_WEEKDAYS: Final[frozenset[int]] = frozenset({6, 7})

_ONE_DAY: Final[timedelta] = timedelta(days=1)


def is_business_day(d: date, is_holiday: Callable[[date], bool]) -> bool:
    """Будний день и не праздник."""
    return d.isoweekday() not in WEEKEND_ISO_WEEKDAYS and not is_holiday(d)


def business_days_between(
    start: date,
    end: date,
    is_holiday: Callable[[date], bool],
) -> int:
    """
    Число рабочих дней в (start, end].

    O(n) по числу календарных дней; интервалы ограничены ~1 фискальным годом.

    Args:
        start: Дата отсчёта (исключается)
        end: Дата дедлайна (включается)
        is_holiday: Предикат праздника

    Returns:
        Число рабочих дней (0 при end <= start)

    Examples:
        >>> no_holidays = lambda d: False
        >>> business_days_between(date(2024, 1, 5), date(2024, 1, 8), no_holidays)
        1
        >>> business_days_between(date(2024, 1, 8), date(2024, 1, 8), no_holidays)
        0
    """
    if end <= start:
        return 0

    count = 0
    current = start + _ONE_DAY
    while current <= end:
        if is_business_day(current, is_holiday):
            count += 1
        current += _ONE_DAY

    return count
