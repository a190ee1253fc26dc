"""
Boundaries — Границы календарных периодов

Граница периода = начало следующего периода минус 1 наносекунда.
Все функции:
- отбрасывают время суток (hour/minute/second/sub-second → 0);
- вычисляют первый момент следующего периода в зоне now;
- вычитают ровно 1 ns.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Граница всегда принадлежит текущему периоду (never start of next)
2. boundary >= now для любого now внутри периода
3. Функции чистые: одинаковый now → бит-в-бит одинаковый результат
4. Переход через год — обычной арифметикой месяцев, без частных случаев

ПЕРИОДЫ:
    Месяц:        1-е число следующего месяца
    Квартал:      Jan–Mar, Apr–Jun, Jul–Sep, Oct–Dec
    Полугодие:    фискальные половины Apr–Sep и Oct–Mar
    Фискальный год: с 1 апреля
"""

from typing import Final

from period_countdown.core.domain.instant import Instant
from period_countdown.core.domain.target import PeriodKind


# =============================================================================
# CONSTANTS
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12
MONTHS_PER_QUARTER: Final[int] = 3

# Фискальный год начинается 1 апреля
FISCAL_YEAR_START_MONTH: Final[int] = 4

# Фискальные полугодия: Apr–Sep и Oct–Mar
HALF_YEAR_START_MONTHS: Final[tuple[int, int]] = (4, 10)


# =============================================================================
# MONTH ARITHMETIC
# =============================================================================


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """
    Сдвиг (year, month) на months месяцев с переносом года.

    Examples:
        >>> add_months(2024, 12, 1)
        (2025, 1)
        >>> add_months(2024, 10, 6)
        (2025, 4)
        >>> add_months(2024, 1, -1)
        (2023, 12)
    """
    index = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, month_index = divmod(index, MONTHS_PER_YEAR)
    return new_year, month_index + 1


def _first_instant(now: Instant, year: int, month: int) -> Instant:
    return Instant.from_local(year, month, 1, tz=now.tzinfo)


def _months_until(month: int, start_months: tuple[int, ...]) -> int:
    """Число месяцев от month до ближайшего (строго следующего) месяца из start_months."""
    return min((start - month - 1) % MONTHS_PER_YEAR + 1 for start in start_months)


# =============================================================================
# START OF NEXT PERIOD
# =============================================================================


def start_of_next_month(now: Instant) -> Instant:
    year, month = add_months(now.year, now.month, 1)
    return _first_instant(now, year, month)


def start_of_next_quarter(now: Instant) -> Instant:
    # q: 0-based индекс квартала, следующий квартал начинается с месяца q*3+4
    q = (now.month - 1) // MONTHS_PER_QUARTER
    next_start_month = q * MONTHS_PER_QUARTER + 4
    year, month = add_months(now.year, 1, next_start_month - 1)
    return _first_instant(now, year, month)


def start_of_next_half_year(now: Instant) -> Instant:
    year, month = add_months(
        now.year, now.month, _months_until(now.month, HALF_YEAR_START_MONTHS)
    )
    return _first_instant(now, year, month)


def start_of_next_fiscal_year(now: Instant) -> Instant:
    year = now.year if now.month < FISCAL_YEAR_START_MONTH else now.year + 1
    return _first_instant(now, year, FISCAL_YEAR_START_MONTH)


_NEXT_PERIOD_START = {
    PeriodKind.MONTH: start_of_next_month,
    PeriodKind.QUARTER: start_of_next_quarter,
    PeriodKind.HALF_YEAR: start_of_next_half_year,
    PeriodKind.FISCAL_YEAR: start_of_next_fiscal_year,
}


def start_of_next_period(kind: PeriodKind, now: Instant) -> Instant:
    """Первый момент периода, следующего за текущим периодом kind."""
    return _NEXT_PERIOD_START[kind](now)


# =============================================================================
# END OF CURRENT PERIOD
# =============================================================================


def end_of_month(now: Instant) -> Instant:
    """
    Последняя наносекунда текущего месяца.

    Examples:
        2024-02-10T08:00+09:00 → 2024-02-29T23:59:59.999999999+09:00
        2024-12-31T23:00+09:00 → 2024-12-31T23:59:59.999999999+09:00
    """
    return start_of_next_month(now).plus_nanoseconds(-1)


def end_of_quarter(now: Instant) -> Instant:
    """
    Последняя наносекунда текущего календарного квартала.

    Examples:
        2024-04-15 → 2024-06-30T23:59:59.999999999
        2024-11-01 → 2024-12-31T23:59:59.999999999
    """
    return start_of_next_quarter(now).plus_nanoseconds(-1)


def end_of_half_year(now: Instant) -> Instant:
    """
    Последняя наносекунда текущего фискального полугодия.

    Полугодия Apr–Sep и Oct–Mar (согласованы с фискальным годом от 1 апреля):
        месяцы 4–9   → 30 сентября того же года
        месяцы 10–12 → 31 марта следующего года
        месяцы 1–3   → 31 марта того же года
    """
    return start_of_next_half_year(now).plus_nanoseconds(-1)


def end_of_fiscal_year(now: Instant) -> Instant:
    """
    Последняя наносекунда текущего фискального года.

    month ≤ 3 → 1 апреля текущего года − 1 ns
    month ≥ 4 → 1 апреля следующего года − 1 ns
    """
    return start_of_next_fiscal_year(now).plus_nanoseconds(-1)


def end_of_period(kind: PeriodKind, now: Instant) -> Instant:
    """Граница текущего периода kind."""
    return start_of_next_period(kind, now).plus_nanoseconds(-1)
