"""
Тесты для Boundaries — границы календарных периодов

Проверяемые инварианты:
1. Граница = последняя наносекунда периода, boundary + 1ns = начало следующего
2. Переход через год обычной арифметикой месяцев
3. Граница никогда не раньше now (для любого дня года)
4. Фискальные полугодия Apr–Sep / Oct–Mar, фискальный год с 1 апреля
5. Детерминизм: повторный вызов даёт тот же результат
"""

from datetime import date, timedelta
from zoneinfo import ZoneInfo

import pytest

from period_countdown.core.domain.instant import Instant
from period_countdown.core.domain.target import PeriodKind
from period_countdown.core.math.boundaries import (
    FISCAL_YEAR_START_MONTH,
    HALF_YEAR_START_MONTHS,
    add_months,
    end_of_fiscal_year,
    end_of_half_year,
    end_of_month,
    end_of_period,
    end_of_quarter,
    start_of_next_period,
)

TOKYO = ZoneInfo("Asia/Tokyo")


def at(year, month, day, hour=12, minute=34, second=56, nanosecond=789):
    return Instant.from_local(year, month, day, hour, minute, second, nanosecond, tz=TOKYO)


def assert_last_nanosecond_of(boundary: Instant, expected: date):
    assert boundary.calendar_date() == expected
    assert (boundary.hour, boundary.minute, boundary.second) == (23, 59, 59)
    assert boundary.nanosecond == 999_999_999


# =============================================================================
# ТЕСТЫ: Month arithmetic
# =============================================================================


class TestAddMonths:
    """Тесты add_months: перенос года."""

    def test_within_year(self):
        assert add_months(2024, 4, 2) == (2024, 6)

    def test_december_rollover(self):
        assert add_months(2024, 12, 1) == (2025, 1)

    def test_multi_year(self):
        assert add_months(2024, 10, 27) == (2027, 1)

    def test_negative(self):
        assert add_months(2024, 1, -1) == (2023, 12)


# =============================================================================
# ТЕСТЫ: End of month
# =============================================================================


class TestEndOfMonth:
    """Тесты end_of_month."""

    @pytest.mark.parametrize(
        "now_date, expected",
        [
            (date(2024, 1, 15), date(2024, 1, 31)),
            (date(2024, 2, 10), date(2024, 2, 29)),  # високосный год
            (date(2023, 2, 10), date(2023, 2, 28)),
            (date(2024, 4, 1), date(2024, 4, 30)),
            (date(2024, 12, 31), date(2024, 12, 31)),
        ],
    )
    def test_last_nanosecond_of_month(self, now_date, expected):
        boundary = end_of_month(at(now_date.year, now_date.month, now_date.day))
        assert_last_nanosecond_of(boundary, expected)

    def test_next_nanosecond_is_first_of_next_month(self):
        """boundary + 1ns = 1-е число следующего месяца, 00:00:00.000000000."""
        for month in range(1, 13):
            boundary = end_of_month(at(2024, month, 10))
            next_start = boundary.plus_nanoseconds(1)

            assert next_start.day == 1
            assert next_start.month == add_months(2024, month, 1)[1]
            assert (next_start.hour, next_start.minute, next_start.second) == (0, 0, 0)
            assert next_start.nanosecond == 0

    def test_december_rolls_into_next_year(self):
        boundary = end_of_month(at(2024, 12, 5))
        assert boundary.plus_nanoseconds(1).calendar_date() == date(2025, 1, 1)

    def test_first_instant_of_month(self):
        """now в 00:00:00.000000000 первого числа — граница того же месяца."""
        now = Instant.from_local(2024, 3, 1, tz=TOKYO)
        assert_last_nanosecond_of(end_of_month(now), date(2024, 3, 31))

    def test_boundary_is_fixed_point(self):
        """now == boundary → та же граница (последняя ns принадлежит периоду)."""
        boundary = end_of_month(at(2024, 3, 10))
        assert end_of_month(boundary) == boundary

    def test_keeps_zone(self):
        now = at(2024, 3, 10)
        assert end_of_month(now).tzinfo is now.tzinfo


# =============================================================================
# ТЕСТЫ: End of quarter
# =============================================================================


class TestEndOfQuarter:
    """Тесты end_of_quarter: кварталы Jan–Mar, Apr–Jun, Jul–Sep, Oct–Dec."""

    @pytest.mark.parametrize("day", [1, 15, 30])
    def test_april_ends_june_30(self, day):
        assert_last_nanosecond_of(end_of_quarter(at(2024, 4, day)), date(2024, 6, 30))

    @pytest.mark.parametrize(
        "month, expected",
        [
            (1, date(2024, 3, 31)),
            (3, date(2024, 3, 31)),
            (5, date(2024, 6, 30)),
            (7, date(2024, 9, 30)),
            (9, date(2024, 9, 30)),
            (10, date(2024, 12, 31)),
            (12, date(2024, 12, 31)),
        ],
    )
    def test_quarter_end_by_month(self, month, expected):
        assert_last_nanosecond_of(end_of_quarter(at(2024, month, 10)), expected)

    def test_q4_next_start_carries_year(self):
        boundary = end_of_quarter(at(2024, 11, 1))
        assert boundary.plus_nanoseconds(1).calendar_date() == date(2025, 1, 1)


# =============================================================================
# ТЕСТЫ: End of half year
# =============================================================================


class TestEndOfHalfYear:
    """Тесты end_of_half_year: фискальные полугодия Apr–Sep и Oct–Mar."""

    def test_half_year_start_months(self):
        assert HALF_YEAR_START_MONTHS == (4, 10)

    @pytest.mark.parametrize("month", [4, 5, 6, 7, 8, 9])
    def test_first_half_ends_september_30(self, month):
        assert_last_nanosecond_of(end_of_half_year(at(2024, month, 10)), date(2024, 9, 30))

    @pytest.mark.parametrize("month", [10, 11, 12])
    def test_second_half_ends_next_march_31(self, month):
        assert_last_nanosecond_of(end_of_half_year(at(2024, month, 10)), date(2025, 3, 31))

    @pytest.mark.parametrize("month", [1, 2, 3])
    def test_second_half_tail_ends_same_march_31(self, month):
        """Jan–Mar — хвост полугодия Oct–Mar, граница 31 марта того же года."""
        assert_last_nanosecond_of(end_of_half_year(at(2025, month, 10)), date(2025, 3, 31))

    def test_last_day_of_first_half(self):
        now = Instant.from_local(2024, 9, 30, 23, 59, 59, 999_999_998, tz=TOKYO)
        boundary = end_of_half_year(now)

        assert boundary == now.plus_nanoseconds(1)


# =============================================================================
# ТЕСТЫ: End of fiscal year
# =============================================================================


class TestEndOfFiscalYear:
    """Тесты end_of_fiscal_year: фискальный год с 1 апреля."""

    def test_fiscal_year_start_month(self):
        assert FISCAL_YEAR_START_MONTH == 4

    @pytest.mark.parametrize("month", [1, 2, 3])
    def test_jan_to_mar_same_year(self, month):
        boundary = end_of_fiscal_year(at(2024, month, 10))
        expected = Instant.from_local(2024, 4, 1, tz=TOKYO).plus_nanoseconds(-1)

        assert boundary == expected
        assert_last_nanosecond_of(boundary, date(2024, 3, 31))

    @pytest.mark.parametrize("month", [4, 8, 12])
    def test_apr_to_dec_next_year(self, month):
        boundary = end_of_fiscal_year(at(2024, month, 10))
        expected = Instant.from_local(2025, 4, 1, tz=TOKYO).plus_nanoseconds(-1)

        assert boundary == expected

    def test_april_first_midnight_starts_new_fiscal_year(self):
        now = Instant.from_local(2024, 4, 1, tz=TOKYO)
        assert_last_nanosecond_of(end_of_fiscal_year(now), date(2025, 3, 31))


# =============================================================================
# ТЕСТЫ: Общие свойства
# =============================================================================


class TestBoundaryProperties:
    """Свойства, общие для всех периодов."""

    def test_dispatcher_matches_functions(self):
        now = at(2024, 8, 20)

        assert end_of_period(PeriodKind.MONTH, now) == end_of_month(now)
        assert end_of_period(PeriodKind.QUARTER, now) == end_of_quarter(now)
        assert end_of_period(PeriodKind.HALF_YEAR, now) == end_of_half_year(now)
        assert end_of_period(PeriodKind.FISCAL_YEAR, now) == end_of_fiscal_year(now)

    def test_next_period_start_is_boundary_plus_one(self):
        now = at(2024, 8, 20)
        for kind in PeriodKind:
            assert start_of_next_period(kind, now) == end_of_period(kind, now).plus_nanoseconds(1)

    def test_boundary_never_before_now(self):
        """Для каждого дня 2024 года (в начале и в конце дня) boundary >= now."""
        day = date(2024, 1, 1)
        while day.year == 2024:
            for now in (
                Instant.from_local(day.year, day.month, day.day, tz=TOKYO),
                Instant.from_local(day.year, day.month, day.day, 23, 59, 59, 999_999_999, tz=TOKYO),
            ):
                for kind in PeriodKind:
                    assert end_of_period(kind, now) >= now
            day += timedelta(days=1)

    def test_boundary_ordering(self):
        """month <= quarter <= fiscal year; half year <= fiscal year."""
        now = at(2024, 11, 3)

        assert end_of_month(now) <= end_of_quarter(now) <= end_of_fiscal_year(now)
        assert end_of_half_year(now) <= end_of_fiscal_year(now)

    def test_idempotent(self):
        now = at(2024, 2, 29)
        for kind in PeriodKind:
            first = end_of_period(kind, now)
            second = end_of_period(kind, now)

            assert first.epoch_ns == second.epoch_ns
            assert first.isoformat() == second.isoformat()
