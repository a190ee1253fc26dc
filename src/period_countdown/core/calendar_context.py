"""
Calendar — Календарный контекст вычислений

Явная конфигурация вместо глобального состояния:
- часовой пояс (одна фиксированная зона);
- предикат праздников одной юрисдикции.

Calendar передаётся в каждое вычисление, скрытых синглтонов нет.
Таблица праздников — библиотека holidays (статические правила по годам).
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Final
from zoneinfo import ZoneInfo

import holidays

from period_countdown.core.domain.instant import CalendarDate, Instant
from period_countdown.core.domain.target import PeriodKind
from period_countdown.core.math.boundaries import end_of_period
from period_countdown.core.math.business_days import business_days_between


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_TIMEZONE_NAME: Final[str] = "Asia/Tokyo"
DEFAULT_HOLIDAY_COUNTRY: Final[str] = "JP"

HolidayPredicate = Callable[[date], bool]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalendarConfig:
    """Конфигурация календаря: зона и юрисдикция праздников."""

    timezone_name: str = DEFAULT_TIMEZONE_NAME
    holiday_country: str = DEFAULT_HOLIDAY_COUNTRY
    holiday_subdivision: str | None = None


# =============================================================================
# CALENDAR
# =============================================================================


@dataclass(frozen=True)
class Calendar:
    """
    Календарный контекст: {timezone, is_holiday}.

    Все методы — чистые функции от аргументов и полей контекста.
    """

    timezone: ZoneInfo
    is_holiday: HolidayPredicate
    jurisdiction: str = DEFAULT_HOLIDAY_COUNTRY

    @classmethod
    def from_config(cls, config: CalendarConfig) -> "Calendar":
        """
        Контекст по конфигурации.

        Raises:
            zoneinfo.ZoneInfoNotFoundError: Неизвестная зона
            NotImplementedError: Страна не поддерживается библиотекой holidays
        """
        table = holidays.country_holidays(
            config.holiday_country, subdiv=config.holiday_subdivision
        )
        return cls(
            timezone=ZoneInfo(config.timezone_name),
            is_holiday=table.__contains__,
            jurisdiction=config.holiday_country,
        )

    @classmethod
    def japan(cls) -> "Calendar":
        """Asia/Tokyo + праздники Японии."""
        return cls.from_config(CalendarConfig())

    def localize(self, dt: datetime) -> Instant:
        """Aware datetime → Instant в зоне календаря."""
        return Instant.from_datetime(dt, tz=self.timezone)

    def project(self, now: Instant) -> Instant:
        """Тот же момент в зоне календаря."""
        return now.in_zone(self.timezone)

    def today(self, now: Instant) -> CalendarDate:
        return self.project(now).calendar_date()

    def end_of(self, kind: PeriodKind, now: Instant) -> Instant:
        """Граница текущего периода kind в зоне календаря."""
        return end_of_period(kind, self.project(now))

    def business_days_between(self, start: CalendarDate, end: CalendarDate) -> int:
        return business_days_between(start, end, self.is_holiday)
