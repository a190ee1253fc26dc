"""
Instant — Точка во времени с наносекундной точностью

Immutable value object: целое число наносекунд от Unix epoch + часовой пояс.
Python datetime хранит только микросекунды, поэтому границы периодов
("начало следующего периода минус 1 ns") вычисляются в целых наносекундах.

CalendarDate — проекция Instant на дату (без времени суток и зоны).
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Final
from zoneinfo import ZoneInfo


# =============================================================================
# CONSTANTS
# =============================================================================

NS_PER_SECOND: Final[int] = 1_000_000_000
NS_PER_MICROSECOND: Final[int] = 1_000

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND: Final[timedelta] = timedelta(microseconds=1)

# Дата без времени суток
CalendarDate = date

_ISO_DATE_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _epoch_us(dt: datetime) -> int:
    return (dt - _EPOCH) // _ONE_MICROSECOND


# =============================================================================
# INSTANT
# =============================================================================


@dataclass(frozen=True, order=True)
class Instant:
    """
    Timezone-aware момент времени.

    Сравнение и хеширование — только по epoch_ns: два Instant в разных зонах,
    обозначающие один и тот же момент, равны.
    """

    epoch_ns: int
    tzinfo: ZoneInfo = field(compare=False)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_epoch_ns(cls, epoch_ns: int, tz: ZoneInfo) -> "Instant":
        return cls(epoch_ns=epoch_ns, tzinfo=tz)

    @classmethod
    def from_datetime(cls, dt: datetime, tz: ZoneInfo | None = None) -> "Instant":
        """
        Конверсия aware datetime → Instant.

        Args:
            dt: datetime с tzinfo (точность — микросекунды)
            tz: Зона результата (по умолчанию — зона dt, если это ZoneInfo)

        Raises:
            ValueError: Если dt naive или зону невозможно определить
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"Naive datetime is not allowed: {dt.isoformat()}")

        if tz is None:
            if not isinstance(dt.tzinfo, ZoneInfo):
                raise ValueError(
                    f"Cannot infer ZoneInfo from tzinfo={dt.tzinfo!r}, pass tz explicitly"
                )
            tz = dt.tzinfo

        return cls(epoch_ns=_epoch_us(dt) * NS_PER_MICROSECOND, tzinfo=tz)

    @classmethod
    def from_local(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        tz: ZoneInfo,
    ) -> "Instant":
        """
        Instant по wall-clock полям в зоне tz.

        Args:
            nanosecond: Полная дробная часть секунды [0, 999_999_999]

        Raises:
            ValueError: Некорректные календарные поля или nanosecond вне диапазона
        """
        if not 0 <= nanosecond < NS_PER_SECOND:
            raise ValueError(f"nanosecond must be in [0, {NS_PER_SECOND}), got {nanosecond}")

        dt = datetime(year, month, day, hour, minute, second, tzinfo=tz)
        return cls(epoch_ns=_epoch_us(dt) * NS_PER_MICROSECOND + nanosecond, tzinfo=tz)

    # -------------------------------------------------------------------------
    # Поля в локальной зоне
    # -------------------------------------------------------------------------

    def to_datetime(self) -> datetime:
        """Aware datetime в зоне Instant (наносекунды усечены до микросекунд)."""
        utc = _EPOCH + timedelta(microseconds=self.epoch_ns // NS_PER_MICROSECOND)
        return utc.astimezone(self.tzinfo)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    @property
    def month(self) -> int:
        return self.to_datetime().month

    @property
    def day(self) -> int:
        return self.to_datetime().day

    @property
    def hour(self) -> int:
        return self.to_datetime().hour

    @property
    def minute(self) -> int:
        return self.to_datetime().minute

    @property
    def second(self) -> int:
        return self.to_datetime().second

    @property
    def nanosecond(self) -> int:
        """Дробная часть секунды в наносекундах [0, 999_999_999]."""
        return self.epoch_ns % NS_PER_SECOND

    @property
    def iso_weekday(self) -> int:
        """1=Monday … 7=Sunday."""
        return self.to_datetime().isoweekday()

    @property
    def epoch_seconds(self) -> int:
        """floor(epoch_ns / 1e9)."""
        return self.epoch_ns // NS_PER_SECOND

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def calendar_date(self) -> CalendarDate:
        return self.to_datetime().date()

    def plus_nanoseconds(self, nanoseconds: int) -> "Instant":
        return Instant(epoch_ns=self.epoch_ns + nanoseconds, tzinfo=self.tzinfo)

    def in_zone(self, tz: ZoneInfo) -> "Instant":
        """Тот же момент, представленный в другой зоне."""
        return Instant(epoch_ns=self.epoch_ns, tzinfo=tz)

    def isoformat(self) -> str:
        """
        ISO 8601 с 9-значной дробной частью.

        Examples:
            2024-06-30T23:59:59.999999999+09:00
        """
        dt = self.to_datetime().replace(microsecond=0)
        base = dt.isoformat()
        return f"{base[:19]}.{self.nanosecond:09d}{base[19:]}"

    def __str__(self) -> str:
        return self.isoformat()


# =============================================================================
# CALENDAR DATE HELPERS
# =============================================================================


def start_of_date(d: CalendarDate, tz: ZoneInfo) -> Instant:
    """Первый момент даты d в зоне tz (00:00:00.000000000)."""
    return Instant.from_local(d.year, d.month, d.day, tz=tz)


def end_of_date(d: CalendarDate, tz: ZoneInfo) -> Instant:
    """
    Последняя наносекунда даты d в зоне tz.

    Вычисляется как начало следующего дня минус 1 ns.
    """
    return start_of_date(d + timedelta(days=1), tz).plus_nanoseconds(-1)


def parse_calendar_date(value: str) -> CalendarDate:
    """
    Строгий разбор ISO даты YYYY-MM-DD.

    Raises:
        ValueError: Если строка не в формате YYYY-MM-DD или дата не существует
    """
    if not _ISO_DATE_RE.fullmatch(value):
        raise ValueError(f"Calendar date must be YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(value)
