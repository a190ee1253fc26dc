"""Countdown Board — сборка табло обратного отсчёта

Для момента now собирает строки табло:
- ссылочная цель (LINK), если дедлайн ещё не наступил — первой;
- пользовательские цели (CUSTOM) с будущим дедлайном — последние добавленные выше;
- встроенные периоды (PERIOD): месяц, квартал, полугодие, фискальный год.

Дедлайн пользовательской цели — последняя наносекунда её даты в зоне календаря.
Для каждой строки:
- remaining_seconds = max(floor(deadline - now), 0)
- business_days = рабочие дни в (today, deadline_date]
"""

import logging
from typing import Optional, Sequence

from period_countdown.core.calendar_context import Calendar
from period_countdown.core.domain.countdown import CountdownEntry
from period_countdown.core.domain.instant import Instant, end_of_date
from period_countdown.core.domain.target import (
    PERIOD_LABELS,
    PERIOD_ORDER,
    CustomTarget,
    PeriodKind,
    TargetSource,
)
from period_countdown.core.math.duration import decompose_duration, seconds_between

logger = logging.getLogger(__name__)


class CountdownBoard:
    """Табло обратного отсчёта для одного календарного контекста.

    Не хранит состояния между вызовами: evaluate() с одинаковыми аргументами
    возвращает одинаковый результат.
    """

    def __init__(self, calendar: Optional[Calendar] = None):
        """
        Args:
            calendar: календарный контекст (default: Asia/Tokyo + праздники JP)
        """
        self.calendar = calendar or Calendar.japan()

    def evaluate(
        self,
        now: Instant,
        custom_targets: Sequence[CustomTarget] = (),
        link_target: Optional[CustomTarget] = None,
    ) -> list[CountdownEntry]:
        """Строки табло на момент now.

        Args:
            now: текущий момент (проецируется в зону календаря)
            custom_targets: пользовательские цели в порядке добавления
            link_target: цель, переданная ссылкой

        Returns:
            Список CountdownEntry в порядке отображения
        """
        now = self.calendar.project(now)
        entries: list[CountdownEntry] = []

        if link_target is not None:
            entry = self._date_entry(now, link_target, TargetSource.LINK)
            if entry is not None:
                entries.append(entry)

        for target in reversed(custom_targets):
            entry = self._date_entry(now, target, TargetSource.CUSTOM)
            if entry is not None:
                entries.append(entry)

        for kind in PERIOD_ORDER:
            entries.append(self.period_entry(now, kind))

        return entries

    def period_entry(self, now: Instant, kind: PeriodKind) -> CountdownEntry:
        """Строка табло для встроенного периода."""
        now = self.calendar.project(now)
        deadline = self.calendar.end_of(kind, now)
        return self._entry(now, deadline, PERIOD_LABELS[kind], TargetSource.PERIOD, kind)

    def _date_entry(
        self, now: Instant, target: CustomTarget, source: TargetSource
    ) -> Optional[CountdownEntry]:
        deadline = end_of_date(target.target_date, self.calendar.timezone)
        if deadline <= now:
            logger.debug(
                "Skipping expired %s target %r (%s)",
                source.value,
                target.label,
                target.target_date.isoformat(),
            )
            return None
        return self._entry(now, deadline, target.label, source, None)

    def _entry(
        self,
        now: Instant,
        deadline: Instant,
        label: str,
        source: TargetSource,
        period_kind: Optional[PeriodKind],
    ) -> CountdownEntry:
        remaining = max(seconds_between(now, deadline), 0)
        business_days = self.calendar.business_days_between(
            now.calendar_date(), deadline.calendar_date()
        )
        return CountdownEntry(
            label=label,
            source=source,
            period_kind=period_kind,
            deadline=deadline.to_datetime(),
            deadline_epoch_ns=deadline.epoch_ns,
            remaining_seconds=remaining,
            duration=decompose_duration(remaining),
            business_days=business_days,
        )
