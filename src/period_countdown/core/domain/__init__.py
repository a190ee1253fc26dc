"""
Domain models and value objects.

Contains Instant, CalendarDate, countdown targets and countdown entries.
"""

from period_countdown.core.domain.countdown import CountdownEntry, DurationBreakdown
from period_countdown.core.domain.instant import (
    NS_PER_MICROSECOND,
    NS_PER_SECOND,
    CalendarDate,
    Instant,
    end_of_date,
    parse_calendar_date,
    start_of_date,
)
from period_countdown.core.domain.target import (
    PERIOD_LABELS,
    PERIOD_ORDER,
    CustomTarget,
    PeriodKind,
    TargetSource,
)

__all__ = [
    # Instant module
    "NS_PER_MICROSECOND",
    "NS_PER_SECOND",
    "CalendarDate",
    "Instant",
    "start_of_date",
    "end_of_date",
    "parse_calendar_date",
    # Targets
    "PERIOD_LABELS",
    "PERIOD_ORDER",
    "PeriodKind",
    "TargetSource",
    "CustomTarget",
    # Countdown results
    "DurationBreakdown",
    "CountdownEntry",
]
