"""
Core calendar math

Границы периодов, подсчёт рабочих дней, разложение длительности.
Чистые функции без побочных эффектов.
"""

# Boundaries
from period_countdown.core.math.boundaries import (
    FISCAL_YEAR_START_MONTH,
    HALF_YEAR_START_MONTHS,
    add_months,
    end_of_fiscal_year,
    end_of_half_year,
    end_of_month,
    end_of_period,
    end_of_quarter,
    start_of_next_fiscal_year,
    start_of_next_half_year,
    start_of_next_month,
    start_of_next_period,
    start_of_next_quarter,
)

# Business days
from period_countdown.core.math.business_days import (
    WEEKEND_ISO_WEEKDAYS,
    business_days_between,
    is_business_day,
)

# Duration
from period_countdown.core.math.duration import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    decompose_duration,
    format_business_days,
    format_duration,
    seconds_between,
)

__all__ = [
    # Boundaries — Constants
    "FISCAL_YEAR_START_MONTH",
    "HALF_YEAR_START_MONTHS",
    # Boundaries — Functions
    "add_months",
    "end_of_month",
    "end_of_quarter",
    "end_of_half_year",
    "end_of_fiscal_year",
    "end_of_period",
    "start_of_next_month",
    "start_of_next_quarter",
    "start_of_next_half_year",
    "start_of_next_fiscal_year",
    "start_of_next_period",
    # Business days
    "WEEKEND_ISO_WEEKDAYS",
    "business_days_between",
    "is_business_day",
    # Duration — Constants
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Duration — Functions
    "decompose_duration",
    "format_business_days",
    "format_duration",
    "seconds_between",
]
