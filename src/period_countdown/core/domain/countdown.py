"""
Countdown — Результат обратного отсчёта до цели

DurationBreakdown — разложение секунд на дни/часы/минуты/секунды.
CountdownEntry — одна строка табло: цель, дедлайн, остаток времени, рабочие дни.
"""

from datetime import datetime
from typing import NamedTuple

from pydantic import BaseModel, Field

from period_countdown.core.domain.target import PeriodKind, TargetSource


class DurationBreakdown(NamedTuple):
    """Неотрицательное разложение длительности."""

    days: int
    hours: int
    minutes: int
    seconds: int


class CountdownEntry(BaseModel):
    """
    Обратный отсчёт до одной цели на момент now.

    Инварианты:
    - remaining_seconds >= 0 (отрицательные значения обрезаются)
    - business_days >= 0
    - period_kind задан только для source == PERIOD
    """

    label: str = Field(..., min_length=1, description="Подпись цели")
    source: TargetSource = Field(..., description="Источник цели")
    period_kind: PeriodKind | None = Field(None, description="Период (для встроенных целей)")

    deadline: datetime = Field(..., description="Дедлайн (aware, точность до микросекунд)")
    deadline_epoch_ns: int = Field(..., description="Дедлайн в наносекундах от epoch")

    remaining_seconds: int = Field(..., ge=0, description="Оставшиеся секунды (floor)")
    duration: DurationBreakdown = Field(..., description="Разложение remaining_seconds")
    business_days: int = Field(..., ge=0, description="Рабочих дней до дедлайна")

    model_config = {"frozen": True}
