"""
Target — Цели обратного отсчёта

Два вида целей:
- встроенные границы периодов (месяц, квартал, полугодие, фискальный год);
- пользовательские даты (CustomTarget), которые хранит и загружает UI-слой.

Immutable Pydantic модели. Ядро использует из CustomTarget только дату.
"""

from datetime import date
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from period_countdown.core.domain.instant import parse_calendar_date


# =============================================================================
# ENUMS
# =============================================================================


class PeriodKind(str, Enum):
    """Встроенные периоды с вычисляемой границей."""

    MONTH = "MONTH"
    QUARTER = "QUARTER"
    HALF_YEAR = "HALF_YEAR"
    FISCAL_YEAR = "FISCAL_YEAR"


class TargetSource(str, Enum):
    """
    Источник цели.

    - PERIOD: встроенная граница периода
    - CUSTOM: пользовательская цель из сохранённого списка
    - LINK: цель, переданная ссылкой (name + date)
    """

    PERIOD = "PERIOD"
    CUSTOM = "CUSTOM"
    LINK = "LINK"


# Порядок отображения встроенных периодов
PERIOD_ORDER: Final[tuple[PeriodKind, ...]] = (
    PeriodKind.MONTH,
    PeriodKind.QUARTER,
    PeriodKind.HALF_YEAR,
    PeriodKind.FISCAL_YEAR,
)

# Подписи (локаль ja)
PERIOD_LABELS: Final[dict[PeriodKind, str]] = {
    PeriodKind.MONTH: "月末",
    PeriodKind.QUARTER: "四半期末",
    PeriodKind.HALF_YEAR: "半期末",
    PeriodKind.FISCAL_YEAR: "年度末",
}

# Время уведомления в формате datetime-local: YYYY-MM-DDTHH:MM[:SS]
NOTIFY_AT_PATTERN: Final[str] = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}(:[0-9]{2})?$"


# =============================================================================
# MODELS
# =============================================================================


class CustomTarget(BaseModel):
    """
    Пользовательская цель.

    Формат совпадает с сохранённым списком целей (custom_targets.json):
    id, label, date (YYYY-MM-DD), notifyAt (опционально, не используется ядром).
    """

    id: str = Field(..., min_length=1, description="Идентификатор цели")
    label: str = Field(..., min_length=1, description="Название события")
    target_date: date = Field(..., alias="date", description="Календарная дата цели")
    notify_at: str | None = Field(
        None,
        alias="notifyAt",
        pattern=NOTIFY_AT_PATTERN,
        description="Время уведомления: строка UI-слоя, хранится без изменений",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("target_date", mode="before")
    @classmethod
    def validate_iso_date(cls, v):
        """Строка даты принимается только в формате YYYY-MM-DD."""
        if isinstance(v, str):
            return parse_calendar_date(v)
        return v
