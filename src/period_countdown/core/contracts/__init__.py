"""
Contract Validation Module

Валидация JSON данных, которыми ядро обменивается с UI-слоем.
"""

from period_countdown.core.domain.instant import parse_calendar_date

from .validators import (
    CalendarConfigValidator,
    ContractValidator,
    CustomTargetsValidator,
    SchemaLoader,
    dump_custom_targets,
    load_calendar_config,
    load_custom_targets,
    validate_calendar_config,
    validate_custom_targets,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CustomTargetsValidator",
    "CalendarConfigValidator",
    # Functions
    "validate_custom_targets",
    "validate_calendar_config",
    "load_custom_targets",
    "dump_custom_targets",
    "load_calendar_config",
    "parse_calendar_date",
]
