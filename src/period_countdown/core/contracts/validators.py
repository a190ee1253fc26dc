"""
JSON Schema Contract Validators

Валидация данных, пересекающих границу с UI-слоем:
- custom_targets.json — сохранённый список пользовательских целей
  (для UI это непрозрачная строка в локальном хранилище);
- calendar_config.json — конфигурация календаря.

Использует библиотеку jsonschema (Draft 2020-12). Ошибки валидации
(jsonschema.ValidationError, pydantic.ValidationError) пробрасываются вызывающему.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

import jsonschema
from jsonschema import Draft202012Validator

from period_countdown.core.calendar_context import CalendarConfig
from period_countdown.core.domain.target import CustomTarget

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'custom_targets')

        Returns:
            Загруженная схема как dict (кэшируется на экземпляре загрузчика)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Базовый класс: данные против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Данные для валидации (list или dict после json.loads)

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """
        Проверка валидности данных без exception.

        Returns:
            True если данные валидны, False иначе
        """
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            jsonschema.ValidationError для каждого нарушения
        """
        return self.validator.iter_errors(data)


class CustomTargetsValidator(ContractValidator):
    def __init__(self):
        super().__init__("custom_targets")


class CalendarConfigValidator(ContractValidator):
    def __init__(self):
        super().__init__("calendar_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_custom_targets(data: Any) -> None:
    CustomTargetsValidator().validate(data)


def validate_calendar_config(data: Any) -> None:
    CalendarConfigValidator().validate(data)


def load_custom_targets(payload: str | None) -> List[CustomTarget]:
    """
    Разбор сохранённого списка целей.

    Args:
        payload: JSON строка из хранилища UI (None/пусто → пустой список)

    Returns:
        Список CustomTarget в порядке хранения

    Raises:
        json.JSONDecodeError: Некорректный JSON
        jsonschema.ValidationError: Нарушение схемы custom_targets
        pydantic.ValidationError: Несуществующая дата (например, 2024-02-30)
    """
    if not payload:
        return []

    data = json.loads(payload)
    validate_custom_targets(data)
    targets = [CustomTarget.model_validate(item) for item in data]
    logger.debug("Loaded %d custom targets", len(targets))
    return targets


def dump_custom_targets(targets: Iterable[CustomTarget]) -> str:
    """
    Сериализация списка целей в формат хранилища UI.

    notifyAt записывается той же строкой, что была загружена.

    Raises:
        jsonschema.ValidationError: Если результат нарушает схему
    """
    data = []
    for target in targets:
        item: Dict[str, Any] = {
            "id": target.id,
            "label": target.label,
            "date": target.target_date.isoformat(),
        }
        if target.notify_at is not None:
            item["notifyAt"] = target.notify_at
        data.append(item)

    validate_custom_targets(data)
    return json.dumps(data, ensure_ascii=False)


def load_calendar_config(data: Dict[str, Any] | None) -> CalendarConfig:
    """
    Конфигурация календаря из mapping; отсутствующие ключи → значения по умолчанию.

    Raises:
        jsonschema.ValidationError: Нарушение схемы calendar_config
    """
    data = data or {}
    validate_calendar_config(data)
    return CalendarConfig(**data)
