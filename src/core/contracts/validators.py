"""
JSON Schema Contract Validators

Контракты данных, пересекающих границу ядра котирования:
- curve_parameters.json — статическая конфигурация кривой (проверяется при старте)
- ladder.json — лестница котировок в форме публикации (проверяется перед отправкой)
- trade_offer.json — декодированное предложение контрагента (проверяется до оценки)

Схемы лежат в каталоге schema/ рядом с модулем и устанавливаются вместе
с пакетом. Валидаторы создаются один раз на процесс: проверка ладдера и
предложений происходит на каждом вызове движка.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match, relevance


SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-validation.

    Args:
        schema_dir: Каталог со схемами (default: schema/ пакета)
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения (например, 'ladder').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Загрузчик схем пакета (один на процесс)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Подклассы задают schema_name. validate() поднимает наиболее релевантную
    из всех ошибок (jsonschema best_match), а не первую найденную.
    """

    schema_name: str = ""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        if not self.schema_name:
            raise TypeError(f"{type(self).__name__} does not define schema_name")
        self.schema = (loader or default_loader()).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    @classmethod
    @lru_cache(maxsize=None)
    def shared(cls) -> "ContractValidator":
        """Экземпляр на схемах пакета, переиспользуемый между вызовами."""
        return cls()

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения, от наиболее релевантного к наименее."""
        return iter(sorted(self.validator.iter_errors(data), key=relevance, reverse=True))


class CurveParametersValidator(ContractValidator):
    """Контракт конфигурации кривой."""

    schema_name = "curve_parameters"


class LadderValidator(ContractValidator):
    """Контракт лестницы в форме публикации."""

    schema_name = "ladder"


class TradeOfferValidator(ContractValidator):
    """Контракт предложения контрагента."""

    schema_name = "trade_offer"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_curve_parameters_contract(data: Dict[str, Any]) -> None:
    """Проверка конфигурации кривой (jsonschema.ValidationError при нарушении)."""
    CurveParametersValidator.shared().validate(data)


def validate_ladder(data: list) -> None:
    """Проверка лестницы-списка троек (jsonschema.ValidationError при нарушении)."""
    LadderValidator.shared().validate(data)


def validate_trade_offer(data: Dict[str, Any]) -> None:
    """Проверка предложения контрагента (jsonschema.ValidationError при нарушении)."""
    TradeOfferValidator.shared().validate(data)
