"""
JSON Schema Contract Validators

Модуль для валидации внешних JSON записей (ответы индексатора) согласно
формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (core/contracts/schema/):
- utxo.json
- address_utxos.json
- token_stats_pre_fork.json
- token_stats_post_fork.json
- token_stats_baton_less.json
"""

import json
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета (package data) рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и мета-валидация схемы (с кэшем).

        Args:
            schema_name: Имя схемы без расширения (например, 'utxo')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является корректной Draft 2020-12 схемой
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


# Загрузчик по умолчанию (схемы из package data)
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Подкласс задаёт schema_name; схема компилируется один раз в __init__.
    Экземпляр не изменяется после создания и может разделяться между потоками.
    """

    schema_name: ClassVar[str]

    def __init__(self, loader: SchemaLoader | None = None):
        """
        Args:
            loader: Загрузчик схем (по умолчанию схемы пакета)
        """
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Любой вход (включая None и не-dict) даёт bool."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def first_error(self, data: Any) -> str:
        """Наиболее релевантная ошибка ('' если данные валидны)."""
        error = best_match(self.validator.iter_errors(data))
        return "" if error is None else error.message


class UtxoContractValidator(ContractValidator):
    """Одиночный UTXO."""

    schema_name = "utxo"


class AddressUtxosContractValidator(ContractValidator):
    """Элемент bch-api ответа {address, utxos}."""

    schema_name = "address_utxos"


class TokenStatsPreForkValidator(ContractValidator):
    """Token stats токена, созданного до форка."""

    schema_name = "token_stats_pre_fork"


class TokenStatsPostForkValidator(ContractValidator):
    """Token stats токена, созданного после форка."""

    schema_name = "token_stats_post_fork"


class TokenStatsBatonLessValidator(ContractValidator):
    """Token stats токена без minting baton."""

    schema_name = "token_stats_baton_less"


__all__ = [
    "ValidationError",
    "SchemaLoader",
    "ContractValidator",
    "UtxoContractValidator",
    "AddressUtxosContractValidator",
    "TokenStatsPreForkValidator",
    "TokenStatsPostForkValidator",
    "TokenStatsBatonLessValidator",
]
