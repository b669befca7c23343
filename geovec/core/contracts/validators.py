"""
JSON Schema Contract Validators

Контракты сериализованных векторов выводятся из Pydantic моделей
(geovec.core.domain.vectors) через model_json_schema() и проверяются
библиотекой jsonschema (Draft 2020-12). Форму данных задаёт только
модель; отдельных файлов схем нет.

jsonschema нужен там, где модели недостаточно: проверка сырого JSON
без построения объекта и полный список нарушений за один проход.

Контракты:
- vector2        → Vector2Model
- vector3        → Vector3Model
- bounding_box2  → BoundingBox2Model
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Final, Iterator, Mapping, Type

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from geovec.core.domain.vectors import BoundingBox2Model, Vector2Model, Vector3Model

logger = logging.getLogger(__name__)

JSON_SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"

# Имя контракта → модель, из которой строится схема
CONTRACT_MODELS: Final[Mapping[str, Type[BaseModel]]] = MappingProxyType(
    {
        "vector2": Vector2Model,
        "vector3": Vector3Model,
        "bounding_box2": BoundingBox2Model,
    }
)


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр контрактов: имя → Pydantic модель → JSON Schema.

    Схема строится при первом запросе, проходит meta-валидацию
    и кэшируется.
    """

    def __init__(self, models: Mapping[str, Type[BaseModel]] | None = None):
        """
        Args:
            models: Имя контракта → модель (optional, default: CONTRACT_MODELS)
        """
        self._models = dict(CONTRACT_MODELS if models is None else models)
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def contract_names(self) -> tuple[str, ...]:
        return tuple(self._models)

    def model_for(self, contract_name: str) -> Type[BaseModel]:
        """
        Raises:
            KeyError: Если контракт не зарегистрирован
        """
        if contract_name not in self._models:
            raise KeyError(f"Unknown contract: {contract_name}")
        return self._models[contract_name]

    def get_schema(self, contract_name: str) -> Dict[str, Any]:
        """
        JSON Schema контракта.

        Raises:
            KeyError: Если контракт не зарегистрирован
            ValueError: Если модель порождает невалидную JSON Schema
        """
        if contract_name in self._schemas:
            return self._schemas[contract_name]

        model = self.model_for(contract_name)
        schema = {"$schema": JSON_SCHEMA_DIALECT, **model.model_json_schema()}

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(
                f"Invalid JSON Schema for contract {contract_name} ({model.__name__}): {e.message}"
            ) from e

        logger.debug("Built schema %s from %s", contract_name, model.__name__)
        self._schemas[contract_name] = schema
        return schema


_REGISTRY = SchemaRegistry()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Проверка JSON-данных против схемы одного контракта."""

    def __init__(self, contract_name: str, registry: SchemaRegistry | None = None):
        self.contract_name = contract_name
        self.schema = (registry or _REGISTRY).get_schema(contract_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Наиболее релевантное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def error_messages(self, data: Any) -> list[str]:
        """
        Все нарушения в виде "путь: сообщение", упорядоченные по пути.

        Examples:
            >>> ContractValidator("vector2").error_messages({"x": "a"})
            ["<root>: 'y' is a required property", "x: 'a' is not of type 'number'"]
        """
        errors = sorted(
            self.iter_errors(data),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        return [
            f"{'/'.join(str(part) for part in e.absolute_path) or '<root>'}: {e.message}"
            for e in errors
        ]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_contract(contract_name: str, data: Any) -> None:
    """
    Raises:
        KeyError: Если контракт не зарегистрирован
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ContractValidator(contract_name).validate(data)


def load_contract(contract_name: str, data: Any) -> BaseModel:
    """
    Проверка по схеме и построение модели.

    Схема проверяет структуру; модель дополнительно отклоняет NaN/Inf
    и перевёрнутые углы прямоугольника.

    Raises:
        jsonschema.ValidationError: Нарушена структура
        pydantic.ValidationError: Нарушены ограничения модели
    """
    validate_contract(contract_name, data)
    return _REGISTRY.model_for(contract_name).model_validate(data)


def validate_vector2(data: Any) -> None:
    validate_contract("vector2", data)


def validate_vector3(data: Any) -> None:
    validate_contract("vector3", data)


def validate_bounding_box2(data: Any) -> None:
    """Только структура; порядок углов (min <= max) проверяет BoundingBox2Model."""
    validate_contract("bounding_box2", data)
