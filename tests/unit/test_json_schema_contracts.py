"""
Tests for JSON Schema Contract Validators

Комплексное тестирование контрактов, построенных из Pydantic моделей:
- Построение и кэширование схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и лишних полей
- load_contract: схема + ограничения модели
"""

import json
import logging

import pydantic
import pytest
from jsonschema import ValidationError
from pydantic import BaseModel

from geovec.core.contracts import (
    CONTRACT_MODELS,
    JSON_SCHEMA_DIALECT,
    ContractValidator,
    SchemaRegistry,
    load_contract,
    validate_bounding_box2,
    validate_contract,
    validate_vector2,
    validate_vector3,
)
from geovec.core.domain import BoundingBox2, BoundingBox2Model, Vector2Model, Vector3Model
from geovec.core.math import Vector2, Vector3


class _Scalar(BaseModel):
    value: float

    model_config = {"extra": "forbid"}


class _BrokenSchema(BaseModel):
    value: float

    model_config = {"json_schema_extra": {"type": 12}}


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_vector2():
    """Валидный vector2 для тестирования."""
    return {"x": 1.5, "y": -2.0}


@pytest.fixture
def valid_vector3():
    """Валидный vector3 для тестирования."""
    return {"x": 0.0, "y": 3, "z": -1e10}


@pytest.fixture
def valid_bounding_box2():
    """Валидный bounding_box2 для тестирования."""
    return {"min": {"x": 0.0, "y": 0.0}, "max": {"x": 10.0, "y": 5.0}}


# =============================================================================
# TESTS - SCHEMA REGISTRY
# =============================================================================


def test_registry_knows_all_contracts():
    """Реестр по умолчанию содержит все контракты."""
    registry = SchemaRegistry()

    assert registry.contract_names == ("vector2", "vector3", "bounding_box2")
    assert registry.model_for("vector3") is Vector3Model
    assert CONTRACT_MODELS["bounding_box2"] is BoundingBox2Model


def test_schemas_follow_models():
    """Схема строится из модели: required и запрет лишних полей."""
    registry = SchemaRegistry()

    vector2 = registry.get_schema("vector2")
    assert vector2["$schema"] == JSON_SCHEMA_DIALECT
    assert vector2["required"] == ["x", "y"]
    assert vector2["additionalProperties"] is False
    assert vector2["properties"]["x"]["type"] == "number"

    assert registry.get_schema("vector3")["required"] == ["x", "y", "z"]
    assert registry.get_schema("bounding_box2")["required"] == ["min", "max"]


def test_registry_caches_schemas():
    """Проверка кэширования схем."""
    registry = SchemaRegistry()

    schema1 = registry.get_schema("vector3")
    schema2 = registry.get_schema("vector3")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_registry_raises_on_unknown_contract():
    """Проверка ошибки при незарегистрированном контракте."""
    with pytest.raises(KeyError, match="Unknown contract: quaternion"):
        SchemaRegistry().get_schema("quaternion")


def test_registry_rejects_invalid_schema():
    """Модель, порождающая невалидную JSON Schema, отклоняется."""
    registry = SchemaRegistry({"broken": _BrokenSchema})

    with pytest.raises(ValueError, match="Invalid JSON Schema for contract broken"):
        registry.get_schema("broken")


def test_registry_custom_models():
    """Реестр принимает произвольные модели."""
    validator = ContractValidator("scalar", registry=SchemaRegistry({"scalar": _Scalar}))

    assert validator.is_valid({"value": 1})
    assert not validator.is_valid({})
    assert not validator.is_valid({"value": 1.0, "unit": "m"})


def test_registry_logs_built_schema(caplog):
    """Построение схемы логируется на уровне DEBUG."""
    registry = SchemaRegistry()

    with caplog.at_level(logging.DEBUG, logger="geovec.core.contracts.validators"):
        registry.get_schema("vector3")

    assert "Built schema vector3 from Vector3Model" in caplog.text


# =============================================================================
# TESTS - VECTOR2 VALIDATION
# =============================================================================


def test_vector2_validator_accepts_valid_data(valid_vector2):
    """Валидация правильного vector2."""
    validator = ContractValidator("vector2")
    validator.validate(valid_vector2)  # Не должно выбросить исключение
    assert validator.is_valid(valid_vector2)


def test_vector2_validate_function(valid_vector2):
    """Проверка функции validate_vector2."""
    validate_vector2(valid_vector2)  # Не должно выбросить исключение


def test_vector2_rejects_missing_required_field(valid_vector2):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_vector2.copy()
    del data["y"]

    with pytest.raises(ValidationError) as exc_info:
        validate_vector2(data)
    assert "'y' is a required property" in str(exc_info.value)


def test_vector2_rejects_wrong_type(valid_vector2):
    """Валидация отклоняет неправильный тип данных."""
    data = valid_vector2.copy()
    data["x"] = "1.5"

    with pytest.raises(ValidationError) as exc_info:
        validate_vector2(data)
    assert "is not of type 'number'" in str(exc_info.value)


def test_vector2_rejects_boolean_component(valid_vector2):
    """bool не считается числом."""
    data = valid_vector2.copy()
    data["y"] = True

    with pytest.raises(ValidationError):
        validate_vector2(data)


def test_vector2_rejects_additional_properties(valid_vector2):
    """Vector2 не допускает компоненту z."""
    data = valid_vector2.copy()
    data["z"] = 0.0

    with pytest.raises(ValidationError):
        validate_vector2(data)


def test_vector2_reports_all_violations():
    """Все нарушения за один проход, упорядоченные по пути."""
    validator = ContractValidator("vector2")

    assert len(list(validator.iter_errors({"x": "a"}))) == 2
    assert validator.error_messages({"x": "a"}) == [
        "<root>: 'y' is a required property",
        "x: 'a' is not of type 'number'",
    ]
    assert validator.error_messages({"x": 1.0, "y": 2.0}) == []


# =============================================================================
# TESTS - VECTOR3 VALIDATION
# =============================================================================


def test_vector3_validator_accepts_valid_data(valid_vector3):
    """Валидация правильного vector3 (целые числа допустимы)."""
    validator = ContractValidator("vector3")
    validator.validate(valid_vector3)
    assert validator.is_valid(valid_vector3)


def test_vector3_validate_function(valid_vector3):
    """Проверка функции validate_vector3."""
    validate_vector3(valid_vector3)


def test_vector3_rejects_missing_z(valid_vector3):
    """Vector2 payload не является валидным vector3."""
    data = valid_vector3.copy()
    del data["z"]

    with pytest.raises(ValidationError) as exc_info:
        validate_vector3(data)
    assert "'z' is a required property" in str(exc_info.value)


def test_vector3_rejects_null_component(valid_vector3):
    """null вместо числа отклоняется."""
    data = valid_vector3.copy()
    data["z"] = None

    with pytest.raises(ValidationError):
        validate_vector3(data)


def test_vector3_rejects_array_form():
    """Массив [x, y, z] не является допустимым представлением."""
    assert not ContractValidator("vector3").is_valid([1.0, 2.0, 3.0])


# =============================================================================
# TESTS - BOUNDING BOX VALIDATION
# =============================================================================


def test_bounding_box2_validator_accepts_valid_data(valid_bounding_box2):
    """Валидация правильного bounding_box2."""
    validator = ContractValidator("bounding_box2")
    validator.validate(valid_bounding_box2)
    assert validator.is_valid(valid_bounding_box2)


def test_bounding_box2_rejects_missing_corner(valid_bounding_box2):
    """Валидация отклоняет данные без угла."""
    data = valid_bounding_box2.copy()
    del data["max"]

    with pytest.raises(ValidationError) as exc_info:
        validate_bounding_box2(data)
    assert "'max' is a required property" in str(exc_info.value)


def test_bounding_box2_rejects_malformed_corner(valid_bounding_box2):
    """Угол проверяется по вложенной схеме Vector2Model."""
    data = valid_bounding_box2.copy()
    data["min"] = {"x": 0.0}

    with pytest.raises(ValidationError):
        validate_bounding_box2(data)


def test_bounding_box2_schema_does_not_check_corner_order():
    """Порядок углов проверяет модель, а не схема."""
    validate_bounding_box2({"min": {"x": 5.0, "y": 5.0}, "max": {"x": 0.0, "y": 0.0}})


def test_validate_contract_unknown_name(valid_vector2):
    with pytest.raises(KeyError):
        validate_contract("vector4", valid_vector2)


# =============================================================================
# TESTS - LOAD CONTRACT
# =============================================================================


def test_load_contract_builds_model(valid_vector2):
    """Валидные данные превращаются в модель."""
    model = load_contract("vector2", valid_vector2)

    assert model == Vector2Model(x=1.5, y=-2.0)
    assert model.to_vector() == Vector2(1.5, -2.0)


def test_load_contract_structure_error_from_schema():
    """Нарушение структуры отклоняется схемой до построения модели."""
    with pytest.raises(ValidationError):
        load_contract("vector3", {"x": 1.0, "y": 2.0})


def test_load_contract_model_constraints_still_apply():
    """Структурно валидный, но перевёрнутый прямоугольник отклоняет модель."""
    with pytest.raises(pydantic.ValidationError, match="max corner must not be below min corner"):
        load_contract(
            "bounding_box2",
            {"min": {"x": 5.0, "y": 5.0}, "max": {"x": 0.0, "y": 0.0}},
        )


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_vector2_model_generates_valid_json():
    """Проверка, что Vector2Model генерирует валидный JSON."""
    model = Vector2Model.from_vector(Vector2(3.0, -4.0))

    validate_vector2(model.model_dump())
    validate_vector2(json.loads(model.model_dump_json()))


def test_vector3_model_generates_valid_json():
    """Проверка, что Vector3Model генерирует валидный JSON."""
    model = Vector3Model.from_vector(Vector3(1.0, 2.0, 3.0))

    validate_vector3(model.model_dump())


def test_bounding_box2_model_generates_valid_json():
    """Проверка, что BoundingBox2Model генерирует валидный JSON."""
    model = BoundingBox2Model.from_box(BoundingBox2(-1.0, -2.0, 3.0, 4.0))

    data = model.model_dump()
    validate_bounding_box2(data)
    assert data == {"min": {"x": -1.0, "y": -2.0}, "max": {"x": 3.0, "y": 4.0}}


# =============================================================================
# SUMMARY
# =============================================================================

# Итого тестов:
# - Schema Registry: 7
# - Vector2: 7
# - Vector3: 5
# - BoundingBox2: 5
# - Load Contract: 3
# - Pydantic Integration: 3
# Всего: 30 тестов
