"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/pattern)
- Интеграция с Pydantic моделью CoercionSnapshot
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CoercionSnapshotValidator,
    ContractValidator,
    SchemaLoader,
    validate_coercion_snapshot,
)
from src.core.domain import CoercedInteger


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_snapshot():
    """Валидный coercion_snapshot для тестирования."""
    return CoercedInteger(123456789012345678901234567890).snapshot().to_contract_dict()


@pytest.fixture
def validator():
    return CoercionSnapshotValidator()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-валидация схем"""

    def test_loads_bundled_schema(self) -> None:
        """Схема coercion_snapshot загружается из package data"""
        schema = SchemaLoader().load_schema("coercion_snapshot")
        assert schema["title"] == "CoercionSnapshot"

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("coercion_snapshot") is loader.load_schema("coercion_snapshot")

    def test_missing_schema(self) -> None:
        """Неизвестная схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Несуществующий каталог → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        """Схема, не проходящая meta-validation → ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader_for_validator(self, tmp_path: Path) -> None:
        """ContractValidator принимает собственный загрузчик"""
        (tmp_path / "tiny.json").write_text(
            json.dumps({"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "integer"}),
            encoding="utf-8",
        )
        tiny = ContractValidator("tiny", loader=SchemaLoader(tmp_path))
        assert tiny.is_valid(5)
        assert not tiny.is_valid("5")


# =============================================================================
# COERCION SNAPSHOT CONTRACT
# =============================================================================


class TestCoercionSnapshotContract:
    """Валидация coercion_snapshot"""

    def test_valid_snapshot(self, valid_snapshot, validator) -> None:
        """Результат to_contract_dict проходит схему"""
        validator.validate(valid_snapshot)
        validate_coercion_snapshot(valid_snapshot)
        assert validator.is_valid(valid_snapshot)

    def test_boundary_values(self, validator) -> None:
        """Граничные значения 64 бит проходят схему"""
        for value in (0, -1, 2**63 - 1, 2**63, -(2**63), 2**64 - 1, 2**64, -(10**40)):
            validator.validate(CoercedInteger(value).snapshot().to_contract_dict())

    def test_missing_required_field(self, valid_snapshot, validator) -> None:
        """Отсутствие required поля"""
        del valid_snapshot["abs_int32"]
        with pytest.raises(ValidationError, match="'abs_int32' is a required property"):
            validator.validate(valid_snapshot)

    def test_int8_out_of_range(self, valid_snapshot, validator) -> None:
        """int8 > 127"""
        valid_snapshot["int8"] = 128
        with pytest.raises(ValidationError):
            validator.validate(valid_snapshot)

    def test_code_point_above_unicode_max(self, valid_snapshot, validator) -> None:
        """code_point > 0x10FFFF"""
        valid_snapshot["code_point"] = 0x110000
        with pytest.raises(ValidationError):
            validator.validate(valid_snapshot)

    def test_big_value_must_be_string(self, valid_snapshot, validator) -> None:
        """uint64 числом вместо строки"""
        valid_snapshot["uint64"] = 2**64 - 1
        with pytest.raises(ValidationError, match="is not of type 'string'"):
            validator.validate(valid_snapshot)

    def test_uint64_negative_string(self, valid_snapshot, validator) -> None:
        """uint64 со знаком минус"""
        valid_snapshot["uint64"] = "-1"
        assert not validator.is_valid(valid_snapshot)

    def test_additional_property(self, valid_snapshot, validator) -> None:
        """Лишнее поле запрещено"""
        valid_snapshot["extra"] = 1
        assert not validator.is_valid(valid_snapshot)

    def test_raw_model_dump_rejected(self, validator) -> None:
        """model_dump() без to_contract_dict не соответствует контракту"""
        raw = CoercedInteger(5).snapshot().model_dump()
        errors = list(validator.iter_errors(raw))
        assert {error.path[0] for error in errors} == {"value", "int64", "uint64"}
