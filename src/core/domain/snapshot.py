"""
CoercionSnapshot — Модель всех фиксированных представлений одного значения

Immutable Pydantic модель: value и его усечения до 8/16/32/64 бит,
модуль по 31 биту, код символа и code point, hex-представление.
Диапазоны полей фиксируют инварианты усечения, валидаторы проверяют
согласованность каждого представления с value.

Сериализация для внешних потребителей: to_contract_dict()
(схема contracts/schema/coercion_snapshot.json).
"""

from typing import Any, Dict, Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.bit_width import (
    ABS_INT32_BITS,
    CHAR_BITS,
    INT8_BITS,
    INT16_BITS,
    INT32_BITS,
    INT64_BITS,
    MAX_CODE_POINT,
    abs_wrap_unsigned,
    format_radix,
    mask_code_point,
    parse_radix,
    wrap_signed,
    wrap_unsigned,
)

# Поля, которые сериализуются строкой (за пределами точных целых double)
EXACT_STRING_FIELDS: Final[tuple[str, ...]] = ("value", "int64", "uint64")

_SIGNED_FIELDS: Final[Dict[str, int]] = {
    "int8": INT8_BITS,
    "int16": INT16_BITS,
    "int32": INT32_BITS,
    "int64": INT64_BITS,
}

_UNSIGNED_FIELDS: Final[Dict[str, int]] = {
    "uint8": INT8_BITS,
    "uint16": INT16_BITS,
    "uint32": INT32_BITS,
    "uint64": INT64_BITS,
    "char_code": CHAR_BITS,
}


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class CoercionSnapshot(BaseModel):
    """
    Снимок всех представлений CoercedInteger.

    Immutable модель (frozen=True). Строится через CoercedInteger.snapshot(),
    но может быть восстановлена из contract dict: тогда валидаторы проверяют,
    что каждое поле действительно является усечением value.
    """

    # Исходное значение (без ограничений)
    value: int = Field(..., description="Исходное целое произвольной точности")

    # Signed
    int8: int = Field(..., ge=-(2**7), le=2**7 - 1, description="Signed 8-bit")
    int16: int = Field(..., ge=-(2**15), le=2**15 - 1, description="Signed 16-bit")
    int32: int = Field(..., ge=-(2**31), le=2**31 - 1, description="Signed 32-bit")
    int64: int = Field(..., ge=-(2**63), le=2**63 - 1, description="Signed 64-bit (точно)")

    # Unsigned
    uint8: int = Field(..., ge=0, le=2**8 - 1, description="Unsigned 8-bit")
    uint16: int = Field(..., ge=0, le=2**16 - 1, description="Unsigned 16-bit")
    uint32: int = Field(..., ge=0, le=2**32 - 1, description="Unsigned 32-bit")
    uint64: int = Field(..., ge=0, le=2**64 - 1, description="Unsigned 64-bit (точно)")

    # Модуль по 31 биту
    abs_int32: int = Field(..., ge=0, le=2**31 - 1, description="abs(value) mod 2^31")

    # Символы
    char_code: int = Field(..., ge=0, le=2**16 - 1, description="UTF-16 code unit (младшие 16 бит)")
    code_point: int = Field(..., ge=0, le=MAX_CODE_POINT, description="Unicode code point (21 бит)")

    # Текст
    hex: str = Field(..., pattern="^-?0x[0-9a-f]+$", description="Hex с префиксом 0x")

    model_config = {"frozen": True}

    @field_validator(*_SIGNED_FIELDS)
    @classmethod
    def validate_signed_view(cls, v: int, info) -> int:
        """Signed поле должно совпадать с wrap_signed(value, N)."""
        if "value" in info.data:
            expected = wrap_signed(info.data["value"], _SIGNED_FIELDS[info.field_name])
            if v != expected:
                raise ValueError(f"{info.field_name}={v} inconsistent with value (expected {expected})")
        return v

    @field_validator(*_UNSIGNED_FIELDS)
    @classmethod
    def validate_unsigned_view(cls, v: int, info) -> int:
        """Unsigned поле должно совпадать с wrap_unsigned(value, N)."""
        if "value" in info.data:
            expected = wrap_unsigned(info.data["value"], _UNSIGNED_FIELDS[info.field_name])
            if v != expected:
                raise ValueError(f"{info.field_name}={v} inconsistent with value (expected {expected})")
        return v

    @field_validator("abs_int32")
    @classmethod
    def validate_abs_view(cls, v: int, info) -> int:
        if "value" in info.data:
            expected = abs_wrap_unsigned(info.data["value"], ABS_INT32_BITS)
            if v != expected:
                raise ValueError(f"abs_int32={v} inconsistent with value (expected {expected})")
        return v

    @field_validator("code_point")
    @classmethod
    def validate_code_point(cls, v: int, info) -> int:
        if "value" in info.data:
            expected = mask_code_point(info.data["value"])
            if v != expected:
                raise ValueError(f"code_point={v} inconsistent with value (expected {expected})")
        return v

    @field_validator("hex")
    @classmethod
    def validate_hex(cls, v: str, info) -> str:
        if "value" in info.data:
            value = info.data["value"]
            digits = format_radix(value, 16)
            expected = f"-0x{digits[1:]}" if value < 0 else f"0x{digits}"
            if v != expected:
                raise ValueError(f"hex={v!r} inconsistent with value (expected {expected!r})")
        return v

    def to_contract_dict(self) -> Dict[str, Any]:
        """
        Сериализация для JSON контракта.

        value/int64/uint64 выводятся десятичной строкой: JSON-потребители
        без big integer теряют точность за пределами 2^53 - 1.
        """
        data = self.model_dump()
        for name in EXACT_STRING_FIELDS:
            data[name] = format_radix(data[name])
        return data

    @classmethod
    def from_contract_dict(cls, data: Dict[str, Any]) -> "CoercionSnapshot":
        """Обратное преобразование для to_contract_dict()."""
        payload = dict(data)
        for name in EXACT_STRING_FIELDS:
            if isinstance(payload.get(name), str):
                payload[name] = parse_radix(payload[name])
        return cls(**payload)
