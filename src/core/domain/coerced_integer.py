"""
CoercedInteger — приведение целого произвольной точности к фиксированным форматам

Immutable value object над одним int. Все преобразования — чистые функции
от value: усечение до 8/16/32/64 бит (знаковое и беззнаковое), модуль по
31 биту, символы UTF-16 / Unicode, текстовые представления в системах
счисления 2..36 и предикаты знака/чётности.

Коллизии ожидаемы: разные value дают одинаковый результат после усечения
(например, 5 и 5 + 2^32 для to_int32).

Числа с потерей точности (to_int64, to_uint64, to_number) возвращают float:
целые точны только до MAX_SAFE_INTEGER = 2^53 - 1. Для 64-битных значений
без потерь используйте to_big_int64 / to_big_uint64.
"""

import math
from dataclasses import dataclass

from src.core.domain.errors import ensure_int, ensure_text
from src.core.domain.snapshot import CoercionSnapshot
from src.core.math.bit_width import (
    ABS_INT32_BITS,
    BMP_LIMIT,
    CHAR_BITS,
    DEFAULT_RADIX,
    INT8_BITS,
    INT16_BITS,
    INT32_BITS,
    INT64_BITS,
    RADIX_PREFIXES,
    abs_wrap_unsigned,
    format_radix,
    mask_code_point,
    parse_radix,
    wrap_signed,
    wrap_unsigned,
)


@dataclass(frozen=True, repr=False)
class CoercedInteger:
    """
    Обёртка над int для приведения к фиксированным форматам.

    Immutable (frozen=True): value не меняется после создания.
    Равенство — только по value и только между CoercedInteger.

    Examples:
        >>> bn = CoercedInteger(123456789)
        >>> bn.to_int32()
        123456789
        >>> bn.to_uint8()
        21
        >>> CoercedInteger(9999999999).to_int32()
        1410065407
    """

    value: int

    def __post_init__(self) -> None:
        # Без проверки диапазона: допустим любой int
        ensure_int(self.value)

    @classmethod
    def from_string(cls, text: str, radix: int = DEFAULT_RADIX) -> "CoercedInteger":
        """
        Обратное преобразование для to_string / to_hex / to_binary / to_octal.

        Args:
            text: Строка вида '-ff', '0x1000', '-0b101'
            radix: Основание (2..36)

        Raises:
            InvalidTypeError: Если text не строка
            ValueError: Если строка не является числом в данном основании
        """
        return cls(parse_radix(ensure_text(text), radix))

    def equals(self, other: object) -> bool:
        """Равенство по value, только с другим CoercedInteger."""
        return isinstance(other, CoercedInteger) and self.value == other.value

    def to_big_int(self) -> int:
        """Исходное значение без изменений."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        # repr(int) ограничен 4300 цифрами
        return f"CoercedInteger(value={format_radix(self.value)})"

    # =========================================================================
    # 8 / 16 / 32 БИТ
    # =========================================================================

    def to_int8(self) -> int:
        """
        Signed 8-bit (-128..127) с переполнением.

        Examples:
            >>> CoercedInteger(128).to_int8()
            -128
            >>> CoercedInteger(-129).to_int8()
            127
        """
        return wrap_signed(self.value, INT8_BITS)

    def to_uint8(self) -> int:
        """
        Unsigned 8-bit (0..255) с переполнением.

        Examples:
            >>> CoercedInteger(-1).to_uint8()
            255
        """
        return wrap_unsigned(self.value, INT8_BITS)

    def to_int16(self) -> int:
        """Signed 16-bit (-32768..32767) с переполнением."""
        return wrap_signed(self.value, INT16_BITS)

    def to_uint16(self) -> int:
        """Unsigned 16-bit (0..65535) с переполнением."""
        return wrap_unsigned(self.value, INT16_BITS)

    def to_int32(self) -> int:
        """Signed 32-bit (-2147483648..2147483647) с переполнением."""
        return wrap_signed(self.value, INT32_BITS)

    def to_uint32(self) -> int:
        """Unsigned 32-bit (0..4294967295) с переполнением."""
        return wrap_unsigned(self.value, INT32_BITS)

    def to_abs_int32(self) -> int:
        """
        Модуль value, усечённый до 31 бита (0..2147483647).

        Сначала отбрасывается знак, затем mod 2^31. Поэтому
        to_abs_int32(v) == to_abs_int32(-v) для любого v.

        Examples:
            >>> CoercedInteger(-123).to_abs_int32()
            123
            >>> CoercedInteger(2147483648).to_abs_int32()
            0
            >>> CoercedInteger(-2147483649).to_abs_int32()
            1
        """
        return abs_wrap_unsigned(self.value, ABS_INT32_BITS)

    # =========================================================================
    # 64 БИТ
    # =========================================================================

    def to_int64(self) -> float:
        """
        Signed 64-bit как float.

        Точно только для |результата| <= 2^53 - 1. Для точного значения
        используйте to_big_int64().
        """
        return float(self.to_big_int64())

    def to_uint64(self) -> float:
        """
        Unsigned 64-bit как float.

        Точно только для результата <= 2^53 - 1. Для точного значения
        используйте to_big_uint64().
        """
        return float(self.to_big_uint64())

    def to_big_int64(self) -> int:
        """
        Signed 64-bit без потери точности.

        Examples:
            >>> CoercedInteger(2**63).to_big_int64()
            -9223372036854775808
        """
        return wrap_signed(self.value, INT64_BITS)

    def to_big_uint64(self) -> int:
        """
        Unsigned 64-bit без потери точности.

        Examples:
            >>> CoercedInteger(-1).to_big_uint64()
            18446744073709551615
        """
        return wrap_unsigned(self.value, INT64_BITS)

    # =========================================================================
    # СИМВОЛЫ
    # =========================================================================

    def to_char(self) -> str:
        """
        Один UTF-16 code unit из младших 16 бит.

        Остаток в диапазоне 0xD800..0xDFFF даёт одиночный surrogate:
        это допустимый результат, а не ошибка.

        Examples:
            >>> CoercedInteger(8364).to_char()
            '€'
            >>> CoercedInteger(65537).to_char()
            '\\x01'
        """
        return chr(wrap_unsigned(self.value, CHAR_BITS))

    def to_code_point(self) -> str:
        """
        Unicode символ из младших 21 бита.

        Значения выше 0x10FFFF маскируются через & 0x10FFFF.

        Examples:
            >>> CoercedInteger(0x1F600).to_code_point()
            '😀'
        """
        return chr(mask_code_point(self.value))

    def to_utf16_units(self) -> int:
        """Число UTF-16 code units (1 или 2) для символа to_code_point()."""
        return 2 if mask_code_point(self.value) >= BMP_LIMIT else 1

    # =========================================================================
    # ЧИСЛА С ПОТЕРЕЙ ТОЧНОСТИ
    # =========================================================================

    def to_number(self) -> float:
        """
        Прямое преобразование во float.

        Точность теряется за пределами ±(2^53 - 1); это ожидаемое поведение,
        а не ошибка. Значения за пределами диапазона double дают ±inf.
        """
        try:
            return float(self.value)
        except OverflowError:
            return math.inf if self.value > 0 else -math.inf

    # =========================================================================
    # ТЕКСТОВЫЕ ПРЕДСТАВЛЕНИЯ
    # =========================================================================

    def _with_prefix(self, radix: int, prefix: bool) -> str:
        text = format_radix(self.value, radix)
        if not prefix:
            return text
        marker = RADIX_PREFIXES[radix]
        if text.startswith("-"):
            return f"-{marker}{text[1:]}"
        return f"{marker}{text}"

    def to_hex(self, prefix: bool = True) -> str:
        """
        Шестнадцатеричное представление без усечения.

        Examples:
            >>> CoercedInteger(255).to_hex()
            '0xff'
            >>> CoercedInteger(-255).to_hex()
            '-0xff'
            >>> CoercedInteger(4096).to_hex(False)
            '1000'
        """
        return self._with_prefix(16, prefix)

    def to_binary(self, prefix: bool = True) -> str:
        """Двоичное представление без усечения ('0b101')."""
        return self._with_prefix(2, prefix)

    def to_octal(self, prefix: bool = True) -> str:
        """Восьмеричное представление без усечения ('0o777')."""
        return self._with_prefix(8, prefix)

    def to_string(self, radix: int = DEFAULT_RADIX) -> str:
        """
        Представление в системе счисления 2..36 без усечения.

        Raises:
            ValueError: Если radix вне диапазона 2..36
        """
        return format_radix(self.value, radix)

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return self.value == 0

    def is_positive(self) -> bool:
        """Строго больше нуля (0 не положительный)."""
        return self.value > 0

    def is_negative(self) -> bool:
        """Строго меньше нуля (0 не отрицательный)."""
        return self.value < 0

    def is_even(self) -> bool:
        """0 считается чётным."""
        return self.value % 2 == 0

    def is_odd(self) -> bool:
        return self.value % 2 != 0

    # =========================================================================
    # SNAPSHOT
    # =========================================================================

    def snapshot(self) -> CoercionSnapshot:
        """Все фиксированные представления value одной моделью."""
        return CoercionSnapshot(
            value=self.value,
            int8=self.to_int8(),
            uint8=self.to_uint8(),
            int16=self.to_int16(),
            uint16=self.to_uint16(),
            int32=self.to_int32(),
            uint32=self.to_uint32(),
            abs_int32=self.to_abs_int32(),
            int64=self.to_big_int64(),
            uint64=self.to_big_uint64(),
            char_code=self.to_uint16(),
            code_point=mask_code_point(self.value),
            hex=self.to_hex(),
        )
