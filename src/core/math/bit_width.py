"""
Bit Width — примитивы усечения до фиксированной разрядности

Модуль содержит единственный допустимый способ свести целое произвольной
точности к фиксированной разрядности:
- Беззнаковое усечение (value mod 2^N, результат всегда неотрицательный)
- Знаковое усечение (two's complement интерпретация остатка)
- Усечение модуля (сначала abs, затем mod 2^N)
- Маскирование Unicode code point (21 бит, затем & 0x10FFFF)
- Форматирование и разбор в системе счисления 2..36

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. wrap_unsigned(v, N) ∈ [0, 2^N - 1] для любого v
2. wrap_signed(v, N) ∈ [-2^(N-1), 2^(N-1) - 1] для любого v
3. wrap_signed(v, N) mod 2^N == wrap_unsigned(v, N)
4. Все операции детерминированы, без исключений для любого int
"""

from typing import Dict, Final

# =============================================================================
# РАЗРЯДНОСТИ
# =============================================================================

INT8_BITS: Final[int] = 8
INT16_BITS: Final[int] = 16
INT32_BITS: Final[int] = 32
INT64_BITS: Final[int] = 64

# toAbsInt32: модуль усекается до 31 бита (положительная половина int32)
ABS_INT32_BITS: Final[int] = 31

# Один UTF-16 code unit
CHAR_BITS: Final[int] = 16

# Весь диапазон Unicode (0..0x10FFFF) помещается в 21 бит
CODE_POINT_BITS: Final[int] = 21
MAX_CODE_POINT: Final[int] = 0x10FFFF

# Первый code point вне BMP (в UTF-16 занимает два code units)
BMP_LIMIT: Final[int] = 0x10000

# Порог точного представления целых в IEEE-754 double
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1


# =============================================================================
# СИСТЕМЫ СЧИСЛЕНИЯ
# =============================================================================

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36
DEFAULT_RADIX: Final[int] = 10

DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

RADIX_PREFIXES: Final[Dict[int, str]] = {16: "0x", 2: "0b", 8: "0o"}

# str(int) и int(str) ограничены 4300 десятичными цифрами (CPython 3.11+),
# для оснований не степени двойки длинные значения идут кусками по DECIMAL_CHUNK_DIGITS цифр
DECIMAL_CHUNK_DIGITS: Final[int] = 1000
_DECIMAL_CHUNK: Final[int] = 10**DECIMAL_CHUNK_DIGITS


# =============================================================================
# УСЕЧЕНИЕ
# =============================================================================


def _check_bits(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")


def wrap_unsigned(value: int, bits: int) -> int:
    """
    Беззнаковое усечение до N бит.

    Python `%` с положительным делителем всегда возвращает неотрицательный
    остаток, поэтому отрицательные значения оборачиваются "вверх".

    Args:
        value: Целое произвольной точности
        bits: Разрядность N (> 0)

    Returns:
        value mod 2^N в диапазоне [0, 2^N - 1]

    Examples:
        >>> wrap_unsigned(256, 8)
        0
        >>> wrap_unsigned(-1, 8)
        255
    """
    _check_bits(bits)
    return value % (1 << bits)


def wrap_signed(value: int, bits: int) -> int:
    """
    Знаковое усечение до N бит (two's complement).

    Если старший бит остатка установлен (остаток >= 2^(N-1)),
    из него вычитается 2^N.

    Args:
        value: Целое произвольной точности
        bits: Разрядность N (> 0)

    Returns:
        Значение в диапазоне [-2^(N-1), 2^(N-1) - 1]

    Examples:
        >>> wrap_signed(128, 8)
        -128
        >>> wrap_signed(-129, 8)
        127
    """
    residue = wrap_unsigned(value, bits)
    if residue >= 1 << (bits - 1):
        return residue - (1 << bits)
    return residue


def abs_wrap_unsigned(value: int, bits: int) -> int:
    """
    Усечение модуля: сначала abs(value), затем value mod 2^N.

    Это НЕ abs(wrap_signed(value, N)): знак отбрасывается до усечения,
    поэтому v и -v всегда дают одинаковый результат.

    Examples:
        >>> abs_wrap_unsigned(-2147483649, 31)
        1
    """
    return wrap_unsigned(abs(value), bits)


def mask_code_point(value: int) -> int:
    """
    Unicode code point из младших 21 бит.

    Остатки выше MAX_CODE_POINT не отклоняются и не прижимаются к границе,
    а повторно маскируются через & 0x10FFFF (значение меняется).

    Examples:
        >>> mask_code_point(0x1F600)
        128512
        >>> hex(mask_code_point(0x110000))
        '0x100000'
        >>> hex(mask_code_point(0x1FFFFF))
        '0x10ffff'
    """
    code_point = wrap_unsigned(value, CODE_POINT_BITS)
    if code_point > MAX_CODE_POINT:
        return code_point & MAX_CODE_POINT
    return code_point


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ValueError(f"radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}")


def format_radix(value: int, radix: int = DEFAULT_RADIX) -> str:
    """
    Точное знаковое представление в системе счисления 2..36.

    Без усечения: отрицательные значения выводятся как '-' + модуль,
    цифры выше 9 в нижнем регистре.

    Args:
        value: Целое произвольной точности
        radix: Основание (2..36)

    Returns:
        Строковое представление

    Raises:
        ValueError: Если radix вне диапазона 2..36

    Examples:
        >>> format_radix(42, 36)
        '16'
        >>> format_radix(-255, 16)
        '-ff'
    """
    _check_radix(radix)

    magnitude = abs(value)
    if radix == 10:
        digits = _decimal_digits(magnitude)
    elif radix == 16:
        digits = format(magnitude, "x")
    elif radix == 2:
        digits = format(magnitude, "b")
    elif radix == 8:
        digits = format(magnitude, "o")
    elif magnitude == 0:
        digits = "0"
    else:
        chunks = []
        while magnitude:
            magnitude, remainder = divmod(magnitude, radix)
            chunks.append(DIGITS[remainder])
        digits = "".join(reversed(chunks))

    return f"-{digits}" if value < 0 else digits


def parse_radix(text: str, radix: int = DEFAULT_RADIX) -> int:
    """
    Разбор строки, полученной из format_radix (или с маркером 0x/0b/0o).

    Маркер допускается только после знака: '-0xff', не '0x-ff'.
    Цифры только ASCII из DIGITS (регистр не важен), маркер не более одного раза.

    Raises:
        ValueError: Если radix вне диапазона или строка не является числом
    """
    _check_radix(radix)

    body = text.strip()
    negative = body.startswith("-")
    if negative:
        body = body[1:]

    prefix = RADIX_PREFIXES.get(radix)
    if prefix is not None and body.lower().startswith(prefix):
        body = body[len(prefix):]

    # int() сам принимает знак, пробелы, "_", маркер и не-ASCII цифры, здесь только DIGITS
    digits = DIGITS[:radix]
    if not body or any(ch not in digits and ch not in digits.upper() for ch in body):
        raise ValueError(f"invalid literal for radix {radix}: {text!r}")

    if radix & (radix - 1) == 0:
        magnitude = int(body, radix)
    else:
        magnitude = _parse_chunked(body, radix)
    return -magnitude if negative else magnitude


def _decimal_digits(magnitude: int) -> str:
    if magnitude < _DECIMAL_CHUNK:
        return str(magnitude)

    chunks = []
    while magnitude >= _DECIMAL_CHUNK:
        magnitude, remainder = divmod(magnitude, _DECIMAL_CHUNK)
        chunks.append(str(remainder).zfill(DECIMAL_CHUNK_DIGITS))
    chunks.append(str(magnitude))
    return "".join(reversed(chunks))


def _parse_chunked(body: str, radix: int) -> int:
    if len(body) <= DECIMAL_CHUNK_DIGITS:
        return int(body, radix)

    # Первый кусок короче, остальные ровно по DECIMAL_CHUNK_DIGITS
    head = len(body) % DECIMAL_CHUNK_DIGITS or DECIMAL_CHUNK_DIGITS
    chunk_base = radix**DECIMAL_CHUNK_DIGITS
    result = int(body[:head], radix)
    for start in range(head, len(body), DECIMAL_CHUNK_DIGITS):
        result = result * chunk_base + int(body[start:start + DECIMAL_CHUNK_DIGITS], radix)
    return result
