"""
Core math modules

Примитивы усечения целых произвольной точности до фиксированной разрядности.
"""

from src.core.math.bit_width import (
    # Bit widths
    ABS_INT32_BITS,
    CHAR_BITS,
    CODE_POINT_BITS,
    INT8_BITS,
    INT16_BITS,
    INT32_BITS,
    INT64_BITS,
    MAX_CODE_POINT,
    MAX_SAFE_INTEGER,
    BMP_LIMIT,
    # Radix
    DEFAULT_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    RADIX_PREFIXES,
    # Wrapping
    abs_wrap_unsigned,
    mask_code_point,
    wrap_signed,
    wrap_unsigned,
    # Formatting
    format_radix,
    parse_radix,
)

__all__ = [
    # Bit widths
    "ABS_INT32_BITS",
    "CHAR_BITS",
    "CODE_POINT_BITS",
    "INT8_BITS",
    "INT16_BITS",
    "INT32_BITS",
    "INT64_BITS",
    "MAX_CODE_POINT",
    "MAX_SAFE_INTEGER",
    "BMP_LIMIT",
    # Radix
    "DEFAULT_RADIX",
    "MAX_RADIX",
    "MIN_RADIX",
    "RADIX_PREFIXES",
    # Wrapping
    "abs_wrap_unsigned",
    "mask_code_point",
    "wrap_signed",
    "wrap_unsigned",
    # Formatting
    "format_radix",
    "parse_radix",
]
