"""
Seed Encoder — детерминированное преобразование строки в целое

Строка кодируется в UTF-8, байты записываются двузначными hex-парами
в исходном порядке (big-endian: первый байт — старшие разряды),
результат разбирается как одно целое по основанию 16.

    "AB"  → bytes 41 42        → 0x4142
    "🚀"  → bytes f0 9f 9a 80  → 4036991616

Результат не зависит от экземпляра encoder, процесса и платформы.
Инъективность не гарантируется (например, "\\x00A" и "A" дают 65).
"""

import codecs
import logging
import re
from typing import Callable, Optional, Tuple

from src.core.domain.coerced_integer import CoercedInteger
from src.core.domain.errors import ensure_text

logger = logging.getLogger(__name__)

# Encoder по протоколу codecs: encoder(text) -> (bytes, consumed)
Utf8Encoder = Callable[[str], Tuple[bytes, int]]

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def default_encoder() -> Utf8Encoder:
    """Stateless UTF-8 encoder; один экземпляр можно делить между потоками."""
    return codecs.getencoder("utf-8")


def _normalize_surrogates(text: str) -> str:
    """
    Surrogate halves → Unicode scalar values.

    Пара соседних halves объединяется в один code point, одиночные
    halves заменяются на U+FFFD (как WHATWG TextEncoder).
    """
    if _SURROGATE_RE.search(text) is None:
        return text

    logger.debug("Normalizing surrogate code units in seed of length %d", len(text))
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def encode_seed(seed: str, encoder: Optional[Utf8Encoder] = None) -> CoercedInteger:
    """
    Строка → CoercedInteger через UTF-8 байты.

    Args:
        seed: Исходная строка (любые Unicode символы)
        encoder: Переиспользуемый UTF-8 encoder (default: default_encoder()).
            Влияет только на стоимость аллокации, не на результат.

    Returns:
        CoercedInteger с неотрицательным value; для "" — CoercedInteger(0)

    Raises:
        InvalidTypeError: Если seed не строка

    Examples:
        >>> encode_seed("hello").to_big_int()
        448378203247
        >>> encode_seed("").to_big_int()
        0
        >>> encode_seed("A").to_int32()
        65
    """
    ensure_text(seed)

    if not seed:
        return CoercedInteger(0)

    utf8_encode = encoder if encoder is not None else default_encoder()
    encoded, _ = utf8_encode(_normalize_surrogates(seed))

    # Основание 16 не подпадает под лимит длины int(str)
    return CoercedInteger(int(encoded.hex(), 16))
