"""
Seed Encoder

Детерминированное преобразование строки в CoercedInteger через UTF-8.
"""

from src.seed.encoder import Utf8Encoder, default_encoder, encode_seed

__all__ = [
    "Utf8Encoder",
    "default_encoder",
    "encode_seed",
]
