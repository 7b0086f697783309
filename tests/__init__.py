"""
Test suite for coerced-integer

Contains:
- tests/unit/          : Unit tests for bit-width primitives, CoercedInteger,
                         CoercionSnapshot contracts and the seed encoder
"""
