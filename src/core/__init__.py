"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: bit-width wrapping
primitives, the CoercedInteger value object and its JSON contract.
"""
