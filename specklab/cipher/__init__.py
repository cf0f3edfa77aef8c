"""Speck block cipher: variant table, engine, chaining modes and padding.

Research / education only. Do NOT use in production.
"""

from .builder import SpeckCipher, build_cipher
from .engine import BlockEngine
from .errors import (
    InvalidKeyLengthError,
    SpeckError,
    UnalignedInputError,
    UnimplementedModeError,
    UnimplementedPaddingError,
    UnimplementedVariantError,
)
from .key_schedule import expand_key, key_schedule, split_key
from .modes import ModeDriver, ModeRegistry
from .padding import pad, unpad
from .variants import Mode, Padding, Variant, VariantParams, get_params, list_variants

__all__ = [
    "SpeckCipher",
    "build_cipher",
    "BlockEngine",
    "SpeckError",
    "InvalidKeyLengthError",
    "UnalignedInputError",
    "UnimplementedModeError",
    "UnimplementedPaddingError",
    "UnimplementedVariantError",
    "split_key",
    "expand_key",
    "key_schedule",
    "ModeDriver",
    "ModeRegistry",
    "pad",
    "unpad",
    "Mode",
    "Padding",
    "Variant",
    "VariantParams",
    "get_params",
    "list_variants",
]
