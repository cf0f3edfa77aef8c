"""Speck variant table.

Parameters follow the NSA Simon/Speck implementation guide. The table is a
module-level constant and is never mutated.
"""
from __future__ import annotations

import enum
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import UnimplementedModeError, UnimplementedPaddingError, UnimplementedVariantError


class Variant(str, enum.Enum):
    SPECK_64_96 = "speck64_96"
    SPECK_64_128 = "speck64_128"
    SPECK_128_128 = "speck128_128"
    SPECK_128_192 = "speck128_192"
    SPECK_128_256 = "speck128_256"


class Mode(str, enum.Enum):
    ECB = "ecb"
    CBC = "cbc"


class Padding(str, enum.Enum):
    NONE = "none"
    PKCS7 = "pkcs7"


class VariantParams(BaseModel):
    """Fixed parameters of one Speck variant."""

    model_config = ConfigDict(frozen=True)

    word_size_bits: int = Field(..., description="32 or 64")
    key_words: int = Field(..., ge=2, le=4)
    rounds: int = Field(..., ge=1)
    block_size_bytes: int = Field(..., description="Two words")

    @field_validator("word_size_bits")
    @classmethod
    def _word_size(cls, v: int) -> int:
        if v not in (32, 64):
            raise ValueError("word_size_bits must be 32 or 64")
        return v

    @model_validator(mode="after")
    def _block_is_two_words(self) -> "VariantParams":
        if self.block_size_bytes * 8 != 2 * self.word_size_bits:
            raise ValueError("block_size_bytes must hold exactly two words")
        return self

    @property
    def word_size_bytes(self) -> int:
        return self.word_size_bits // 8

    @property
    def block_size_bits(self) -> int:
        return self.block_size_bytes * 8

    @property
    def key_size_bytes(self) -> int:
        return self.key_words * self.word_size_bytes

    @property
    def key_size_bits(self) -> int:
        return self.key_size_bytes * 8


VARIANTS: Dict[Variant, VariantParams] = {
    Variant.SPECK_64_96: VariantParams(word_size_bits=32, key_words=3, rounds=26, block_size_bytes=8),
    Variant.SPECK_64_128: VariantParams(word_size_bits=32, key_words=4, rounds=27, block_size_bytes=8),
    Variant.SPECK_128_128: VariantParams(word_size_bits=64, key_words=2, rounds=32, block_size_bytes=16),
    Variant.SPECK_128_192: VariantParams(word_size_bits=64, key_words=3, rounds=33, block_size_bytes=16),
    Variant.SPECK_128_256: VariantParams(word_size_bits=64, key_words=4, rounds=34, block_size_bytes=16),
}


def _coerce(enum_cls, value, error_cls):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        needle = value.strip().lower()
        for member in enum_cls:
            if needle in (member.value, member.name.lower()):
                return member
    raise error_cls(f"Unknown {enum_cls.__name__.lower()}: {value!r}")


def coerce_variant(value: Union[Variant, str]) -> Variant:
    """Accept a Variant or its name/value, e.g. ``"speck128_128"`` or ``"SPECK_128_128"``."""
    return _coerce(Variant, value, UnimplementedVariantError)


def coerce_mode(value: Union[Mode, str]) -> Mode:
    return _coerce(Mode, value, UnimplementedModeError)


def coerce_padding(value: Union[Padding, str]) -> Padding:
    return _coerce(Padding, value, UnimplementedPaddingError)


def get_params(variant: Union[Variant, str]) -> VariantParams:
    """Return the table row for ``variant``.

    Raises:
        UnimplementedVariantError: if the tag is not one of the five variants.
    """
    return VARIANTS[coerce_variant(variant)]


def list_variants() -> List[Variant]:
    return list(VARIANTS.keys())
