"""specklab: the Speck lightweight block cipher family with ECB/CBC and PKCS7.

Research / education only. Do NOT use in production.
"""

from specklab.cipher import (
    InvalidKeyLengthError,
    Mode,
    Padding,
    SpeckCipher,
    SpeckError,
    UnalignedInputError,
    UnimplementedModeError,
    UnimplementedPaddingError,
    UnimplementedVariantError,
    Variant,
    build_cipher,
    get_params,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidKeyLengthError",
    "Mode",
    "Padding",
    "SpeckCipher",
    "SpeckError",
    "UnalignedInputError",
    "UnimplementedModeError",
    "UnimplementedPaddingError",
    "UnimplementedVariantError",
    "Variant",
    "build_cipher",
    "get_params",
]
