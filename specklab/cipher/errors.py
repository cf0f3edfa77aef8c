from __future__ import annotations


class SpeckError(Exception):
    """Base class for every error raised by the Speck cipher package."""


class InvalidKeyLengthError(SpeckError, ValueError):
    """Key bytes do not split into the variant's key words."""


class UnalignedInputError(SpeckError, ValueError):
    """Input length is not a multiple of the block size."""


class UnimplementedVariantError(SpeckError, NotImplementedError):
    """A variant tag outside the closed Speck variant set."""


class UnimplementedModeError(SpeckError, NotImplementedError):
    """A block chaining mode other than ECB or CBC."""


class UnimplementedPaddingError(SpeckError, NotImplementedError):
    """A padding scheme other than None or PKCS7."""
