from __future__ import annotations

import logging
from typing import Union

from .engine import BlockEngine
from .errors import UnalignedInputError
from .key_schedule import expand_key, split_key
from .modes import ModeRegistry
from .padding import pad, unpad
from .variants import Mode, Padding, Variant, VariantParams, coerce_padding, coerce_variant, get_params

logger = logging.getLogger(__name__)


class SpeckCipher:
    """A Speck cipher bound to one variant and one scheduled key.

    The key schedule is derived once at construction and never changes, so a
    single instance can be reused for any number of encrypt/decrypt calls.
    """

    __slots__ = ("_variant", "_params", "_engine", "_modes")

    def __init__(self, variant: Union[Variant, str], key: bytes):
        variant = coerce_variant(variant)
        params = get_params(variant)
        round_keys = expand_key(variant, split_key(variant, key))
        self._variant = variant
        self._params = params
        self._engine = BlockEngine(params=params, round_keys=round_keys)
        self._modes = ModeRegistry()

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def params(self) -> VariantParams:
        return self._params

    @property
    def block_size(self) -> int:
        return self._params.block_size_bytes

    @property
    def rounds(self) -> int:
        return self._params.rounds

    def encrypt(
        self,
        plaintext: bytes,
        mode: Union[Mode, str] = Mode.ECB,
        padding: Union[Padding, str] = Padding.NONE,
    ) -> bytes:
        """Encrypt ``plaintext``.

        Raises:
            UnalignedInputError: if padding is NONE and the plaintext is not
                block aligned.
            UnimplementedModeError: for a mode other than ECB/CBC.
        """
        padding = coerce_padding(padding)
        bs = self.block_size
        if padding is Padding.NONE and len(plaintext) % bs != 0:
            raise UnalignedInputError(
                f"Plaintext of {len(plaintext)} bytes needs padding to a multiple of {bs}"
            )
        driver = self._modes.get(mode)
        return driver.encrypt(self._engine, pad(plaintext, bs, padding))

    def decrypt(
        self,
        ciphertext: bytes,
        mode: Union[Mode, str] = Mode.ECB,
        padding: Union[Padding, str] = Padding.NONE,
    ) -> bytes:
        """Decrypt ``ciphertext``; it must be block aligned whatever the padding."""
        padding = coerce_padding(padding)
        bs = self.block_size
        if len(ciphertext) % bs != 0:
            raise UnalignedInputError(
                f"Ciphertext of {len(ciphertext)} bytes is not a multiple of {bs}"
            )
        driver = self._modes.get(mode)
        return unpad(driver.decrypt(self._engine, bytes(ciphertext)), bs, padding)

    def __repr__(self) -> str:
        return f"SpeckCipher(variant={self._variant.value}, rounds={self.rounds}, block_size={self.block_size})"


def build_cipher(variant: Union[Variant, str], key: bytes) -> SpeckCipher:
    """Validate ``key`` against ``variant`` and return a ready cipher.

    Raises:
        InvalidKeyLengthError: the key does not match the variant.
        UnimplementedVariantError: the variant tag is unknown.
    """
    cipher = SpeckCipher(variant, key)
    logger.debug("Built %r", cipher)
    return cipher
