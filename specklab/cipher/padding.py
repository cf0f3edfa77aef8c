"""PKCS7 padding with a lenient unpad.

Malformed padding is not an error: :func:`pkcs7_unpad` returns the buffer
unchanged when the trailing bytes do not form valid padding.
"""
from __future__ import annotations

import logging
from typing import Union

from .errors import UnimplementedPaddingError
from .variants import Padding, coerce_padding

logger = logging.getLogger(__name__)


def pkcs7_pad(data: bytes, block_size: int) -> bytes:
    """Append 1..block_size bytes, each equal to the pad length.

    Block-aligned input still grows by a full block.
    """
    if not 0 < block_size < 256:
        raise ValueError("block_size must be between 1 and 255")
    pad_len = block_size - (len(data) % block_size)
    return bytes(data) + bytes([pad_len]) * pad_len


def pkcs7_unpad(data: bytes, block_size: int) -> bytes:
    data = bytes(data)
    if not data:
        return data

    pad_len = data[-1]
    if pad_len > block_size:
        logger.debug("Trailing byte %d exceeds block size %d; leaving data as is", pad_len, block_size)
        return data
    if pad_len > len(data) or data[-pad_len:] != bytes([pad_len]) * pad_len:
        logger.debug("Padding bytes do not match length %d; leaving data as is", pad_len)
        return data
    return data[: len(data) - pad_len]


def pad(data: bytes, block_size: int, padding: Union[Padding, str] = Padding.PKCS7) -> bytes:
    padding = coerce_padding(padding)
    if padding is Padding.NONE:
        return bytes(data)
    if padding is Padding.PKCS7:
        return pkcs7_pad(data, block_size)
    raise UnimplementedPaddingError(f"Unsupported padding: {padding.value}")


def unpad(data: bytes, block_size: int, padding: Union[Padding, str] = Padding.PKCS7) -> bytes:
    padding = coerce_padding(padding)
    if padding is Padding.NONE:
        return bytes(data)
    if padding is Padding.PKCS7:
        return pkcs7_unpad(data, block_size)
    raise UnimplementedPaddingError(f"Unsupported padding: {padding.value}")
