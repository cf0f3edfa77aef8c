"""ECB and CBC drivers over a block-aligned buffer.

Drivers never pad or truncate; alignment is the caller's job and is only
re-checked here so a direct call cannot silently drop a partial block.

Research / education only. CBC uses a fixed all-zero IV.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Tuple, Union

from .components import bytes_to_words, words_to_bytes, xor_words
from .engine import BlockEngine
from .errors import UnalignedInputError, UnimplementedModeError
from .variants import Mode, coerce_mode

ZERO_IV: Tuple[int, int] = (0, 0)


def _blocks(engine: BlockEngine, data: bytes) -> Iterator[Tuple[int, ...]]:
    bs = engine.params.block_size_bytes
    if len(data) % bs != 0:
        raise UnalignedInputError(f"Input length {len(data)} is not a multiple of {bs}")
    ws = engine.params.word_size_bytes
    for offset in range(0, len(data), bs):
        # (first half, second half) == (y, x)
        yield bytes_to_words(data[offset:offset + bs], ws)


def ecb_encrypt(engine: BlockEngine, data: bytes) -> bytes:
    ws = engine.params.word_size_bytes
    out = bytearray()
    for y, x in _blocks(engine, data):
        x, y = engine.encrypt_block(x, y)
        out += words_to_bytes((y, x), ws)
    return bytes(out)


def ecb_decrypt(engine: BlockEngine, data: bytes) -> bytes:
    ws = engine.params.word_size_bytes
    out = bytearray()
    for y, x in _blocks(engine, data):
        x, y = engine.decrypt_block(x, y)
        out += words_to_bytes((y, x), ws)
    return bytes(out)


def cbc_encrypt(engine: BlockEngine, data: bytes) -> bytes:
    ws = engine.params.word_size_bytes
    out = bytearray()
    prev = ZERO_IV
    for block in _blocks(engine, data):
        y, x = xor_words(block, prev)
        x, y = engine.encrypt_block(x, y)
        prev = (y, x)
        out += words_to_bytes(prev, ws)
    return bytes(out)


def cbc_decrypt(engine: BlockEngine, data: bytes) -> bytes:
    ws = engine.params.word_size_bytes
    out = bytearray()
    prev = ZERO_IV
    for block in _blocks(engine, data):
        y, x = block
        x, y = engine.decrypt_block(x, y)
        out += words_to_bytes(xor_words((y, x), prev), ws)
        prev = block
    return bytes(out)


@dataclass(frozen=True)
class ModeDriver:
    """A block chaining mode with its encrypt and decrypt drivers."""
    mode: Mode
    description: str
    encrypt: Callable[[BlockEngine, bytes], bytes]
    decrypt: Callable[[BlockEngine, bytes], bytes]


def builtin_drivers() -> Dict[Mode, ModeDriver]:
    return {
        Mode.ECB: ModeDriver(
            mode=Mode.ECB,
            description="Electronic codebook, blocks enciphered independently",
            encrypt=ecb_encrypt,
            decrypt=ecb_decrypt,
        ),
        Mode.CBC: ModeDriver(
            mode=Mode.CBC,
            description="Cipher block chaining with an all-zero IV",
            encrypt=cbc_encrypt,
            decrypt=cbc_decrypt,
        ),
    }


class ModeRegistry:
    def __init__(self):
        self._drivers = builtin_drivers()

    def get(self, mode: Union[Mode, str]) -> ModeDriver:
        mode = coerce_mode(mode)
        if mode not in self._drivers:
            raise UnimplementedModeError(f"Unimplemented mode: {mode.value}")
        return self._drivers[mode]

    def list(self) -> List[ModeDriver]:
        return list(self._drivers.values())

    def exists(self, mode: Union[Mode, str]) -> bool:
        try:
            return coerce_mode(mode) in self._drivers
        except UnimplementedModeError:
            return False
