import pytest

from specklab.cipher.engine import BlockEngine
from specklab.cipher.key_schedule import key_schedule
from specklab.cipher.variants import Variant, get_params


def _engine(variant, key_hex):
    return BlockEngine(params=get_params(variant), round_keys=key_schedule(variant, bytes.fromhex(key_hex)))


def test_speck128_128_words_match_nsa_guide():
    # The guide lists the block as (x, y) with x the high-address word
    engine = _engine(Variant.SPECK_128_128, "000102030405060708090a0b0c0d0e0f")
    x, y = engine.encrypt_block(0x6C61766975716520, 0x7469206564616D20)
    assert (x, y) == (0xA65D985179783265, 0x7860FEDF5C570D18)
    assert engine.decrypt_block(x, y) == (0x6C61766975716520, 0x7469206564616D20)


def test_speck64_96_bytes_match_nsa_guide():
    engine = _engine(Variant.SPECK_64_96, "0001020308090a0b10111213")
    ct = engine.encrypt_bytes(bytes.fromhex("65616e7320466174"))
    assert ct == bytes.fromhex("6c947541ec52799f")
    assert engine.decrypt_bytes(ct) == bytes.fromhex("65616e7320466174")


def test_block_length_is_checked():
    engine = _engine(Variant.SPECK_64_128, "0001020308090a0b1011121318191a1b")
    with pytest.raises(ValueError):
        engine.encrypt_bytes(b"\x00" * 7)
    with pytest.raises(ValueError):
        engine.decrypt_bytes(b"\x00" * 16)


def test_round_key_count_must_match_variant():
    with pytest.raises(ValueError):
        BlockEngine(params=get_params(Variant.SPECK_128_128), round_keys=(0,) * 31)


def test_engine_is_immutable():
    engine = _engine(Variant.SPECK_128_128, "000102030405060708090a0b0c0d0e0f")
    with pytest.raises(Exception):
        engine.round_keys = ()
