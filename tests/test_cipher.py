import random

import pytest

from specklab import (
    InvalidKeyLengthError,
    Mode,
    Padding,
    SpeckCipher,
    UnalignedInputError,
    UnimplementedModeError,
    UnimplementedVariantError,
    Variant,
    build_cipher,
)
from specklab.cipher.variants import get_params, list_variants
from specklab.evaluation.vectors import NSA_VECTORS


# ---------------------------------------------------------------------------
# NSA implementation guide vectors
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("vector", NSA_VECTORS, ids=lambda v: v.variant.value)
def test_nsa_vector_encrypt(vector):
    cipher = build_cipher(vector.variant, vector.key)
    assert cipher.encrypt(vector.plaintext, Mode.ECB, Padding.NONE) == vector.ciphertext


@pytest.mark.parametrize("vector", NSA_VECTORS, ids=lambda v: v.variant.value)
def test_nsa_vector_decrypt(vector):
    cipher = build_cipher(vector.variant, vector.key)
    assert cipher.decrypt(vector.ciphertext, Mode.ECB, Padding.NONE) == vector.plaintext


def test_speck128_128_spelled_out():
    key = bytes(range(16))
    pt = bytes([0x20, 0x6d, 0x61, 0x64, 0x65, 0x20, 0x69, 0x74,
                0x20, 0x65, 0x71, 0x75, 0x69, 0x76, 0x61, 0x6c])
    expected = bytes([0x18, 0x0d, 0x57, 0x5c, 0xdf, 0xfe, 0x60, 0x78,
                      0x65, 0x32, 0x78, 0x79, 0x51, 0x98, 0x5d, 0xa6])
    assert build_cipher("speck128_128", key).encrypt(pt) == expected


# ---------------------------------------------------------------------------
# Roundtrip over every variant, mode and padding
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("variant", list_variants(), ids=lambda v: v.value)
@pytest.mark.parametrize("mode", list(Mode), ids=lambda m: m.value)
@pytest.mark.parametrize("padding", list(Padding), ids=lambda p: p.value)
def test_roundtrip(variant, mode, padding):
    params = get_params(variant)
    bs = params.block_size_bytes
    rng = random.Random(1337)

    for _ in range(20):
        key = bytes(rng.randrange(0, 256) for _ in range(params.key_size_bytes))
        length = rng.randrange(0, 5 * bs)
        if padding is Padding.NONE:
            length -= length % bs
        pt = bytes(rng.randrange(0, 256) for _ in range(length))

        cipher = build_cipher(variant, key)
        ct = cipher.encrypt(pt, mode, padding)
        assert len(ct) % bs == 0
        assert cipher.decrypt(ct, mode, padding) == pt


def test_padded_short_payload_roundtrip():
    key = bytes(range(16))
    payload = bytes.fromhex("206d61646520697420657175 69".replace(" ", ""))
    cipher = build_cipher(Variant.SPECK_128_128, key)
    ct = cipher.encrypt(payload, padding=Padding.PKCS7)
    assert len(ct) == 16
    assert cipher.decrypt(ct, padding=Padding.PKCS7) == payload


def test_aligned_plaintext_with_pkcs7_grows_by_one_block():
    vector = NSA_VECTORS[0]
    cipher = build_cipher(vector.variant, vector.key)
    ct = cipher.encrypt(vector.plaintext, Mode.CBC, Padding.PKCS7)
    assert len(ct) == 2 * cipher.block_size
    # first block has no predecessor so CBC matches ECB there
    assert ct[:8] == vector.ciphertext


def test_ecb_and_cbc_differ_on_repeated_blocks():
    cipher = build_cipher(Variant.SPECK_64_128, bytes(16))
    pt = b"A" * 16
    ecb = cipher.encrypt(pt, Mode.ECB)
    cbc = cipher.encrypt(pt, Mode.CBC)
    assert ecb[:8] == ecb[8:]
    assert cbc[:8] != cbc[8:]
    assert cbc[:8] == ecb[:8]


def test_cipher_is_reusable():
    cipher = build_cipher(Variant.SPECK_128_256, bytes(range(32)))
    first = cipher.encrypt(b"x" * 32, "cbc")
    for _ in range(3):
        assert cipher.encrypt(b"x" * 32, "cbc") == first
        assert cipher.decrypt(first, "cbc") == b"x" * 32


def test_string_mode_and_padding_names():
    cipher = build_cipher("SPECK_64_96", bytes(12))
    ct = cipher.encrypt(b"hello", "CBC", "PKCS7")
    assert cipher.decrypt(ct, "cbc", "pkcs7") == b"hello"


def test_decrypt_with_bad_padding_returns_raw_plaintext():
    cipher = build_cipher(Variant.SPECK_128_128, bytes(16))
    raw = bytes(range(16))     # trailing 0x0f but bytes before it differ
    ct = cipher.encrypt(raw, padding=Padding.NONE)
    assert cipher.decrypt(ct, padding=Padding.PKCS7) == raw


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("variant", list_variants(), ids=lambda v: v.value)
def test_unpadded_unaligned_plaintext_rejected(variant):
    cipher = build_cipher(variant, bytes(get_params(variant).key_size_bytes))
    with pytest.raises(UnalignedInputError):
        cipher.encrypt(b"\x00" * (cipher.block_size + 1), Mode.ECB, Padding.NONE)


@pytest.mark.parametrize("padding", list(Padding), ids=lambda p: p.value)
def test_unaligned_ciphertext_rejected_for_any_padding(padding):
    cipher = build_cipher(Variant.SPECK_64_96, bytes(12))
    with pytest.raises(UnalignedInputError):
        cipher.decrypt(b"\x00" * 9, Mode.CBC, padding)


def test_alignment_errors_are_value_errors():
    cipher = build_cipher(Variant.SPECK_64_96, bytes(12))
    with pytest.raises(ValueError):
        cipher.decrypt(b"\x00" * 3)


@pytest.mark.parametrize(
    "variant,length",
    [
        (Variant.SPECK_64_96, 16),
        (Variant.SPECK_64_128, 12),
        (Variant.SPECK_128_128, 15),
        (Variant.SPECK_128_192, 32),
        (Variant.SPECK_128_256, 20),
    ],
)
def test_invalid_key_length(variant, length):
    with pytest.raises(InvalidKeyLengthError):
        build_cipher(variant, bytes(length))


def test_unknown_mode():
    cipher = build_cipher(Variant.SPECK_128_128, bytes(16))
    with pytest.raises(UnimplementedModeError):
        cipher.encrypt(bytes(16), "ctr")
    with pytest.raises(UnimplementedModeError):
        cipher.decrypt(bytes(16), "gcm")


def test_unknown_variant():
    with pytest.raises(UnimplementedVariantError):
        build_cipher("speck96_144", bytes(18))


def test_repr_hides_key():
    key = bytes.fromhex("deadbeefdeadbeefdeadbeefdeadbeef")
    cipher = SpeckCipher(Variant.SPECK_128_128, key)
    text = repr(cipher)
    assert "deadbeef" not in text.lower()
    assert "speck128_128" in text
    assert cipher.rounds == 32


@pytest.mark.parametrize("variant", list_variants())
def test_cipher_properties_follow_variant_table(variant):
    params = get_params(variant)
    cipher = SpeckCipher(variant, bytes(params.key_size_bytes))
    assert cipher.variant is variant
    assert cipher.params == params
    assert cipher.block_size == params.block_size_bytes
    assert cipher.rounds == params.rounds
    assert not hasattr(cipher, "engine")


def test_cipher_takes_only_variant_and_key():
    with pytest.raises(TypeError):
        SpeckCipher(Variant.SPECK_128_128, bytes(16), modes=None)
