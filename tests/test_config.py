import pytest
from pydantic import ValidationError

from specklab.cipher.variants import Mode, Padding, Variant
from specklab.config import Settings, load_settings


def test_defaults():
    s = Settings()
    assert s.default_variant is Variant.SPECK_128_128
    assert s.default_mode is Mode.ECB
    assert s.default_padding is Padding.PKCS7
    assert s.log_level == "INFO"


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("SPECK_VARIANT", "speck64_128")
    monkeypatch.setenv("SPECK_MODE", "CBC")
    monkeypatch.setenv("SPECK_PADDING", "none")
    monkeypatch.setenv("SPECK_LOG_LEVEL", "debug")
    monkeypatch.setenv("SPECK_ROUNDTRIP_VECTORS", "17")
    s = load_settings()
    assert s.default_variant is Variant.SPECK_64_128
    assert s.default_mode is Mode.CBC
    assert s.default_padding is Padding.NONE
    assert s.log_level == "DEBUG"
    assert s.roundtrip_vectors == 17
    assert load_settings() is s


def test_invalid_values_fail_validation():
    with pytest.raises(ValueError):
        Settings(default_variant="speck32_64")
    with pytest.raises(ValueError):
        Settings(default_mode="ofb")
    with pytest.raises(ValueError):
        Settings(log_level="LOUD")
    with pytest.raises(ValueError):
        Settings(roundtrip_vectors=0)


def test_numeric_environment_values_are_validated(monkeypatch):
    monkeypatch.setenv("SPECK_ROUNDTRIP_VECTORS", "many")
    with pytest.raises(ValidationError):
        load_settings()


def test_numeric_environment_values_are_coerced(monkeypatch):
    monkeypatch.setenv("SPECK_AVALANCHE_TRIALS", "64")
    monkeypatch.setenv("GLOBAL_SEED", "7")
    s = load_settings()
    assert s.avalanche_trials == 64
    assert s.global_seed == 7
