from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from specklab.cipher.errors import SpeckError
from specklab.cipher.variants import Mode, Padding, Variant, coerce_mode, coerce_padding, coerce_variant


def _as_value_error(coerce, v):
    # pydantic only reports ValueError as a validation failure
    try:
        return coerce(v)
    except SpeckError as exc:
        raise ValueError(str(exc)) from exc


class Settings(BaseModel):
    # Cipher defaults used by the CLI
    default_variant: Variant = Field(default=Variant.SPECK_128_128)
    default_mode: Mode = Field(default=Mode.ECB)
    default_padding: Padding = Field(default=Padding.PKCS7)

    # Logging
    log_level: str = Field(default="INFO")

    # Self-test
    roundtrip_vectors: int = Field(default=200, ge=1, le=100_000)
    avalanche_trials: int = Field(default=200, ge=1, le=100_000)
    global_seed: int = Field(default=1337)

    # Paths
    reports_dir: str = Field(default="reports")

    @field_validator("default_variant", mode="before")
    @classmethod
    def _variant(cls, v):
        return _as_value_error(coerce_variant, v)

    @field_validator("default_mode", mode="before")
    @classmethod
    def _mode(cls, v):
        return _as_value_error(coerce_mode, v)

    @field_validator("default_padding", mode="before")
    @classmethod
    def _padding(cls, v):
        return _as_value_error(coerce_padding, v)

    @field_validator("log_level")
    @classmethod
    def _log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        default_variant=os.getenv("SPECK_VARIANT", Variant.SPECK_128_128.value),
        default_mode=os.getenv("SPECK_MODE", Mode.ECB.value),
        default_padding=os.getenv("SPECK_PADDING", Padding.PKCS7.value),
        log_level=os.getenv("SPECK_LOG_LEVEL", "INFO"),
        roundtrip_vectors=os.getenv("SPECK_ROUNDTRIP_VECTORS", "200"),
        avalanche_trials=os.getenv("SPECK_AVALANCHE_TRIALS", "200"),
        global_seed=os.getenv("GLOBAL_SEED", "1337"),
        reports_dir=os.getenv("SPECK_REPORTS_DIR", "reports"),
    )
