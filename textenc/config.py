import logging
import math
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import IdfVariant, Mode

load_dotenv()


def _env(name: str, default: str | None = None):
    return lambda: os.getenv(name) or default


class Settings(BaseModel):
    """Encoder defaults read from the environment.

    ``mode``, ``min_document_frequency`` and ``log_base`` shape the encoding
    itself. ``idf_variant``, ``max_features`` and ``max_workers`` are
    extensions; left at their defaults they change nothing.
    """

    # env values arrive as strings; validate_default lets pydantic coerce them
    model_config = ConfigDict(validate_default=True)

    log_level: str = Field(default_factory=_env("LOG_LEVEL", "INFO"))

    mode: Mode = Field(default_factory=_env("TEXTENC_MODE", "count"))
    min_document_frequency: int = Field(default_factory=_env("TEXTENC_MIN_DOCUMENT_FREQUENCY", "1"))
    log_base: float = Field(default_factory=_env("TEXTENC_LOG_BASE", "e"))
    idf_variant: IdfVariant = Field(default_factory=_env("TEXTENC_IDF_VARIANT", "raw"))
    max_features: int | None = Field(default_factory=_env("TEXTENC_MAX_FEATURES"))
    max_workers: int | None = Field(default_factory=_env("TEXTENC_MAX_WORKERS"))

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value

    @field_validator("mode", "idf_variant", mode="before")
    @classmethod
    def lower_enum_value(cls, value):
        return value.lower() if isinstance(value, str) else value

    @field_validator("log_base", mode="before")
    @classmethod
    def parse_log_base(cls, value):
        if isinstance(value, str) and value.strip().lower() == "e":
            return math.e
        return value

    @field_validator("min_document_frequency")
    @classmethod
    def validate_min_df(cls, value: int) -> int:
        if value < 1:
            raise ValueError("min_document_frequency must be >= 1")
        return value

    @field_validator("log_base")
    @classmethod
    def validate_log_base(cls, value: float) -> float:
        if not value > 0 or value == 1 or math.isinf(value):
            raise ValueError("log_base must be a positive real other than 1")
        return value

    @field_validator("max_features", "max_workers")
    @classmethod
    def validate_optional_positive(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("must be >= 1 when set")
        return value


settings = Settings()
