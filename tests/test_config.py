import logging
import math

import pytest
from pydantic import ValidationError

from textenc.config import Settings
from textenc import logging_setup
from textenc.types import IdfVariant, Mode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "LOG_LEVEL",
        "TEXTENC_MODE",
        "TEXTENC_MIN_DOCUMENT_FREQUENCY",
        "TEXTENC_LOG_BASE",
        "TEXTENC_IDF_VARIANT",
        "TEXTENC_MAX_FEATURES",
        "TEXTENC_MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings()
    assert s.log_level == "INFO"
    assert s.mode is Mode.COUNT
    assert s.min_document_frequency == 1
    assert s.log_base == math.e
    assert s.idf_variant is IdfVariant.RAW
    assert s.max_features is None
    assert s.max_workers is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("TEXTENC_MODE", "BINARY")
    monkeypatch.setenv("TEXTENC_MIN_DOCUMENT_FREQUENCY", "3")
    monkeypatch.setenv("TEXTENC_LOG_BASE", "2")
    monkeypatch.setenv("TEXTENC_IDF_VARIANT", "smooth")
    monkeypatch.setenv("TEXTENC_MAX_FEATURES", "100")
    monkeypatch.setenv("TEXTENC_MAX_WORKERS", "4")
    s = Settings()
    assert s.log_level == "DEBUG"
    assert s.mode is Mode.BINARY
    assert s.min_document_frequency == 3
    assert s.log_base == 2.0
    assert s.idf_variant is IdfVariant.SMOOTH
    assert s.max_features == 100
    assert s.max_workers == 4


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mode": "tfidf"},
        {"min_document_frequency": 0},
        {"log_base": 1},
        {"log_base": -3},
        {"idf_variant": "bm25"},
        {"max_features": 0},
        {"max_workers": 0},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValidationError):
        Settings(**kwargs)


def test_invalid_environment_rejected(monkeypatch):
    monkeypatch.setenv("TEXTENC_MIN_DOCUMENT_FREQUENCY", "zero")
    with pytest.raises(ValidationError):
        Settings()


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    monkeypatch.setattr(logging_setup, "settings", Settings(log_level="info"))
    logging_setup.configure_logging()
    assert calls["level"] == "INFO"
    assert calls["format"] == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging_setup.configure_logging("DEBUG")
    assert calls["level"] == "DEBUG"


def test_extension_keys_default_to_inactive():
    s = Settings()
    assert s.idf_variant is IdfVariant.RAW
    assert s.max_features is None
    assert s.max_workers is None
    assert "extensions" in Settings.__doc__
