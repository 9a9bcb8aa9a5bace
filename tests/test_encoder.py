import math

import pytest

from textenc.encoder import TextEncoder
from textenc.errors import DegenerateDocumentError, EmptyCorpusError
from textenc.types import IdfVariant, Mode


def test_fit_transform_counts(texts, expected_vocab):
    encoder = TextEncoder(mode="count")
    fitted, matrix = encoder.fit_transform(texts)
    assert fitted.vocabulary.feature_names() == expected_vocab
    assert matrix.mode is Mode.COUNT
    assert matrix.shape == (3, 10)
    assert matrix[0][fitted.vocabulary.index_of("the")] == 2.0


def test_transform_reuses_fitted_model(texts):
    encoder = TextEncoder(mode=Mode.BINARY)
    fitted = encoder.fit(texts)
    matrix = encoder.transform(["The cat, the cat, the CAT!", "unknown words only"], fitted)
    assert matrix.mode is Mode.BINARY
    assert matrix[0].to_dict() == {
        fitted.vocabulary.index_of("cat"): 1.0,
        fitted.vocabulary.index_of("the"): 1.0,
    }
    assert matrix[1].nnz == 0
    # explicit mode overrides the configured one
    assert encoder.transform(texts[:1], fitted, mode="count").mode is Mode.COUNT


def test_fit_weight_worked_example(texts):
    fitted, weighted = TextEncoder().fit_weight(texts)
    the = fitted.vocabulary.index_of("the")
    dog = fitted.vocabulary.index_of("dog")
    assert all(the not in row for row in weighted)
    assert weighted[1][dog] == pytest.approx(1 / 5 * math.log(3 / 2))


def test_weight_always_counts_even_in_binary_mode(texts):
    counted = TextEncoder(mode="count")
    binary = TextEncoder(mode="binary")
    fitted = counted.fit(texts)
    assert counted.weight(texts, fitted) == binary.weight(texts, fitted)


def test_encoder_holds_no_fitted_state(texts):
    encoder = TextEncoder()
    first = encoder.fit(texts)
    second = encoder.fit(["zebra yak"])
    assert first.vocabulary.feature_names() != second.vocabulary.feature_names()
    assert len(encoder.transform(texts, first)[0]) == 6


def test_custom_tokenizer_and_options(texts):
    encoder = TextEncoder(
        tokenizer=str.split,
        min_document_frequency=2,
        idf_variant=IdfVariant.SMOOTH,
        log_base=10,
        max_workers=2,
    )
    fitted = encoder.fit(texts)
    assert "The" in fitted.vocabulary
    assert all(c >= 2 for c in fitted.document_frequency)
    assert "idf_variant=smooth" in repr(encoder)


def test_empty_inputs(texts):
    encoder = TextEncoder()
    with pytest.raises(EmptyCorpusError):
        encoder.fit([])
    with pytest.raises(TypeError):
        encoder.fit("a single string")
    fitted = encoder.fit(texts)
    with pytest.raises(DegenerateDocumentError) as excinfo:
        encoder.weight(["the cat", "..."], fitted)
    assert excinfo.value.document_index == 1


def test_empty_single_document_corpus():
    encoder = TextEncoder()
    fitted, counts = encoder.fit_transform([""])
    assert len(fitted.vocabulary) == 0
    assert counts.shape == (1, 0)
    with pytest.raises(DegenerateDocumentError):
        encoder.fit_weight([""])


def test_defaults_come_from_settings(monkeypatch):
    from textenc import encoder as encoder_module
    from textenc.config import Settings

    monkeypatch.setattr(
        encoder_module, "settings", Settings(mode="binary", min_document_frequency=2, max_features=5)
    )
    encoder = TextEncoder()
    assert encoder.mode is Mode.BINARY
    assert encoder.min_document_frequency == 2
    assert encoder.max_features == 5


def test_upper_case_options_accepted(texts):
    encoder = TextEncoder(mode="BINARY", idf_variant="SMOOTH")
    assert encoder.mode is Mode.BINARY
    assert encoder.idf_variant is IdfVariant.SMOOTH
    with pytest.raises(ValueError):
        TextEncoder(mode="tfidf")
