import pytest

from textenc.utils.text import tokenize

TEXTS = [
    "The cat and the cat hate each other.",
    "The dog is the bird.",
    "No, the bird and cat hate other dog.",
]

VOCAB = ["and", "bird", "cat", "dog", "each", "hate", "is", "no", "other", "the"]


@pytest.fixture
def texts() -> list[str]:
    return list(TEXTS)


@pytest.fixture
def docs() -> list[list[str]]:
    return [tokenize(t) for t in TEXTS]


@pytest.fixture
def expected_vocab() -> list[str]:
    return list(VOCAB)
