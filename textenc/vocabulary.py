from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Iterator, NamedTuple, Sequence

import numpy as np

from .errors import EmptyCorpusError, IndexOutOfRangeError
from .types import Token, TokenizedDocument

logger = logging.getLogger(__name__)


class Vocabulary:
    """Frozen bijection between distinct tokens and the dense range [0, V)."""

    __slots__ = ("_tokens", "_index")

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._index: dict[Token, int] = {tok: i for i, tok in enumerate(self._tokens)}
        if len(self._index) != len(self._tokens):
            raise ValueError("vocabulary tokens must be unique")

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"

    def index_of(self, token: Token) -> int | None:
        return self._index.get(token)

    def token_at(self, index: int) -> Token:
        if not 0 <= index < len(self._tokens):
            raise IndexOutOfRangeError(index, len(self._tokens))
        return self._tokens[index]

    def feature_names(self) -> list[Token]:
        return list(self._tokens)

    def as_dict(self) -> dict[Token, int]:
        return dict(self._index)


class DocumentFrequencyTable:
    """Per-index count of fitted documents containing the token at least once."""

    __slots__ = ("_counts", "_n_documents")

    def __init__(self, counts: Sequence[int], n_documents: int):
        if n_documents < 0:
            raise ValueError("n_documents must be non-negative")
        for i, c in enumerate(counts):
            if not 0 <= c <= n_documents:
                raise ValueError(f"document frequency {c} at index {i} outside [0, {n_documents}]")
        self._counts: tuple[int, ...] = tuple(int(c) for c in counts)
        self._n_documents = n_documents

    @property
    def n_documents(self) -> int:
        return self._n_documents

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._counts):
            raise IndexOutOfRangeError(index, len(self._counts))
        return self._counts[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentFrequencyTable):
            return NotImplemented
        return self._counts == other._counts and self._n_documents == other._n_documents

    def __hash__(self) -> int:
        return hash((self._counts, self._n_documents))

    def __repr__(self) -> str:
        return f"DocumentFrequencyTable(size={len(self)}, n_documents={self._n_documents})"

    def as_array(self) -> np.ndarray:
        return np.asarray(self._counts, dtype=np.int64)


class FittedVocabulary(NamedTuple):
    vocabulary: Vocabulary
    document_frequency: DocumentFrequencyTable

    @property
    def n_documents(self) -> int:
        return self.document_frequency.n_documents

    def df_of(self, token: Token) -> int:
        """Document frequency of ``token``; 0 for tokens outside the vocabulary."""
        idx = self.vocabulary.index_of(token)
        return 0 if idx is None else self.document_frequency[idx]


def fit(
    documents: Iterable[TokenizedDocument],
    min_document_frequency: int = 1,
    max_features: int | None = None,
) -> FittedVocabulary:
    """Build the vocabulary and document-frequency table in one pass.

    Tokens are indexed in code-point lexicographic order. Tokens seen in fewer
    than ``min_document_frequency`` documents are left out of the vocabulary.
    ``max_features`` keeps the most frequent tokens (by document frequency,
    ties broken lexicographically) before indexing.
    """
    if min_document_frequency < 1:
        raise ValueError("min_document_frequency must be >= 1")
    if max_features is not None and max_features < 1:
        raise ValueError("max_features must be >= 1")

    df: Counter[Token] = Counter()
    n_documents = 0
    for doc in documents:
        if isinstance(doc, str):
            raise TypeError(f"document {n_documents} is a str; expected a sequence of tokens")
        df.update(set(doc))
        n_documents += 1

    if n_documents == 0:
        raise EmptyCorpusError()

    kept = [tok for tok, c in df.items() if c >= min_document_frequency]
    if max_features is not None and len(kept) > max_features:
        kept.sort(key=lambda tok: (-df[tok], tok))
        kept = kept[:max_features]
    kept.sort()

    vocabulary = Vocabulary(kept)
    table = DocumentFrequencyTable([df[tok] for tok in kept], n_documents)
    logger.info(
        "fitted vocabulary: %d tokens from %d documents (%d distinct seen)",
        len(vocabulary),
        n_documents,
        len(df),
    )
    return FittedVocabulary(vocabulary, table)
