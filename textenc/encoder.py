from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from . import vectorizer, vocabulary, weighting
from .config import settings
from .sparse import CorpusMatrix
from .types import IdfVariant, Mode, Token
from .utils.text import tokenize
from .vocabulary import FittedVocabulary

logger = logging.getLogger(__name__)

Tokenizer = Callable[[str], Sequence[Token]]


class TextEncoder:
    """Count / binary / TF-IDF encoding of raw texts.

    Holds configuration only. Fitting returns a ``FittedVocabulary`` which the
    caller passes back into ``transform`` and ``weight``; one encoder can serve
    any number of fitted models.
    """

    def __init__(
        self,
        tokenizer: Tokenizer = tokenize,
        mode: Mode | str | None = None,
        min_document_frequency: int | None = None,
        log_base: float | None = None,
        idf_variant: IdfVariant | str | None = None,
        max_features: int | None = None,
        max_workers: int | None = None,
    ):
        self.tokenizer = tokenizer
        self.mode = Mode(mode if mode is not None else settings.mode)
        self.min_document_frequency = (
            min_document_frequency
            if min_document_frequency is not None
            else settings.min_document_frequency
        )
        self.log_base = log_base if log_base is not None else settings.log_base
        self.idf_variant = IdfVariant(idf_variant if idf_variant is not None else settings.idf_variant)
        self.max_features = max_features if max_features is not None else settings.max_features
        self.max_workers = max_workers if max_workers is not None else settings.max_workers

    def __repr__(self) -> str:
        return (
            f"TextEncoder(mode={self.mode.value}, min_document_frequency={self.min_document_frequency}, "
            f"log_base={self.log_base:g}, idf_variant={self.idf_variant.value}, "
            f"max_features={self.max_features})"
        )

    def tokenize_all(self, texts: Iterable[str]) -> list[list[Token]]:
        if isinstance(texts, str):
            raise TypeError("expected a collection of texts, got a single str")
        return [list(self.tokenizer(t)) for t in texts]

    def fit(self, texts: Iterable[str]) -> FittedVocabulary:
        return vocabulary.fit(
            self.tokenize_all(texts),
            min_document_frequency=self.min_document_frequency,
            max_features=self.max_features,
        )

    def transform(
        self, texts: Iterable[str], fitted: FittedVocabulary, mode: Mode | str | None = None
    ) -> CorpusMatrix:
        return vectorizer.transform_many(
            self.tokenize_all(texts),
            fitted.vocabulary,
            mode=mode if mode is not None else self.mode,
            max_workers=self.max_workers,
        )

    def fit_transform(self, texts: Iterable[str]) -> tuple[FittedVocabulary, CorpusMatrix]:
        docs = self.tokenize_all(texts)
        fitted = vocabulary.fit(
            docs,
            min_document_frequency=self.min_document_frequency,
            max_features=self.max_features,
        )
        matrix = vectorizer.transform_many(
            docs, fitted.vocabulary, mode=self.mode, max_workers=self.max_workers
        )
        return fitted, matrix

    def weight(self, texts: Iterable[str], fitted: FittedVocabulary) -> CorpusMatrix:
        return self._weight_tokenized(self.tokenize_all(texts), fitted)

    def fit_weight(self, texts: Iterable[str]) -> tuple[FittedVocabulary, CorpusMatrix]:
        docs = self.tokenize_all(texts)
        fitted = vocabulary.fit(
            docs,
            min_document_frequency=self.min_document_frequency,
            max_features=self.max_features,
        )
        return fitted, self._weight_tokenized(docs, fitted)

    def _weight_tokenized(self, docs: list[list[Token]], fitted: FittedVocabulary) -> CorpusMatrix:
        # TF-IDF always starts from raw counts, whatever self.mode says
        counts = vectorizer.transform_many(
            docs, fitted.vocabulary, mode=Mode.COUNT, max_workers=self.max_workers
        )
        return weighting.weight(
            counts,
            vectorizer.document_lengths(docs),
            fitted.document_frequency,
            fitted.n_documents,
            log_base=self.log_base,
            idf_variant=self.idf_variant,
            max_workers=self.max_workers,
        )
