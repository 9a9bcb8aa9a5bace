from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Sequence

from .sparse import CorpusMatrix, SparseVector
from .types import Mode, TokenizedDocument
from .utils.parallel import map_ordered
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def transform(
    document: TokenizedDocument,
    vocabulary: Vocabulary,
    mode: Mode | str = Mode.COUNT,
    document_index: int | None = None,
) -> SparseVector:
    """Map one tokenized document onto ``vocabulary``.

    Out-of-vocabulary tokens are dropped. ``BINARY`` clamps every present entry to 1.
    """
    mode = Mode(mode)
    if isinstance(document, str):
        where = f"document {document_index}" if document_index is not None else "document"
        raise TypeError(f"{where} is a str; expected a sequence of tokens")

    counts: Counter[int] = Counter()
    oov = 0
    seen = 0
    for tok in document:
        seen += 1
        idx = vocabulary.index_of(tok)
        if idx is None:
            oov += 1
            continue
        counts[idx] += 1

    if oov:
        logger.debug("dropped %d out-of-vocabulary tokens of %d", oov, seen)

    if mode is Mode.BINARY:
        return SparseVector(len(vocabulary), {idx: 1.0 for idx in counts})
    return SparseVector(len(vocabulary), counts)


def transform_many(
    documents: Iterable[TokenizedDocument],
    vocabulary: Vocabulary,
    mode: Mode | str = Mode.COUNT,
    max_workers: int | None = None,
) -> CorpusMatrix:
    """Transform each document in order; row ``i`` belongs to document ``i``."""
    mode = Mode(mode)
    docs = documents if isinstance(documents, Sequence) else list(documents)
    rows = map_ordered(
        lambda i, doc: transform(doc, vocabulary, mode, document_index=i), docs, max_workers
    )
    logger.debug("transformed %d documents (mode=%s, V=%d)", len(rows), mode.value, len(vocabulary))
    return CorpusMatrix(rows, dim=len(vocabulary), mode=mode)


def document_lengths(documents: Iterable[TokenizedDocument]) -> list[int]:
    """Token count of each document before any vocabulary filtering."""
    return [len(doc) for doc in documents]
