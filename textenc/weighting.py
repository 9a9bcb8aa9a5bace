"""TF-IDF weighting over count matrices.

TF(doc, idx)  = count / doc_length      (doc_length counts every original token)
IDF(idx)      = log_b(N / df)           (IdfVariant.RAW, the default)
              = log_b((1 + N) / (1 + df)) + 1   (IdfVariant.SMOOTH)

A raw IDF of exactly zero (df == N) removes the entry from the weighted row.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from .errors import DegenerateDocumentError, IndexOutOfRangeError
from .sparse import CorpusMatrix, SparseVector
from .types import IdfVariant, Mode
from .utils.parallel import map_ordered
from .vocabulary import DocumentFrequencyTable

logger = logging.getLogger(__name__)


def _check_log_base(log_base: float) -> None:
    if not log_base > 0 or log_base == 1 or math.isinf(log_base):
        raise ValueError("log_base must be a positive real other than 1")


def inverse_document_frequency(
    df_table: DocumentFrequencyTable,
    n_documents: int,
    log_base: float = math.e,
    idf_variant: IdfVariant | str = IdfVariant.RAW,
) -> np.ndarray:
    _check_log_base(log_base)
    variant = IdfVariant(idf_variant)
    if n_documents < 1:
        raise ValueError(f"n_documents must be >= 1, got {n_documents}")
    largest = max(df_table, default=0)
    if largest > n_documents:
        raise ValueError(
            f"document frequency {largest} exceeds n_documents={n_documents}; "
            f"the table was fitted on {df_table.n_documents} documents"
        )
    scale = 1.0 if log_base == math.e else math.log(log_base)

    idf = np.zeros(len(df_table), dtype=np.float64)
    for idx, df in enumerate(df_table):
        if variant is IdfVariant.SMOOTH:
            idf[idx] = math.log((1 + n_documents) / (1 + df)) / scale + 1.0
        elif df > 0:
            idf[idx] = math.log(n_documents / df) / scale
        # df == 0 only happens for hand-built tables; such indices never carry counts
    return idf


def weight_row(
    counts: SparseVector,
    doc_length: int,
    idf: np.ndarray,
    document_index: int | None = None,
) -> SparseVector:
    if doc_length == 0:
        raise DegenerateDocumentError(document_index)
    if doc_length < 0:
        raise ValueError(f"negative document length {doc_length}")

    dim = len(idf)
    total = 0.0
    weighted: dict[int, float] = {}
    for idx, count in counts:
        if idx >= dim:
            raise IndexOutOfRangeError(idx, dim)
        total += count
        w = (count / doc_length) * float(idf[idx])
        if w != 0.0:
            weighted[idx] = w

    if total > doc_length:
        where = f"document {document_index}" if document_index is not None else "document"
        raise ValueError(f"{where}: length {doc_length} is smaller than its {total:g} counted tokens")
    return SparseVector(dim, weighted)


def weight(
    corpus_matrix: CorpusMatrix,
    doc_lengths: Sequence[int],
    df_table: DocumentFrequencyTable,
    n_documents: int,
    log_base: float = math.e,
    idf_variant: IdfVariant | str = IdfVariant.RAW,
    max_workers: int | None = None,
) -> CorpusMatrix:
    """Weight every row of a COUNT matrix; rows keep their order.

    The first zero-length document raises ``DegenerateDocumentError`` with its
    row index; no partial matrix is returned.
    """
    if corpus_matrix.mode is not Mode.COUNT:
        raise ValueError("weighting requires a COUNT-mode corpus matrix")
    if len(doc_lengths) != len(corpus_matrix):
        raise ValueError(
            f"got {len(doc_lengths)} document lengths for {len(corpus_matrix)} rows"
        )
    if corpus_matrix.dim != len(df_table):
        raise ValueError(
            f"matrix dimension {corpus_matrix.dim} does not match "
            f"document-frequency table of size {len(df_table)}"
        )

    idf = inverse_document_frequency(df_table, n_documents, log_base, idf_variant)
    rows = map_ordered(
        lambda i, row: weight_row(row, doc_lengths[i], idf, document_index=i),
        corpus_matrix.rows,
        max_workers,
    )
    logger.debug("weighted %d rows (V=%d, N=%d)", len(rows), len(idf), n_documents)
    return CorpusMatrix(rows, dim=corpus_matrix.dim, mode=None)
