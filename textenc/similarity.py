from __future__ import annotations

import numpy as np

from .sparse import CorpusMatrix, SparseVector


def cosine_similarity(a: SparseVector, b: SparseVector) -> float:
    if a.dim != b.dim:
        raise ValueError(f"dimension mismatch: {a.dim} vs {b.dim}")
    denom = a.norm() * b.norm()
    if denom == 0.0:
        return 0.0
    small, large = (a, b) if a.nnz <= b.nnz else (b, a)
    dot = sum(v * large.get(i) for i, v in small)
    return float(dot / denom)


def rank(query: SparseVector, matrix: CorpusMatrix, k: int) -> list[tuple[int, float]]:
    """Top-k rows of ``matrix`` by cosine similarity to ``query``, best first."""
    if k < 1:
        raise ValueError("k must be >= 1")
    if query.dim != matrix.dim:
        raise ValueError(f"dimension mismatch: {query.dim} vs {matrix.dim}")
    if len(matrix) == 0:
        return []
    sims = np.array([cosine_similarity(query, row) for row in matrix], dtype=np.float64)
    # stable sort keeps lower row indices first among equal scores
    idx = np.argsort(-sims, kind="stable")[:k]
    return [(int(i), float(sims[i])) for i in idx]
