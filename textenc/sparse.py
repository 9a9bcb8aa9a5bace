from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator, Mapping, Sequence

import numpy as np
from scipy.sparse import csr_matrix

from .errors import IndexOutOfRangeError
from .types import Mode


class SparseVector:
    """Index -> value mapping over a fixed dimension; absent indices are zero.

    Zero values are dropped on construction, so an explicit zero is never stored.
    """

    __slots__ = ("_dim", "_indices", "_values")

    def __init__(self, dim: int, entries: Mapping[int, float] | Iterable[tuple[int, float]] = ()):
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        items = entries.items() if isinstance(entries, Mapping) else entries
        kept: dict[int, float] = {}
        for idx, value in items:
            idx = int(idx)
            if not 0 <= idx < dim:
                raise IndexOutOfRangeError(idx, dim)
            value = float(value)
            if value != 0.0:
                kept[idx] = value
            else:
                kept.pop(idx, None)
        order = sorted(kept)
        self._dim = dim
        self._indices: tuple[int, ...] = tuple(order)
        self._values: tuple[float, ...] = tuple(kept[i] for i in order)

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    @property
    def values(self) -> tuple[float, ...]:
        return self._values

    @property
    def nnz(self) -> int:
        return len(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self) -> Iterator[tuple[int, float]]:
        return iter(zip(self._indices, self._values))

    def items(self) -> Iterator[tuple[int, float]]:
        return iter(self)

    def __contains__(self, index: object) -> bool:
        if not isinstance(index, int):
            return False
        pos = bisect_left(self._indices, index)
        return pos < len(self._indices) and self._indices[pos] == index

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < self._dim:
            raise IndexOutOfRangeError(index, self._dim)
        return self.get(index)

    def get(self, index: int, default: float = 0.0) -> float:
        pos = bisect_left(self._indices, index)
        if pos < len(self._indices) and self._indices[pos] == index:
            return self._values[pos]
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return (
            self._dim == other._dim
            and self._indices == other._indices
            and self._values == other._values
        )

    def __hash__(self) -> int:
        return hash((self._dim, self._indices, self._values))

    def __repr__(self) -> str:
        body = ", ".join(f"{i}: {v:g}" for i, v in self)
        return f"SparseVector(dim={self._dim}, {{{body}}})"

    def norm(self) -> float:
        return float(np.sqrt(sum(v * v for v in self._values)))

    def to_dict(self) -> dict[int, float]:
        return dict(self)

    def to_dense(self) -> np.ndarray:
        out = np.zeros(self._dim, dtype=np.float64)
        if self._indices:
            out[list(self._indices)] = self._values
        return out


class CorpusMatrix:
    """Ordered rows of sparse vectors sharing one vocabulary.

    ``mode`` records how the rows were produced; weighted matrices carry ``None``.
    """

    __slots__ = ("_rows", "_dim", "_mode")

    def __init__(self, rows: Sequence[SparseVector], dim: int, mode: Mode | None = None):
        rows = tuple(rows)
        for r, row in enumerate(rows):
            if row.dim != dim:
                raise ValueError(f"row {r} has dimension {row.dim}, expected {dim}")
        self._rows: tuple[SparseVector, ...] = rows
        self._dim = dim
        self._mode = Mode(mode) if mode is not None else None

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def mode(self) -> Mode | None:
        return self._mode

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), self._dim

    @property
    def nnz(self) -> int:
        return sum(row.nnz for row in self._rows)

    @property
    def rows(self) -> tuple[SparseVector, ...]:
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[SparseVector]:
        return iter(self._rows)

    def __getitem__(self, row: int) -> SparseVector:
        return self._rows[row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CorpusMatrix):
            return NotImplemented
        return self._dim == other._dim and self._mode == other._mode and self._rows == other._rows

    def __hash__(self) -> int:
        return hash((self._dim, self._mode, self._rows))

    def __repr__(self) -> str:
        mode = self._mode.value if self._mode else "weighted"
        return f"CorpusMatrix(shape={self.shape}, nnz={self.nnz}, mode={mode})"

    def to_dense(self) -> np.ndarray:
        if not self._rows:
            return np.zeros((0, self._dim), dtype=np.float64)
        return np.vstack([row.to_dense() for row in self._rows])

    def to_csr(self) -> csr_matrix:
        indptr = [0]
        indices: list[int] = []
        data: list[float] = []
        for row in self._rows:
            indices.extend(row.indices)
            data.extend(row.values)
            indptr.append(len(indices))
        return csr_matrix(
            (
                np.asarray(data, dtype=np.float64),
                np.asarray(indices, dtype=np.int64),
                np.asarray(indptr, dtype=np.int64),
            ),
            shape=self.shape,
        )
