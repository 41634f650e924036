"""
submat.py — substitution tables

A substitution table maps an ordered pair of symbols (a, b) to the score
or cost of aligning a against b.  Two variants are provided:

  - SubstitutionMatrix            : wraps an arbitrary 2-D numeric array.
  - DichotomousSubstitutionMatrix : fully described by a match and a
                                    mismatch scalar.

Both expose `lookup(a, b)`, `table[a, b]` and `dtype`, the element type
that scoring models built on the table adopt.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Hashable, Mapping, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .promote import check_numeric_dtype, promote_scalars


class AbstractSubstitutionMatrix(ABC):
    """Supertype of substitution tables."""

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """Element type of the scores stored in the table."""

    @abstractmethod
    def lookup(self, a: Hashable, b: Hashable) -> np.generic:
        """Return the score of aligning symbol `a` against symbol `b`."""

    def __getitem__(self, key):
        a, b = key
        return self.lookup(a, b)


class SubstitutionMatrix(AbstractSubstitutionMatrix):
    """
    Substitution table backed by a 2-D numeric array.

    Parameters
    ----------
    matrix : array-like, shape (K, L)
        Scores; matrix[i, j] is the score of symbol index i against
        symbol index j.  The array is copied and frozen.

    alphabet_to_index : mapping, optional
        Maps symbols to row/column indices.  Without it, one-character
        strings are indexed by code point and integers are used as-is,
        so a (128, 128) matrix covers ASCII text.  Negative indices raise
        IndexError rather than wrapping around.

    Raises
    ------
    ValueError
        If `matrix` is not two-dimensional.
    TypeError
        If `matrix` does not hold integers or floats.
    """

    def __init__(
        self,
        matrix: ArrayLike,
        alphabet_to_index: Optional[Mapping[Hashable, int]] = None,
    ):
        array = np.array(matrix)
        if array.ndim != 2:
            raise ValueError(
                f"Substitution matrix must be two-dimensional, got shape {array.shape}"
            )
        check_numeric_dtype(array.dtype)
        array.setflags(write=False)

        self._matrix: NDArray = array
        self._alphabet_to_index = (
            None if alphabet_to_index is None else dict(alphabet_to_index)
        )

    @property
    def dtype(self) -> np.dtype:
        return self._matrix.dtype

    @property
    def matrix(self) -> NDArray:
        """Read-only view of the underlying scores."""
        return self._matrix

    @property
    def alphabet_to_index(self) -> Optional[Mapping[Hashable, int]]:
        return self._alphabet_to_index

    def _index(self, symbol: Hashable) -> int:
        if self._alphabet_to_index is not None:
            index = self._alphabet_to_index[symbol]
        elif isinstance(symbol, str):
            index = ord(symbol)
        else:
            index = int(symbol)
        if index < 0:
            raise IndexError(f"Symbol {symbol!r} maps to negative index {index}")
        return index

    def lookup(self, a, b):
        return self._matrix[self._index(a), self._index(b)]

    def __eq__(self, other):
        if not isinstance(other, SubstitutionMatrix):
            return NotImplemented
        return (
            self.dtype == other.dtype
            and np.array_equal(self._matrix, other._matrix)
            and self._alphabet_to_index == other._alphabet_to_index
        )

    def __hash__(self):
        alphabet = (
            None if self._alphabet_to_index is None
            else tuple(sorted(self._alphabet_to_index.items(), key=repr))
        )
        return hash((self._matrix.shape, str(self.dtype), self._matrix.tobytes(), alphabet))

    def __repr__(self):
        return f"SubstitutionMatrix(shape={self._matrix.shape}, dtype={self.dtype})"

    def __str__(self):
        lines = [f"{self._matrix.shape[0]}x{self._matrix.shape[1]} SubstitutionMatrix[{self.dtype}]:"]
        if self._alphabet_to_index is not None:
            labels = sorted(self._alphabet_to_index, key=self._alphabet_to_index.get)
            width = max(len(str(v)) for v in self._matrix.ravel()) if self._matrix.size else 1
            width = max(width, max((len(str(s)) for s in labels), default=1))
            lines.append(" " * (width + 1) + " ".join(f"{s!s:>{width}}" for s in labels))
            for s in labels:
                row = self._matrix[self._alphabet_to_index[s]]
                lines.append(f"{s!s:>{width}} " + " ".join(f"{v!s:>{width}}" for v in row))
        else:
            lines.extend(np.array2string(self._matrix).splitlines())
        return "\n".join(lines)


@dataclass(frozen=True)
class DichotomousSubstitutionMatrix(AbstractSubstitutionMatrix):
    """
    Substitution table that scores `match` for identical symbols and
    `mismatch` for any two different symbols.

    `match` and `mismatch` are promoted to a common numeric type.
    """

    match: np.generic
    mismatch: np.generic

    def __post_init__(self):
        _, (match, mismatch) = promote_scalars(self.match, self.mismatch)
        object.__setattr__(self, "match", match)
        object.__setattr__(self, "mismatch", mismatch)

    @property
    def dtype(self) -> np.dtype:
        return self.match.dtype

    def lookup(self, a, b):
        return self.match if a == b else self.mismatch

    def __str__(self):
        return f"DichotomousSubstitutionMatrix[{self.dtype}](match={self.match}, mismatch={self.mismatch})"
