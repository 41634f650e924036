"""
models.py — alignment score and cost models

This module defines the scoring schemes handed to an alignment routine:

  - AffineGapScoreModel : substitution scores plus affine gap scores
                          (gap_open, gap_extend <= 0); maximized.
  - CostModel           : substitution costs plus insertion/deletion
                          costs (>= 0); minimized (edit distance).

Every model is a frozen dataclass validated in __post_init__, so a model
either exists fully valid or construction raises.  Several construction
paths converge on that constructor:

    AffineGapScoreModel.from_table(submat, gap_open, gap_extend)
    AffineGapScoreModel.from_table(submat, gap_open_penalty=10, gap_extend_penalty=1)
    AffineGapScoreModel.from_matrix(score_matrix, gap_open=-10, gap_extend=-1,
                                    alphabet_to_index=alphabet_to_index)
    AffineGapScoreModel.from_scalars(match=5, mismatch=-3, gap_open=-2, gap_extend=-1)

and score_model()/cost_model() pick the path from the first argument.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Hashable, Mapping, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .errors import ConfigurationError
from .params import GapParameters, IndelParameters, resolve_first
from .promote import coerce_scalar, promote_scalars
from .submat import (
    AbstractSubstitutionMatrix,
    DichotomousSubstitutionMatrix,
    SubstitutionMatrix,
)


# ---------------------------------------------------------------------------
# Supertypes
# ---------------------------------------------------------------------------

class AbstractScoreModel(ABC):
    """Supertype of score models (higher is better)."""

    submat: AbstractSubstitutionMatrix

    @property
    def dtype(self) -> np.dtype:
        """Numeric type shared by every score of the model."""
        return self.submat.dtype

    @abstractmethod
    def substitution_score(self, a: Hashable, b: Hashable) -> np.generic:
        """Score of aligning symbol `a` against symbol `b`."""


class AbstractCostModel(ABC):
    """Supertype of cost models (lower is better)."""

    submat: AbstractSubstitutionMatrix

    @property
    def dtype(self) -> np.dtype:
        """Numeric type shared by every cost of the model."""
        return self.submat.dtype

    @abstractmethod
    def substitution_cost(self, a: Hashable, b: Hashable) -> np.generic:
        """Cost of substituting symbol `a` with symbol `b`."""


# ---------------------------------------------------------------------------
# Shared validation and display helpers
# ---------------------------------------------------------------------------

def _check_submat(submat) -> None:
    if not isinstance(submat, AbstractSubstitutionMatrix):
        raise TypeError(
            f"Expected a substitution matrix, got {type(submat).__name__}; "
            "use from_matrix() to wrap a raw array"
        )


def _required_scalars(names: Sequence[str], values: Sequence[Any]) -> Tuple[Any, ...]:
    return tuple(resolve_first((v,), (n,))[1] for n, v in zip(names, values))


def _format_model(model, fields: Sequence[str]) -> str:
    labels = list(fields)
    submat = model.submat
    if isinstance(submat, DichotomousSubstitutionMatrix):
        labels = ["match", "mismatch"] + labels
    width = max(len(label) for label in labels) + 2

    lines = [f"{type(model).__name__}[{model.dtype}]:"]
    if isinstance(submat, DichotomousSubstitutionMatrix):
        lines.append(f"{'match':>{width}} = {submat.match}")
        lines.append(f"{'mismatch':>{width}} = {submat.mismatch}")
    else:
        lines.extend("  " + line for line in str(submat).splitlines())
    for name in fields:
        lines.append(f"{name:>{width}} = {getattr(model, name)}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Affine gap score model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AffineGapScoreModel(AbstractScoreModel):
    """
    Affine gap scoring model.

    A consecutive gap of length k scores gap_open + gap_extend * k.  Both
    gap scores must be non-positive; they are converted to the element
    type of `submat`.

    Attributes
    ----------
    submat : AbstractSubstitutionMatrix
        Substitution scores.
    gap_open : numpy scalar
        Gap opening score (<= 0).
    gap_extend : numpy scalar
        Gap extension score (<= 0).

    Raises
    ------
    ConfigurationError
        If a gap score is positive (or NaN).
    TypeError
        If `submat` is not a substitution matrix, or a gap score cannot be
        represented in its element type.
    """

    submat: AbstractSubstitutionMatrix
    gap_open: np.generic
    gap_extend: np.generic

    def __post_init__(self):
        _check_submat(self.submat)
        for name in ("gap_open", "gap_extend"):
            value = coerce_scalar(getattr(self, name), self.submat.dtype)
            if not value <= 0:
                raise ConfigurationError(f"{name} should be non-positive, got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def from_table(
        cls,
        submat: AbstractSubstitutionMatrix,
        gap_open=None,
        gap_extend=None,
        *,
        gap_open_penalty=None,
        gap_extend_penalty=None,
    ) -> "AffineGapScoreModel":
        """
        Build a model from a substitution matrix and gap arguments.

        Each gap may be given as a score (gap_open=-10) or as a penalty
        (gap_open_penalty=10).  If both are given, the score is used.

        Raises
        ------
        MissingArgumentError
            If neither spelling of a gap argument is given.
        """
        params = GapParameters(
            gap_open=gap_open,
            gap_extend=gap_extend,
            gap_open_penalty=gap_open_penalty,
            gap_extend_penalty=gap_extend_penalty,
        )
        return cls(submat, *params.resolve())

    @classmethod
    def from_matrix(
        cls,
        matrix: ArrayLike,
        gap_open=None,
        gap_extend=None,
        *,
        alphabet_to_index: Optional[Mapping[Hashable, int]] = None,
        gap_open_penalty=None,
        gap_extend_penalty=None,
    ) -> "AffineGapScoreModel":
        """Wrap a raw 2-D score array in a SubstitutionMatrix, then from_table()."""
        return cls.from_table(
            SubstitutionMatrix(matrix, alphabet_to_index),
            gap_open,
            gap_extend,
            gap_open_penalty=gap_open_penalty,
            gap_extend_penalty=gap_extend_penalty,
        )

    @classmethod
    def from_scalars(
        cls,
        *,
        match=None,
        mismatch=None,
        gap_open=None,
        gap_extend=None,
    ) -> "AffineGapScoreModel":
        """
        Shorthand building a dichotomous substitution matrix.

        All four values are promoted to one numeric type first.
        """
        values = _required_scalars(
            ("match", "mismatch", "gap_open", "gap_extend"),
            (match, mismatch, gap_open, gap_extend),
        )
        _, (match, mismatch, gap_open, gap_extend) = promote_scalars(*values)
        return cls(DichotomousSubstitutionMatrix(match, mismatch), gap_open, gap_extend)

    def substitution_score(self, a, b):
        return self.submat.lookup(a, b)

    def gap_score(self, k: int) -> np.generic:
        """Score of a consecutive gap of length k (k >= 1)."""
        if k < 1:
            raise ValueError(f"Gap length must be positive, got k={k}")
        return self.gap_open + self.gap_extend * self.dtype.type(k)

    def __str__(self):
        return _format_model(self, ("gap_open", "gap_extend"))


# ---------------------------------------------------------------------------
# Cost model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CostModel(AbstractCostModel):
    """
    Edit cost model.

    Insertion and deletion costs must be non-negative; they are converted
    to the element type of `submat`.

    Attributes
    ----------
    submat : AbstractSubstitutionMatrix
        Substitution costs.
    insertion : numpy scalar
        Cost of one inserted symbol (>= 0).
    deletion : numpy scalar
        Cost of one deleted symbol (>= 0).

    Raises
    ------
    ConfigurationError
        If an indel cost is negative (or NaN).
    TypeError
        If `submat` is not a substitution matrix, or a cost cannot be
        represented in its element type.
    """

    submat: AbstractSubstitutionMatrix
    insertion: np.generic
    deletion: np.generic

    def __post_init__(self):
        _check_submat(self.submat)
        for name in ("insertion", "deletion"):
            value = coerce_scalar(getattr(self, name), self.submat.dtype)
            if not value >= 0:
                raise ConfigurationError(f"{name} should be non-negative, got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def from_table(
        cls,
        submat: AbstractSubstitutionMatrix,
        insertion=None,
        deletion=None,
    ) -> "CostModel":
        """
        Build a model from a substitution matrix and indel costs.

        Raises
        ------
        MissingArgumentError
            If insertion or deletion is not given.
        """
        params = IndelParameters(insertion=insertion, deletion=deletion)
        return cls(submat, *params.resolve())

    @classmethod
    def from_matrix(
        cls,
        matrix: ArrayLike,
        insertion=None,
        deletion=None,
        *,
        alphabet_to_index: Optional[Mapping[Hashable, int]] = None,
    ) -> "CostModel":
        """Wrap a raw 2-D cost array in a SubstitutionMatrix, then from_table()."""
        return cls.from_table(
            SubstitutionMatrix(matrix, alphabet_to_index), insertion, deletion
        )

    @classmethod
    def from_scalars(
        cls,
        *,
        match=None,
        mismatch=None,
        insertion=None,
        deletion=None,
    ) -> "CostModel":
        """
        Shorthand building a dichotomous substitution matrix.

        All four values are promoted to one numeric type first.
        """
        values = _required_scalars(
            ("match", "mismatch", "insertion", "deletion"),
            (match, mismatch, insertion, deletion),
        )
        _, (match, mismatch, insertion, deletion) = promote_scalars(*values)
        return cls(DichotomousSubstitutionMatrix(match, mismatch), insertion, deletion)

    def substitution_cost(self, a, b):
        return self.submat.lookup(a, b)

    def __str__(self):
        return _format_model(self, ("insertion", "deletion"))


# ---------------------------------------------------------------------------
# Dispatching entry points
# ---------------------------------------------------------------------------

def score_model(submat=None, gap_open=None, gap_extend=None, **kwargs) -> AffineGapScoreModel:
    """
    Build an AffineGapScoreModel from whichever arguments are given.

        score_model(BLOSUM, -10, -1)                      # substitution matrix
        score_model(BLOSUM, gap_open_penalty=10, gap_extend_penalty=1)
        score_model(np_array, -10, -1, alphabet_to_index=a2i)  # raw array
        score_model(match=5, mismatch=-3, gap_open=-2, gap_extend=-1)
    """
    if submat is None:
        return AffineGapScoreModel.from_scalars(gap_open=gap_open, gap_extend=gap_extend, **kwargs)
    if isinstance(submat, AbstractSubstitutionMatrix):
        return AffineGapScoreModel.from_table(submat, gap_open, gap_extend, **kwargs)
    return AffineGapScoreModel.from_matrix(submat, gap_open, gap_extend, **kwargs)


def cost_model(submat=None, insertion=None, deletion=None, **kwargs) -> CostModel:
    """
    Build a CostModel from whichever arguments are given.

        cost_model(submat, 1, 1)
        cost_model(np.ones((128, 128)) - np.eye(128), insertion=.5, deletion=.5)
        cost_model(match=0, mismatch=1, insertion=2, deletion=2)
    """
    if submat is None:
        return CostModel.from_scalars(insertion=insertion, deletion=deletion, **kwargs)
    if isinstance(submat, AbstractSubstitutionMatrix):
        return CostModel.from_table(submat, insertion, deletion, **kwargs)
    return CostModel.from_matrix(submat, insertion, deletion, **kwargs)
