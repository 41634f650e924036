"""
params.py — named gap/indel arguments and their resolution

Gap scores can be given directly (gap_open=-10) or as non-negative
penalties (gap_open_penalty=10, stored as -10).  The containers below hold
every accepted spelling so that resolution is a single explicit function
instead of ad hoc keyword probing.

When a direct score and its penalty spelling are both given, the direct
score wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from .errors import MissingArgumentError
from .promote import is_numeric_scalar


def resolve_first(candidates: Sequence[Optional[Any]], names: Sequence[str]) -> Tuple[int, Any]:
    """
    Return (position, value) of the first candidate that is not None.

    Parameters
    ----------
    candidates : sequence
        Values in priority order; None marks an absent argument.
    names : sequence of str
        Argument names matching `candidates`, used in the error message.

    Raises
    ------
    MissingArgumentError
        If every candidate is None.
    """
    for pos, value in enumerate(candidates):
        if value is not None:
            return pos, value
    raise MissingArgumentError(f"{' or '.join(names)} argument should be passed")


@dataclass(frozen=True)
class GapParameters:
    """
    Affine gap arguments in any accepted spelling.

    Attributes
    ----------
    gap_open, gap_extend : number, optional
        Gap scores (non-positive).
    gap_open_penalty, gap_extend_penalty : number, optional
        Gap penalties (non-negative magnitudes); p resolves to -p.
    """

    gap_open: Optional[Any] = None
    gap_extend: Optional[Any] = None
    gap_open_penalty: Optional[Any] = None
    gap_extend_penalty: Optional[Any] = None

    def resolve(self) -> Tuple[Any, Any]:
        """Return (gap_open, gap_extend) as gap scores."""
        return (
            _resolve_gap(self.gap_open, self.gap_open_penalty, "gap_open"),
            _resolve_gap(self.gap_extend, self.gap_extend_penalty, "gap_extend"),
        )


def _resolve_gap(score, penalty, name: str):
    pos, value = resolve_first((score, penalty), (name, f"{name}_penalty"))
    if pos == 0:
        return value
    if not is_numeric_scalar(value):
        raise TypeError(
            f"{name}_penalty must be an integer or floating-point scalar, got {value!r}"
        )
    # unsigned numpy scalars wrap around on negation
    return -(value.item() if isinstance(value, np.generic) else value)


@dataclass(frozen=True)
class IndelParameters:
    """Insertion and deletion costs (non-negative); no aliases."""

    insertion: Optional[Any] = None
    deletion: Optional[Any] = None

    def resolve(self) -> Tuple[Any, Any]:
        """Return (insertion, deletion)."""
        return (
            resolve_first((self.insertion,), ("insertion",))[1],
            resolve_first((self.deletion,), ("deletion",))[1],
        )
