"""
default.py — Default scoring models

Provides the DNA alphabet and the +5/-5/(-20,-1) scoring scheme used in
examples and tests, both as raw components and as a prebuilt
AffineGapScoreModel, plus the unit-cost (Levenshtein) CostModel.
"""

import numpy as np

from .models import AffineGapScoreModel, CostModel

# DNA alphabet
BASES = np.array(["A", "C", "G", "T"])
ALPHABET_TO_INDEX = {b: i for i, b in enumerate(BASES)}

# Substitution matrix: +5 for match, -5 for mismatch
SCORE_MATRIX = np.full((4, 4), -5.0, dtype=float)
np.fill_diagonal(SCORE_MATRIX, 5.0)

## Affine gap scores
GAP_OPEN = -20.0
GAP_EXTEND = -1.0

DEFAULT_SCORE_MODEL = AffineGapScoreModel.from_matrix(
    SCORE_MATRIX,
    GAP_OPEN,
    GAP_EXTEND,
    alphabet_to_index=ALPHABET_TO_INDEX,
)

# Edit distance: every substitution, insertion and deletion costs 1
LEVENSHTEIN_COST_MODEL = CostModel.from_scalars(
    match=0, mismatch=1, insertion=1, deletion=1,
)


def get_default_scoring():
    """
    Convenience helper returning the default scoring components:

        score_matrix, gap_open, gap_extend, alphabet_to_index
    """
    return (
        SCORE_MATRIX,
        GAP_OPEN,
        GAP_EXTEND,
        ALPHABET_TO_INDEX,
    )
