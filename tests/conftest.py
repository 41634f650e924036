"""
conftest.py — Shared pytest fixtures for the alignmodels test suite

Provides the default DNA scoring components and prebuilt substitution
tables used across test modules.
"""

import pytest
import numpy as np
from numpy.typing import NDArray

from alignmodels.submat import SubstitutionMatrix, DichotomousSubstitutionMatrix


# ---------------------------------------------------------------------------
# Default scoring fixtures (match default.py)
# ---------------------------------------------------------------------------

@pytest.fixture
def default_bases() -> NDArray:
    """Default DNA alphabet."""
    return np.array(["A", "C", "G", "T"])


@pytest.fixture
def alphabet_to_index(default_bases) -> dict:
    """Mapping from base to matrix index."""
    return {str(b): i for i, b in enumerate(default_bases)}


@pytest.fixture
def score_matrix() -> NDArray[np.floating]:
    """Simple match/mismatch matrix: +5 on diagonal, -5 off-diagonal."""
    mat = np.full((4, 4), -5.0, dtype=float)
    np.fill_diagonal(mat, 5.0)
    return mat


@pytest.fixture
def int_score_matrix() -> NDArray[np.integer]:
    """Integer variant of score_matrix."""
    mat = np.full((4, 4), -5, dtype=np.int64)
    np.fill_diagonal(mat, 5)
    return mat


@pytest.fixture
def gap_open() -> float:
    """Gap opening score."""
    return -20.0


@pytest.fixture
def gap_extend() -> float:
    """Gap extension score."""
    return -1.0


@pytest.fixture
def submat(score_matrix, alphabet_to_index) -> SubstitutionMatrix:
    """Float DNA substitution matrix."""
    return SubstitutionMatrix(score_matrix, alphabet_to_index)


@pytest.fixture
def int_submat(int_score_matrix, alphabet_to_index) -> SubstitutionMatrix:
    """Integer DNA substitution matrix."""
    return SubstitutionMatrix(int_score_matrix, alphabet_to_index)


@pytest.fixture
def unit_cost_matrix() -> NDArray[np.floating]:
    """ASCII edit-distance costs: 0 on diagonal, 1 elsewhere."""
    return np.ones((128, 128)) - np.eye(128)


@pytest.fixture
def dichotomous() -> DichotomousSubstitutionMatrix:
    """+5/-3 dichotomous table."""
    return DichotomousSubstitutionMatrix(5, -3)
