"""
test_cost_model.py — Tests for CostModel construction and validation
"""

import pytest
import numpy as np

from alignmodels import (
    CostModel,
    AbstractCostModel,
    ConfigurationError,
    MissingArgumentError,
    SubstitutionMatrix,
    DichotomousSubstitutionMatrix,
    cost_model,
)


class TestScalarShorthand:

    def test_scenario(self):
        model = CostModel.from_scalars(match=0, mismatch=1, insertion=2, deletion=2)
        for x in "ACGT":
            assert model.substitution_cost(x, x) == 0
        for x, y in [("A", "C"), ("G", "T")]:
            assert model.substitution_cost(x, y) == 1
        assert model.insertion == 2
        assert model.deletion == 2
        assert isinstance(model.submat, DichotomousSubstitutionMatrix)
        assert isinstance(model, AbstractCostModel)

    def test_promotes_to_float(self):
        model = CostModel.from_scalars(match=0, mismatch=1, insertion=0.5, deletion=2)
        assert model.dtype == np.float64
        assert model.deletion.dtype == np.float64
        assert model.insertion == 0.5

    @pytest.mark.parametrize("missing", ["match", "mismatch", "insertion", "deletion"])
    def test_missing_argument(self, missing):
        kwargs = dict(match=0, mismatch=1, insertion=2, deletion=2)
        del kwargs[missing]
        with pytest.raises(MissingArgumentError, match=missing):
            CostModel.from_scalars(**kwargs)

    def test_negative_cost(self):
        with pytest.raises(ConfigurationError, match="deletion"):
            CostModel.from_scalars(match=0, mismatch=1, insertion=2, deletion=-1)


class TestFromTable:

    @pytest.mark.parametrize("insertion,deletion", [(0, 0), (1, 1), (0.5, 0.5), (2, 0)])
    def test_accepts_non_negative(self, unit_cost_matrix, insertion, deletion):
        model = CostModel.from_table(SubstitutionMatrix(unit_cost_matrix), insertion, deletion)
        assert model.insertion == insertion
        assert model.deletion == deletion
        assert model.dtype == np.float64

    @pytest.mark.parametrize("insertion,deletion,field", [
        (-1, 1, "insertion"),
        (1, -0.5, "deletion"),
        (float("nan"), 1, "insertion"),
    ])
    def test_rejects_negative(self, unit_cost_matrix, insertion, deletion, field):
        with pytest.raises(ConfigurationError, match=field):
            CostModel.from_table(SubstitutionMatrix(unit_cost_matrix), insertion, deletion)

    def test_named_arguments(self, unit_cost_matrix):
        table = SubstitutionMatrix(unit_cost_matrix)
        assert CostModel.from_table(table, insertion=1, deletion=2) == CostModel.from_table(table, 1, 2)

    def test_missing(self, unit_cost_matrix):
        table = SubstitutionMatrix(unit_cost_matrix)
        with pytest.raises(MissingArgumentError, match="insertion"):
            CostModel.from_table(table, deletion=1)
        with pytest.raises(MissingArgumentError, match="deletion"):
            CostModel.from_table(table, insertion=1)

    def test_no_penalty_aliases(self, unit_cost_matrix):
        with pytest.raises(TypeError):
            CostModel.from_table(SubstitutionMatrix(unit_cost_matrix), insertion_penalty=1, deletion=1)

    def test_lossy_cost_rejected(self):
        table = SubstitutionMatrix(np.ones((4, 4), dtype=np.int64) - np.eye(4, dtype=np.int64))
        with pytest.raises(TypeError):
            CostModel.from_table(table, 0.5, 1)


class TestFromMatrix:

    def test_edit_distance_over_text(self, unit_cost_matrix):
        model = CostModel.from_matrix(unit_cost_matrix, insertion=.5, deletion=.5)
        assert model.substitution_cost("i", "i") == 0.0
        assert model.substitution_cost("i", "e") == 1.0
        assert model.insertion == 0.5

    def test_with_alphabet(self, alphabet_to_index):
        costs = np.ones((4, 4)) - np.eye(4)
        model = CostModel.from_matrix(costs, 1, 1, alphabet_to_index=alphabet_to_index)
        assert model.substitution_cost("A", "A") == 0.0
        assert model.substitution_cost("A", "G") == 1.0

    def test_matches_from_table(self, unit_cost_matrix):
        assert CostModel.from_matrix(unit_cost_matrix, 1, 2) == \
            CostModel.from_table(SubstitutionMatrix(unit_cost_matrix), 1, 2)


class TestValueSemantics:

    def test_idempotent(self):
        a = CostModel.from_scalars(match=0, mismatch=1, insertion=2, deletion=2)
        b = CostModel.from_scalars(match=0, mismatch=1, insertion=2, deletion=2)
        assert a == b
        assert hash(a) == hash(b)

    def test_frozen(self):
        model = CostModel.from_scalars(match=0, mismatch=1, insertion=2, deletion=2)
        with pytest.raises(AttributeError):
            model.insertion = 0


class TestCostModelDispatch:

    def test_scalars(self):
        assert cost_model(match=0, mismatch=1, insertion=2, deletion=2) == \
            CostModel.from_scalars(match=0, mismatch=1, insertion=2, deletion=2)

    def test_table(self, unit_cost_matrix):
        table = SubstitutionMatrix(unit_cost_matrix)
        assert cost_model(table, 1, 1) == CostModel.from_table(table, 1, 1)

    def test_raw_matrix(self, unit_cost_matrix):
        model = cost_model(unit_cost_matrix, insertion=.5, deletion=.5)
        assert isinstance(model.submat, SubstitutionMatrix)
        assert model.deletion == 0.5
