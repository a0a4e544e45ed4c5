"""Unit tests for Algorithm 2 and Algorithm 3."""

import pytest
from tabeval.algorithms.secondary import gold1, glr1, grs1, fun_algorithm2, run_secondary
from tabeval.algorithms.tertiary import fun_algorithm3, run_tertiary
from tabeval.core.outcomes import EvaluationRequest, Ok, TableUnavailable


class TestGold1:
    @pytest.mark.parametrize("x, y, expected", [
        (2.0, 1.0, 2.0),     # x > y, |y| > 0.1
        (1.0, 2.0, 2.0),     # x <= y, |x| > 0.1
        (0.5, 0.5, 1.0),     # x == y, |x| > 0.1
        (0.05, 1.0, 0.15),   # x < y, |x| <= 0.1
        (0.0, 0.0, 0.1),     # |y| <= 1e-10
        (0.5, 0.0, 0.1),     # x > y but y is zero
        (0.05, 0.05, 0.0),   # no branch applies
        (0.5, 0.05, 0.0),    # no branch applies
    ])
    def test_branches(self, x, y, expected):
        assert gold1(x, y) == pytest.approx(expected)


class TestGlr1:
    def test_small_first_argument(self):
        assert glr1(0.5, 9.0) == 0.5

    def test_large_first_argument(self):
        assert glr1(2.0, 9.0) == 9.0
        assert glr1(-1.0, 9.0) == 9.0


class TestFunAlgorithm2:
    """Composed formula with constant tables: Srz is 2 when x > y and 1 otherwise."""
    def test_grs1_at_origin(self, constant_context):
        assert grs1(constant_context, 0.0, 0.0) == pytest.approx(0.14 + 1.83 + 0.83)

    def test_grs1_at_one(self, constant_context):
        assert grs1(constant_context, 1.0, 1.0) == pytest.approx(2 * 0.14 + 1.83 + 2 * 0.83)

    def test_fun_algorithm2(self, constant_context):
        assert fun_algorithm2(constant_context, 1.0, 1.0, 1.0) == pytest.approx(3 * (2 * 0.14 + 1.83 + 2 * 0.83))
        assert fun_algorithm2(constant_context, 0.0, 0.0, 0.0) == 0.0

    def test_run_secondary_success(self, context):
        outcome = run_secondary(context, EvaluationRequest(1.0, 1.0, 1.0))
        assert isinstance(outcome, Ok)
        assert outcome.value == pytest.approx(fun_algorithm2(context, 1.0, 1.0, 1.0))

    def test_run_secondary_missing_table(self, missing_tables_context):
        outcome = run_secondary(missing_tables_context, EvaluationRequest(1.0, 1.0, 1.0))
        assert isinstance(outcome, TableUnavailable)
        assert outcome.request == EvaluationRequest(1.0, 1.0, 1.0)


class TestFunAlgorithm3:
    def test_closed_form(self):
        assert fun_algorithm3(0.5, 2.0, 3.0) == pytest.approx(1.3498 * 3.0 + 2.2362 * 2.0 - 2.348 * 0.5 * 2.0)
        assert fun_algorithm3(0.0, 0.0, 0.0) == 0.0

    def test_run_tertiary_always_succeeds(self):
        for x, y, z in [(0.0, 0.0, 0.0), (1e6, -1e6, 3.0), (-2.5, 0.1, 1e-12)]:
            outcome = run_tertiary(EvaluationRequest(x, y, z))
            assert isinstance(outcome, Ok)
            assert outcome.value == pytest.approx(fun_algorithm3(x, y, z))
