import math

import pytest

from src.models.cashflow import CashFlowSeries, IRRResult, ResultStatus


class TestCashFlowSeries:
    def test_differences(self):
        series = CashFlowSeries([100, 0, 5], [0, 60, 70])
        assert series.differences() == [-100.0, 60.0, 65.0]

    def test_degree(self):
        series = CashFlowSeries([100, 0, 5], [0, 60, 70])
        assert series.periods == 3
        assert series.degree == 2

    def test_stores_tuples(self):
        series = CashFlowSeries([100, 0], [0, 110])
        assert series.spending == (100.0, 0.0)
        assert series.income == (0.0, 110.0)

    def test_unequal_lengths(self):
        with pytest.raises(ValueError, match="Number of income and outcome is not equal."):
            CashFlowSeries([1, 2], [1, 2, 3])

    def test_too_short(self):
        with pytest.raises(ValueError, match="less than 2"):
            CashFlowSeries([], [])

    @pytest.mark.parametrize("spending,income", [
        ([math.nan, 0], [0, 110]),
        ([100, 0], [0, math.inf]),
        ([100, -math.inf], [0, 110]),
    ])
    def test_non_finite(self, spending, income):
        with pytest.raises(ValueError, match="finite"):
            CashFlowSeries(spending, income)


class TestIRRResult:
    def test_defaults(self):
        result = IRRResult()
        assert result.ok
        assert math.isnan(result.irr)
        assert result.roots == []

    def test_failed(self):
        assert not IRRResult(status=ResultStatus.FAILED).ok
