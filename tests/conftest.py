"""Canonical cash-flow fixtures used across tests.

Reference scenario: spend 100 today, receive 110 in one period = 10% IRR.
"""

import pytest


@pytest.fixture
def reference_spending() -> list[float]:
    return [100.0, 0.0]


@pytest.fixture
def reference_income() -> list[float]:
    return [0.0, 110.0]


@pytest.fixture
def five_year_cash_flows() -> list[float]:
    """Invest 100K, 10K/yr for four years, 130K in year five."""
    return [-100000.0, 10000.0, 10000.0, 10000.0, 10000.0, 130000.0]


@pytest.fixture
def five_year_spending(five_year_cash_flows) -> list[float]:
    return [-cf if cf < 0 else 0.0 for cf in five_year_cash_flows]


@pytest.fixture
def five_year_income(five_year_cash_flows) -> list[float]:
    return [cf if cf > 0 else 0.0 for cf in five_year_cash_flows]
