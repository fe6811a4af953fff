"""Tests for the capital projector: splitting, loan overlap, rebalancing."""
import pytest

from vehicle_compare.models.comparison import ScenarioCost
from vehicle_compare.models.finance import InvestmentPolicy
from vehicle_compare.simulation.projector import (
    LIQUIDITY_FLOOR,
    CapitalState,
    loan_months_in_year,
    loan_outflow_for_year,
    project,
)


def _make_cost(**overrides) -> ScenarioCost:
    defaults = dict(
        initial_outlay=0.0,
        monthly_loan_payment=0.0,
        loan_term_months=0,
        annual_fuel_cost=0.0,
        annual_fixed_cost=0.0,
        total_cost_10_years=0.0,
        monthly_average_cost=0.0,
    )
    defaults.update(overrides)
    return ScenarioCost(**defaults)


def _make_policy(**overrides) -> InvestmentPolicy:
    defaults = dict(percent_to_invest=50.0, annual_return_rate_percent=4.0)
    defaults.update(overrides)
    return InvestmentPolicy(**defaults)


# --- Worked example: keep the current car ---


def test_keep_current_year_zero_and_one():
    cost = _make_cost(initial_outlay=20_000.0, annual_fuel_cost=800.0, annual_fixed_cost=1_200.0)
    series = project(80_000.0, cost, 3_000.0, _make_policy())
    assert series[0] == pytest.approx(60_000.0)
    # liquid 30000 + 1000, invested 30000 * 1.04
    assert series[1] == pytest.approx(62_200.0)
    # liquid 32000, invested 31200 * 1.04
    assert series[2] == pytest.approx(64_448.0)


def test_series_has_eleven_points():
    series = project(10_000.0, _make_cost(), 0.0, _make_policy())
    assert len(series) == 11


def test_series_is_immutable():
    series = project(10_000.0, _make_cost(), 0.0, _make_policy())
    assert isinstance(series, tuple)


def test_inflation_does_not_affect_projection():
    cost = _make_cost(initial_outlay=5_000.0, annual_fuel_cost=900.0)
    low = project(40_000.0, cost, 2_400.0, _make_policy(annual_inflation_rate_percent=0.0))
    high = project(40_000.0, cost, 2_400.0, _make_policy(annual_inflation_rate_percent=12.0))
    assert low == high


# --- Loan overlap ---


def test_loan_months_five_year_loan():
    months = [loan_months_in_year(60, year) for year in range(1, 11)]
    assert months == [12, 12, 12, 12, 12, 0, 0, 0, 0, 0]


def test_loan_months_partial_year():
    months = [loan_months_in_year(30, year) for year in range(1, 5)]
    assert months == [12, 12, 6, 0]


def test_loan_months_beyond_horizon():
    months = [loan_months_in_year(150, year) for year in range(1, 11)]
    assert months == [12] * 10


def test_loan_months_no_loan():
    assert all(loan_months_in_year(0, year) == 0 for year in range(1, 11))


def test_loan_outflow_for_year():
    cost = _make_cost(monthly_loan_payment=250.0, loan_term_months=18)
    assert loan_outflow_for_year(cost, 1) == pytest.approx(3_000.0)
    assert loan_outflow_for_year(cost, 2) == pytest.approx(1_500.0)
    assert loan_outflow_for_year(cost, 3) == 0.0


def test_loan_payments_reduce_capital_only_during_term():
    cost = _make_cost(monthly_loan_payment=100.0, loan_term_months=24)
    series = project(50_000.0, cost, 0.0, _make_policy(percent_to_invest=0.0))
    assert series[1] == pytest.approx(48_800.0)
    assert series[2] == pytest.approx(47_600.0)
    assert series[3] == pytest.approx(47_600.0)
    assert series[10] == pytest.approx(47_600.0)


# --- Rebalancing ---


def test_rebalance_tops_up_liquid_from_investments():
    state = CapitalState(liquid=500.0, invested=10_000.0)
    state.rebalance()
    assert state.liquid == pytest.approx(LIQUIDITY_FLOOR)
    assert state.invested == pytest.approx(8_500.0)


def test_rebalance_drains_investments_when_insufficient():
    state = CapitalState(liquid=-5_000.0, invested=1_000.0)
    state.rebalance()
    assert state.liquid == pytest.approx(-4_000.0)
    assert state.invested == 0.0


def test_rebalance_noop_at_floor():
    state = CapitalState(liquid=LIQUIDITY_FLOOR, invested=5.0)
    state.rebalance()
    assert state.liquid == LIQUIDITY_FLOOR
    assert state.invested == 5.0


def test_rebalance_preserves_total():
    state = CapitalState(liquid=-300.0, invested=7_000.0)
    before = state.total
    state.rebalance()
    assert state.total == pytest.approx(before)


def test_fully_invested_capital_moves_to_cash_floor():
    series = project(10_000.0, _make_cost(), 0.0, _make_policy(percent_to_invest=100.0,
                                                               annual_return_rate_percent=0.0))
    assert series == pytest.approx((10_000.0,) * 11)


# --- Insolvency ---


def test_negative_starting_capital_is_not_clamped():
    cost = _make_cost(initial_outlay=50_000.0)
    series = project(0.0, cost, 0.0, _make_policy(annual_return_rate_percent=0.0))
    assert series[0] == pytest.approx(-50_000.0)
    assert series[1] == pytest.approx(-50_000.0)


def test_running_deficit_goes_negative():
    cost = _make_cost(annual_fuel_cost=2_000.0, annual_fixed_cost=1_000.0)
    series = project(5_000.0, cost, 0.0, _make_policy(annual_return_rate_percent=0.0))
    assert series[10] == pytest.approx(5_000.0 - 30_000.0)
    assert series[10] < 0


def test_floor_is_fixed_at_two_thousand():
    assert LIQUIDITY_FLOOR == 2000.0
    state = CapitalState(liquid=1_999.0, invested=100.0)
    state.rebalance()
    assert state.liquid == pytest.approx(2_000.0)
    assert state.invested == pytest.approx(99.0)
