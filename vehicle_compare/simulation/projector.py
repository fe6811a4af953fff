"""Capital projector: year-by-year net worth over the 10-year horizon.

Capital is split into a liquid pool (absorbs the yearly net cash flow) and an
invested pool (earns the annual return). After each year the liquid pool is
topped up to LIQUIDITY_FLOOR from investments when it runs low.
"""
from __future__ import annotations

from dataclasses import dataclass

from vehicle_compare.models.comparison import ScenarioCost
from vehicle_compare.models.finance import InvestmentPolicy
from vehicle_compare.simulation.cost_model import HORIZON_YEARS

LIQUIDITY_FLOOR = 2000.0


@dataclass
class CapitalState:
    """Working balances for a single projection run."""
    liquid: float
    invested: float

    @property
    def total(self) -> float:
        return self.invested + self.liquid

    def rebalance(self) -> None:
        """Move money from investments into cash until liquid reaches the floor.

        Best effort: when investments cannot cover the gap, everything left is
        moved and liquid stays below the floor.
        """
        if self.liquid >= LIQUIDITY_FLOOR:
            return
        needed = LIQUIDITY_FLOOR - self.liquid
        if self.invested >= needed:
            self.invested -= needed
            self.liquid += needed
        else:
            self.liquid += self.invested
            self.invested = 0.0


def loan_months_in_year(loan_term_months: int, year: int) -> int:
    """Number of loan months falling in [(year-1)*12, year*12)."""
    start_month = (year - 1) * 12
    end_month = year * 12
    return max(0, min(loan_term_months, end_month) - max(0, start_month))


def loan_outflow_for_year(cost: ScenarioCost, year: int) -> float:
    return loan_months_in_year(cost.loan_term_months, year) * cost.monthly_loan_payment


def project(
    starting_savings: float,
    cost: ScenarioCost,
    annual_cash_flow: float,
    policy: InvestmentPolicy,
) -> tuple[float, ...]:
    """Project total capital for years 0..10 (11 points).

    Year 0 is capital right after the initial outlay. Each later year adds the
    net cash flow (baseline minus car costs) to liquid, the investment return
    (on the balance before the update) to invested, then rebalances.
    """
    capital = starting_savings - cost.initial_outlay
    invested = capital * (policy.percent_to_invest / 100.0)
    state = CapitalState(liquid=capital - invested, invested=invested)

    series = [state.total]
    return_rate = policy.annual_return_rate_percent / 100.0

    for year in range(1, HORIZON_YEARS + 1):
        car_out = cost.annual_operating_cost + loan_outflow_for_year(cost, year)
        investment_return = state.invested * return_rate

        state.liquid += annual_cash_flow - car_out
        state.invested += investment_return
        state.rebalance()

        series.append(state.total)

    return tuple(series)
