"""Scenario cost model: initial outlay, financing schedule and running costs.

Produces a ScenarioCost for one scenario spec. The 10-year totals are a quick
reference figure for display; the capital projector works from the per-year
components instead.
"""
from __future__ import annotations

from vehicle_compare.models.comparison import ScenarioCost
from vehicle_compare.models.finance import DrivingAssumptions
from vehicle_compare.models.scenario import (
    CashPurchaseSpec,
    FinancedPurchaseSpec,
    KeepCurrentSpec,
    ScenarioSpec,
)
from vehicle_compare.simulation.amortization import monthly_payment

HORIZON_YEARS = 10
HORIZON_MONTHS = HORIZON_YEARS * 12


def annual_fuel_cost(scenario: ScenarioSpec, driving: DrivingAssumptions) -> float:
    return (
        driving.km_per_year / 100.0
        * scenario.consumption_l_per_100km
        * driving.fuel_price_per_liter
    )


def build_cost(scenario: ScenarioSpec, driving: DrivingAssumptions) -> ScenarioCost:
    """Derive the cost breakdown for a scenario under shared driving assumptions."""
    fuel = annual_fuel_cost(scenario, driving)
    fixed = scenario.annual_maintenance + scenario.annual_insurance

    loan_payment = 0.0
    loan_months = 0
    if isinstance(scenario, KeepCurrentSpec):
        initial_outlay = scenario.final_payment
    elif isinstance(scenario, CashPurchaseSpec):
        initial_outlay = scenario.price
    elif isinstance(scenario, FinancedPurchaseSpec):
        initial_outlay = scenario.down_payment
        # A down payment above the price gives a negative loan amount; the
        # amortizer treats that as no loan.
        loan_payment = monthly_payment(
            scenario.loan_amount,
            scenario.annual_interest_rate_percent,
            scenario.term_years,
        )
        loan_months = scenario.term_years * 12
    else:
        raise TypeError(f"Unsupported scenario type: {type(scenario).__name__}")

    total = initial_outlay + loan_payment * loan_months + (fuel + fixed) * HORIZON_YEARS

    return ScenarioCost(
        initial_outlay=initial_outlay,
        monthly_loan_payment=loan_payment,
        loan_term_months=loan_months,
        annual_fuel_cost=fuel,
        annual_fixed_cost=fixed,
        total_cost_10_years=total,
        monthly_average_cost=total / HORIZON_MONTHS,
    )
