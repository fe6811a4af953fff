"""Preset definitions: the reference dashboard inputs.

Maps preset names to scenario specs, plus the baseline, driving and
investment figures the dashboard starts from.
"""
from __future__ import annotations

from vehicle_compare.models.comparison import ComparisonRequest
from vehicle_compare.models.finance import BaselineFinance, DrivingAssumptions, InvestmentPolicy
from vehicle_compare.models.scenario import (
    CashPurchaseSpec,
    FinancedPurchaseSpec,
    KeepCurrentSpec,
    ScenarioSpec,
)

_PRESETS: dict[str, ScenarioSpec] = {
    "current_car": KeepCurrentSpec(
        name="Current car",
        final_payment=20_000.0,
        consumption_l_per_100km=5.0,
        annual_maintenance=600.0,
        annual_insurance=600.0,
    ),
    "option_a": CashPurchaseSpec(
        name="Option A (economy)",
        price=18_000.0,
        consumption_l_per_100km=6.5,
        annual_maintenance=400.0,
        annual_insurance=500.0,
    ),
    "option_b": FinancedPurchaseSpec(
        name="Option B (premium)",
        price=28_000.0,
        down_payment=8_000.0,
        annual_interest_rate_percent=5.5,
        term_years=6,
        consumption_l_per_100km=4.5,
        annual_maintenance=300.0,
        annual_insurance=700.0,
    ),
}


def get_preset(name: str) -> ScenarioSpec | None:
    """Return the named preset, or None if unknown."""
    return _PRESETS.get(name)


def list_preset_names() -> list[str]:
    """Return all available preset names."""
    return list(_PRESETS.keys())


def default_request() -> ComparisonRequest:
    """Build the reference comparison: three presets against the default baseline."""
    return ComparisonRequest(
        baseline=BaselineFinance(savings=80_000.0, monthly_income=1_050.0, monthly_expenses=800.0),
        driving=DrivingAssumptions(km_per_year=10_000.0, fuel_price_per_liter=1.6),
        scenarios=list(_PRESETS.values()),
        investment=InvestmentPolicy(
            percent_to_invest=50.0,
            annual_return_rate_percent=4.0,
            annual_inflation_rate_percent=3.0,
        ),
    )
