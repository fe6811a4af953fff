"""Boundary validation for comparison inputs.

The simulation functions accept any numbers and never raise. This module is
the opt-in gate in front of them: it collects every out-of-range input and
reports them together.
"""
from __future__ import annotations

from collections.abc import Sequence

from vehicle_compare.models.finance import BaselineFinance, DrivingAssumptions, InvestmentPolicy
from vehicle_compare.models.scenario import (
    CashPurchaseSpec,
    FinancedPurchaseSpec,
    KeepCurrentSpec,
    ScenarioSpec,
)


class InvalidScenarioInput(ValueError):
    """Raised when comparison inputs are out of range."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def _check_non_negative(problems: list[str], prefix: str, values: dict[str, float]) -> None:
    for field_name, value in values.items():
        if value < 0:
            problems.append(f"{prefix}.{field_name} must be >= 0 (got {value})")


def scenario_problems(scenario: ScenarioSpec) -> list[str]:
    """Return the problems found in a single scenario spec."""
    prefix = f"scenario '{scenario.name}'"
    problems: list[str] = []
    _check_non_negative(problems, prefix, {
        "consumption_l_per_100km": scenario.consumption_l_per_100km,
        "annual_maintenance": scenario.annual_maintenance,
        "annual_insurance": scenario.annual_insurance,
    })

    if isinstance(scenario, KeepCurrentSpec):
        _check_non_negative(problems, prefix, {"final_payment": scenario.final_payment})
    elif isinstance(scenario, CashPurchaseSpec):
        _check_non_negative(problems, prefix, {"price": scenario.price})
    elif isinstance(scenario, FinancedPurchaseSpec):
        _check_non_negative(problems, prefix, {
            "price": scenario.price,
            "down_payment": scenario.down_payment,
            "annual_interest_rate_percent": scenario.annual_interest_rate_percent,
            "term_years": scenario.term_years,
        })
        if scenario.down_payment > scenario.price:
            problems.append(
                f"{prefix}: down_payment ({scenario.down_payment}) exceeds "
                f"price ({scenario.price})"
            )
    return problems


def validate_request(
    baseline: BaselineFinance,
    driving: DrivingAssumptions,
    scenarios: Sequence[ScenarioSpec],
    policy: InvestmentPolicy,
) -> None:
    """Raise InvalidScenarioInput listing every problem, or return None."""
    problems: list[str] = []

    _check_non_negative(problems, "baseline", {
        "savings": baseline.savings,
        "monthly_income": baseline.monthly_income,
        "monthly_expenses": baseline.monthly_expenses,
    })
    _check_non_negative(problems, "driving", {
        "km_per_year": driving.km_per_year,
        "fuel_price_per_liter": driving.fuel_price_per_liter,
    })

    if not 0.0 <= policy.percent_to_invest <= 100.0:
        problems.append(
            f"investment.percent_to_invest must be between 0 and 100 "
            f"(got {policy.percent_to_invest})"
        )

    if not scenarios:
        problems.append("at least one scenario is required")

    seen: set[str] = set()
    for scenario in scenarios:
        if scenario.name in seen:
            problems.append(f"duplicate scenario name '{scenario.name}'")
        seen.add(scenario.name)
        problems.extend(scenario_problems(scenario))

    if problems:
        raise InvalidScenarioInput(problems)
