from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from vehicle_compare.models.finance import BaselineFinance, DrivingAssumptions, InvestmentPolicy
from vehicle_compare.models.scenario import ScenarioSpec


class ScenarioVerdict(str, Enum):
    """Terminal classification of a scenario's year-10 capital."""
    sustainable = "sustainable"  # ends with at least the starting savings
    caution = "caution"          # lost net worth but stayed solvent
    insolvent = "insolvent"      # capital went negative


class ScenarioCost(BaseModel):
    """Cost breakdown for a single scenario, derived once per request."""
    initial_outlay: float
    monthly_loan_payment: float
    loan_term_months: int
    annual_fuel_cost: float
    annual_fixed_cost: float
    total_cost_10_years: float
    monthly_average_cost: float

    model_config = {"frozen": True}

    @property
    def annual_operating_cost(self) -> float:
        return self.annual_fuel_cost + self.annual_fixed_cost


class ComparisonRequest(BaseModel):
    """Request body for a comparison run; every input is inline."""
    baseline: BaselineFinance
    driving: DrivingAssumptions
    scenarios: list[ScenarioSpec] = Field(min_length=1)
    investment: InvestmentPolicy = InvestmentPolicy()


class ScenarioResult(BaseModel):
    """Projection outcome for a single scenario."""
    name: str
    kind: str
    cost: ScenarioCost
    series: list[float]
    final_capital: int
    capital_change: int
    verdict: ScenarioVerdict


class YearlyCapitalRow(BaseModel):
    """One chart row: rounded capital per scenario, in request order."""
    year: int
    label: str
    capital: list[int]


class ComparisonResult(BaseModel):
    """Full comparison across all requested scenarios."""
    monthly_cash_flow: float
    annual_cash_flow: float
    starting_savings: float
    horizon_years: int
    scenarios: list[ScenarioResult]
    yearly: list[YearlyCapitalRow]
    best_scenario: Optional[str] = None
    investment_policy: InvestmentPolicy
    computed_at: datetime


class LoanPaymentQuote(BaseModel):
    monthly_payment: float
    term_months: int
    total_paid: float
    total_interest: float
