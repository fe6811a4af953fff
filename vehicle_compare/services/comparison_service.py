"""Comparison orchestration service.

Runs the cost model, capital projection and classification for every scenario
in a request and assembles a ComparisonResult for the presentation layer.
"""
from __future__ import annotations

import logging
import math
from datetime import datetime, timezone

from vehicle_compare.models.comparison import (
    ComparisonRequest,
    ComparisonResult,
    LoanPaymentQuote,
    ScenarioResult,
    YearlyCapitalRow,
)
from vehicle_compare.simulation.amortization import monthly_payment
from vehicle_compare.simulation.comparator import classify
from vehicle_compare.simulation.cost_model import HORIZON_YEARS, build_cost
from vehicle_compare.simulation.projector import project
from vehicle_compare.simulation.validation import InvalidScenarioInput, validate_request

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves towards +infinity."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def run_comparison(request: ComparisonRequest, validate: bool = True) -> ComparisonResult:
    """Run a full comparison.

    For each scenario:
      1. Build the cost breakdown
      2. Project capital for years 0..10
      3. Classify the rounded year-10 capital against starting savings
    Then pivot the series into per-year chart rows.
    """
    if validate:
        try:
            validate_request(request.baseline, request.driving, request.scenarios, request.investment)
        except InvalidScenarioInput as e:
            logger.warning("Rejected comparison input: %s", e)
            raise

    baseline = request.baseline
    annual_cash_flow = baseline.annual_cash_flow

    results: list[ScenarioResult] = []
    for scenario in request.scenarios:
        cost = build_cost(scenario, request.driving)
        series = project(baseline.savings, cost, annual_cash_flow, request.investment)
        if not all(math.isfinite(value) for value in series):
            logger.warning("Scenario %r projected a non-finite capital: %s", scenario.name, series)
            raise InvalidScenarioInput([
                f"scenario '{scenario.name}': projected capital is not a finite number; "
                "inputs are too large"
            ])
        final_capital = round_half_up(series[-1])
        verdict = classify(final_capital, baseline.savings)
        logger.debug(
            "Scenario %r: outlay=%.2f loan_pmt=%.2f final=%d verdict=%s",
            scenario.name, cost.initial_outlay, cost.monthly_loan_payment,
            final_capital, verdict.value,
        )
        results.append(ScenarioResult(
            name=scenario.name,
            kind=scenario.kind,
            cost=cost,
            series=list(series),
            final_capital=final_capital,
            capital_change=round_half_up(final_capital - baseline.savings),
            verdict=verdict,
        ))

    yearly = [
        YearlyCapitalRow(
            year=year,
            label=f"Year {year}",
            capital=[round_half_up(r.series[year]) for r in results],
        )
        for year in range(HORIZON_YEARS + 1)
    ]

    # max() keeps the first of equal values
    best = max(results, key=lambda r: r.final_capital).name if results else None

    logger.info(
        "Comparison complete: %d scenarios, verdicts=%s, best=%s",
        len(results), [r.verdict.value for r in results], best,
    )

    return ComparisonResult(
        monthly_cash_flow=baseline.monthly_cash_flow,
        annual_cash_flow=annual_cash_flow,
        starting_savings=baseline.savings,
        horizon_years=HORIZON_YEARS,
        scenarios=results,
        yearly=yearly,
        best_scenario=best,
        investment_policy=request.investment,
        computed_at=datetime.now(timezone.utc),
    )


def quote_loan(principal: float, annual_rate_percent: float, term_years: int) -> LoanPaymentQuote:
    """Monthly payment plus lifetime totals for a single fixed-rate loan."""
    payment = monthly_payment(principal, annual_rate_percent, term_years)
    term_months = max(term_years, 0) * 12
    total_paid = payment * term_months if payment > 0 else 0.0
    if not math.isfinite(total_paid):
        raise InvalidScenarioInput(["loan payment is not a finite number; inputs are too large"])
    return LoanPaymentQuote(
        monthly_payment=round(payment, 2),
        term_months=term_months,
        total_paid=round(total_paid, 2),
        total_interest=round(total_paid - principal, 2) if payment > 0 else 0.0,
    )
