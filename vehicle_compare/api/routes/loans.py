"""Standalone loan payment quote."""
from fastapi import APIRouter, HTTPException, Query

from vehicle_compare.models.comparison import LoanPaymentQuote
from vehicle_compare.services.comparison_service import quote_loan
from vehicle_compare.simulation.validation import InvalidScenarioInput

router = APIRouter(tags=["loans"])


@router.get("/loans/payment", response_model=LoanPaymentQuote)
def get_loan_payment(
    principal: float = Query(..., allow_inf_nan=False, description="Amount borrowed"),
    annual_rate_percent: float = Query(..., allow_inf_nan=False, description="Nominal annual rate, e.g. 6.5"),
    term_years: int = Query(..., description="Loan term in whole years"),
):
    try:
        return quote_loan(principal, annual_rate_percent, term_years)
    except InvalidScenarioInput as e:
        raise HTTPException(status_code=422, detail=e.problems)
