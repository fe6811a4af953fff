"""Loan amortization: fixed monthly payment for a fixed-rate loan."""
from __future__ import annotations


def monthly_payment(principal: float, annual_rate_percent: float, term_years: float) -> float:
    """Standard PMT formula for a fixed-rate amortizing loan.

    PMT = P * r * (1+r)^n / ((1+r)^n - 1), r = annual% / 100 / 12, n = years * 12

    A non-positive principal, rate or term means no financing cost and
    returns 0.0 rather than dividing by zero.
    """
    if principal <= 0 or annual_rate_percent <= 0 or term_years <= 0:
        return 0.0
    r = annual_rate_percent / 100.0 / 12.0
    n = term_years * 12
    try:
        growth = (1.0 + r) ** n
    except OverflowError:
        # growth / (growth - 1) tends to 1
        return principal * r
    return principal * r * growth / (growth - 1.0)
