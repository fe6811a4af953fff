"""Scenario specs: one pydantic model per acquisition strategy.

The ``kind`` field discriminates the union so a request can only carry the
fields that make sense for its strategy (no financed flag without a rate).
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class KeepCurrentSpec(BaseModel):
    """Keep the current vehicle, paying a one-time residual/lease buyout."""
    kind: Literal["keep_current"] = "keep_current"
    name: str = "Current car"
    final_payment: float
    consumption_l_per_100km: float
    annual_maintenance: float
    annual_insurance: float

    model_config = {"frozen": True, "allow_inf_nan": False}


class CashPurchaseSpec(BaseModel):
    """Buy a vehicle outright."""
    kind: Literal["cash_purchase"] = "cash_purchase"
    name: str = "Cash purchase"
    price: float
    consumption_l_per_100km: float
    annual_maintenance: float
    annual_insurance: float

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def financed(self) -> bool:
        return False


class FinancedPurchaseSpec(BaseModel):
    """Buy a vehicle with a down payment and a fixed-rate loan for the rest."""
    kind: Literal["financed_purchase"] = "financed_purchase"
    name: str = "Financed purchase"
    price: float
    down_payment: float
    annual_interest_rate_percent: float
    term_years: int
    consumption_l_per_100km: float
    annual_maintenance: float
    annual_insurance: float

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def financed(self) -> bool:
        return True

    @property
    def loan_amount(self) -> float:
        return self.price - self.down_payment


ScenarioSpec = Annotated[
    Union[KeepCurrentSpec, CashPurchaseSpec, FinancedPurchaseSpec],
    Field(discriminator="kind"),
]
