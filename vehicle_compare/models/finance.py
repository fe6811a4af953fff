from pydantic import BaseModel


class BaselineFinance(BaseModel):
    """Household savings plus the fixed monthly income/expense baseline."""
    savings: float
    monthly_income: float
    monthly_expenses: float

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def monthly_cash_flow(self) -> float:
        return self.monthly_income - self.monthly_expenses

    @property
    def annual_cash_flow(self) -> float:
        return self.monthly_cash_flow * 12


class DrivingAssumptions(BaseModel):
    """Usage assumptions shared by every scenario."""
    km_per_year: float
    fuel_price_per_liter: float

    model_config = {"frozen": True, "allow_inf_nan": False}


class InvestmentPolicy(BaseModel):
    percent_to_invest: float = 50.0
    annual_return_rate_percent: float = 4.0
    annual_inflation_rate_percent: float = 3.0  # display only, never applied

    model_config = {"frozen": True, "allow_inf_nan": False}
