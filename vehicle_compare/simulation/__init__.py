"""Simulation engine: amortization, scenario costs, capital projection, verdicts."""
from vehicle_compare.simulation.amortization import monthly_payment
from vehicle_compare.simulation.cost_model import HORIZON_YEARS, build_cost
from vehicle_compare.simulation.projector import LIQUIDITY_FLOOR, CapitalState, project
from vehicle_compare.simulation.comparator import classify
from vehicle_compare.simulation.presets import default_request, get_preset, list_preset_names
from vehicle_compare.simulation.validation import InvalidScenarioInput, validate_request

__all__ = [
    "HORIZON_YEARS",
    "LIQUIDITY_FLOOR",
    "CapitalState",
    "InvalidScenarioInput",
    "build_cost",
    "classify",
    "default_request",
    "get_preset",
    "list_preset_names",
    "monthly_payment",
    "project",
    "validate_request",
]
