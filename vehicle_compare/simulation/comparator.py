"""Terminal classification of projected capital."""
from __future__ import annotations

from vehicle_compare.models.comparison import ScenarioVerdict


def classify(final_capital: float, starting_savings: float) -> ScenarioVerdict:
    """Negative capital is insolvent; below starting savings is caution.

    Ending exactly at the starting savings counts as sustainable.
    """
    if final_capital < 0:
        return ScenarioVerdict.insolvent
    if final_capital < starting_savings:
        return ScenarioVerdict.caution
    return ScenarioVerdict.sustainable
