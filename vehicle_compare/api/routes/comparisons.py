from fastapi import APIRouter, Depends, HTTPException

from vehicle_compare.api.deps import get_settings
from vehicle_compare.config import Settings
from vehicle_compare.models.comparison import ComparisonRequest, ComparisonResult
from vehicle_compare.models.scenario import ScenarioSpec
from vehicle_compare.services.comparison_service import run_comparison
from vehicle_compare.simulation.presets import default_request, get_preset, list_preset_names
from vehicle_compare.simulation.validation import InvalidScenarioInput

router = APIRouter(tags=["comparisons"])


@router.post("/comparisons/run", response_model=ComparisonResult)
def run_comparison_endpoint(
    request: ComparisonRequest,
    settings: Settings = Depends(get_settings),
):
    """Run a 10-year comparison on inline inputs.

    Returns per-scenario costs, capital series and verdicts, plus
    per-year rows for charting.
    """
    try:
        return run_comparison(request, validate=settings.STRICT_INPUT_VALIDATION)
    except InvalidScenarioInput as e:
        raise HTTPException(status_code=422, detail=e.problems)


@router.get("/comparisons/defaults", response_model=ComparisonRequest)
def get_default_request():
    """Reference inputs the dashboard starts from."""
    return default_request()


@router.get("/comparisons/presets", response_model=list[str])
def get_presets():
    return list_preset_names()


@router.get("/comparisons/presets/{name}", response_model=ScenarioSpec)
def get_preset_detail(name: str):
    preset = get_preset(name)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Preset '{name}' not found")
    return preset
