from fastapi import APIRouter, Depends

from vehicle_compare.api.deps import get_settings
from vehicle_compare.config import Settings
from vehicle_compare.simulation.cost_model import HORIZON_YEARS

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "horizon_years": HORIZON_YEARS,
        "strict_validation": settings.STRICT_INPUT_VALIDATION,
    }
