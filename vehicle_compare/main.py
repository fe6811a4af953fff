import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vehicle_compare.config import settings
from vehicle_compare.api.routes import health, comparisons, loans

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: configure logging
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Vehicle Compare starting (strict validation: %s)", settings.STRICT_INPUT_VALIDATION)
    yield
    logger.info("Vehicle Compare shutting down")


app = FastAPI(title="Vehicle Compare", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(comparisons.router, prefix="/api")
app.include_router(loans.router, prefix="/api")
