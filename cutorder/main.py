from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import math

from .config import Settings, settings as default_settings
from .jobs import JobBuilder
from .pricing_engine import PricingConfig, PricingEngine
from .routers import inventory, jobs, measurements, pricing

logger = logging.getLogger("cutorder")


def _json_float(value: float):
    """Strict JSON has no NaN or Infinity; echo them back as strings."""
    return value if math.isfinite(value) else str(value)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(), custom_encoder={float: _json_float})},
    )


def create_app(settings: Settings = None) -> FastAPI:
    """
    Build the app and its service objects. The pricing engine and job builder
    live on app.state and reach the routes through deps.py.
    """
    settings = settings or default_settings
    logger.setLevel(settings.LOG_LEVEL)

    app = FastAPI(
        title="Cut & Order Manager",
        description=f"Cut pricing, measurement and stock checks for {settings.SHOP_NAME}",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    pricing_engine = PricingEngine(PricingConfig.from_settings(settings))
    app.state.settings = settings
    app.state.pricing_engine = pricing_engine
    app.state.job_builder = JobBuilder(pricing_engine)
    logger.info("Pricing config: %s", pricing_engine.config)

    # API routes
    app.include_router(measurements.router, prefix="/api")
    app.include_router(pricing.router, prefix="/api")
    app.include_router(inventory.router, prefix="/api")
    app.include_router(jobs.router, prefix="/api")

    @app.get("/health")
    def health():
        return {"status": "ok", "app": "cut-order-manager"}

    return app


app = create_app()
