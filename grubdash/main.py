"""
GrubDash — FastAPI application entrypoint
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from grubdash.core.config import Settings, get_settings
from grubdash.core.errors import register_exception_handlers
from grubdash.core.ids import IdGenerator, next_id
from grubdash.core.logging import configure_logging
from grubdash.db.repository import InMemoryRepository
from grubdash.db.seed import seed_dishes, seed_orders
from grubdash.middleware.request_log import RequestLogMiddleware
from grubdash.api import dishes, orders, health


def create_app(settings: Settings | None = None, id_generator: IdGenerator = next_id) -> FastAPI:
    """Build an app with its own repositories; each call is fully isolated."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="GrubDash",
        description="Dishes & orders API backed by in-memory collections.",
        version=settings.SERVICE_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.id_generator = id_generator
    app.state.dishes = InMemoryRepository("dish", seed_dishes() if settings.SEED_DATA else ())
    app.state.orders = InMemoryRepository("order", seed_orders() if settings.SEED_DATA else ())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    register_exception_handlers(app)

    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    app.include_router(dishes.router)
    app.include_router(orders.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        return {"service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}

    return app


app = create_app()
