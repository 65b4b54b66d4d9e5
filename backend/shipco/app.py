import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shipco.config import Settings
from shipco.database import Base, build_engine, build_session_factory
from shipco.errors import ShipcoError

# Import all models so they are registered with Base.metadata before create_all
import shipco.models  # noqa: F401

from shipco.api.routes import app_routes, auth, quotes, shipments, tracking

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings.seed_demo_data:
        try:
            from shipco.seed import seed_all_if_empty
            seed_all_if_empty(app.state.session_factory)
        except SQLAlchemyError as e:
            logger.warning("Seed skipped (non-fatal): %s", e)
    yield
    app.state.engine.dispose()


async def shipco_error_handler(request: Request, exc: ShipcoError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.code})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal_error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    engine = build_engine(settings)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(title="ShipCo Tracking API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=not settings.cors_allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ShipcoError, shipco_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    app.include_router(app_routes.router)
    app.include_router(auth.router)
    app.include_router(tracking.router)
    app.include_router(quotes.router)
    app.include_router(shipments.router)

    return app
