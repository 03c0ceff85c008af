# =======================================================================================
# checkin/main.py - FastAPI Application Entry Point
# =======================================================================================
import logging
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .config import config
from .api.dependencies import get_db_manager
from .api.routes.setup import router as setup_router
from .api.routes.cards import router as cards_router
from .api.routes.scan import router as scan_router
from .api.routes.staff import router as staff_router
from .database import DatabaseManager, db_manager
from .logging_config import setup_logging
from .models.schemas import ErrorResponse, HealthResponse
from .utils.exceptions import CheckinError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Event Check-in API",
        version="1.0.0",
        description="Attendee registration, RFID tag issue and gate/cafeteria scan decisions",
        debug=config.API_DEBUG,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(setup_router, tags=["setup"])
    app.include_router(cards_router, tags=["cards"])
    app.include_router(scan_router, tags=["scan"])
    app.include_router(staff_router, tags=["staff"])

    @app.exception_handler(CheckinError)
    async def checkin_error_handler(request: Request, exc: CheckinError):
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(msg=exc.message).model_dump(),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "System Error"})

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    def health(db: DatabaseManager = Depends(get_db_manager)):
        try:
            db.ping()
            return HealthResponse(status="ok", database=True)
        except Exception as e:
            logger.warning("Health check failed: %s", e)
            return HealthResponse(status="error", database=False, message=str(e))

    @app.on_event("startup")
    async def startup_event():
        setup_logging()
        db_manager.create_schema()
        logger.info("Event Check-in API started")

    return app


app = create_app()
