import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from attachment_quiz.core.config import Settings, settings as default_settings
from attachment_quiz.core.logging_config import setup_logging
from attachment_quiz.db.session import Database
from attachment_quiz.routers import survey as survey_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    settings: Settings = app.state.settings
    logger.info("Attachment quiz API starting up...")
    database = Database(settings.database_url, echo=settings.database_echo)
    await database.create_all()
    app.state.database = database
    logger.info(f"Classifying with result threshold {settings.result_threshold}")

    yield  # Service runs here

    # Shutdown logic
    logger.info("Attachment quiz API shutting down...")
    await database.dispose()
    app.state.database = None


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed submissions are a bad request, same as a failed count check
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "Invalid input data"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title="Attachment Quiz API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # --- Include Routers ---
    app.include_router(survey_router.router, prefix="/api", tags=["survey"])

    @app.get("/", tags=["Health Check"])
    async def read_root():
        """Root endpoint for basic health check."""
        return {"status": "ok", "message": "Attachment quiz API is running."}

    @app.get("/health/db", tags=["Health Check"])
    async def health_check_db(request: Request):
        """Performs a database connection health check."""
        try:
            result = await request.app.state.database.ping()
            logger.info(f"DB health check successful (SELECT 1 returned: {result})")
            return {"status": "ok", "db_check": result}
        except Exception as e:
            logger.error(f"DB health check failed: {e}", exc_info=True)
            raise HTTPException(status_code=503, detail=f"Database connection error: {e}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
