"""
autoresponder/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes (event, command)
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import time

from autoresponder.core.config import settings, validate_settings
from autoresponder.core.errors import add_exception_handlers
from autoresponder.core.logging import setup_logging, get_logger
from autoresponder.db.mongo import connect_to_mongo, close_mongo_connection, check_database_health
from autoresponder.services.configuration_store import ConfigurationStore
from autoresponder.services.slack_service import SlackService
from autoresponder.api import commands, events

# Initialize logging first
setup_logging()
logger = get_logger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Owns the MongoDB client and the Slack client for the process lifetime.
    """
    logger.info("🚀 Starting auto-responder...")

    try:
        logger.info("Validating configuration...")
        validate_settings()
        logger.info("✅ Configuration validated")

        logger.info("Connecting to MongoDB...")
        app.state.mongo_client = await connect_to_mongo(settings)
        logger.info("✅ MongoDB connected")

        await ConfigurationStore(app.state.mongo_client, settings).ensure_indexes()

        app.state.slack_service = SlackService.from_settings(settings)
        if not app.state.slack_service.is_configured():
            logger.warning("⚠️ SLACK_BOT_TOKEN not set, auto responses will not be delivered")

        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Debug Mode: {settings.DEBUG}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    logger.info("🛑 Shutting down auto-responder...")

    try:
        await close_mongo_connection(getattr(app.state, "mongo_client", None))
        app.state.mongo_client = None
        logger.info("👋 Auto-responder shut down successfully")

    except Exception as e:
        logger.error(f"Error during shutdown: {str(e)}", exc_info=True)


app = FastAPI(
    title="Slack Auto Responder",
    description="Replies automatically on behalf of users who configured an away message",
    version=APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Slack retries events that are not acknowledged within 3 seconds
    if process_time > 3.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path}",
            extra={"process_time": process_time}
        )

    return response


add_exception_handlers(app)

app.include_router(events.router, prefix=settings.API_PREFIX, tags=["Events"])
app.include_router(commands.router, prefix=settings.API_PREFIX, tags=["Commands"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic info."""
    return {
        "name": "Slack Auto Responder",
        "version": APP_VERSION,
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """
    Health check endpoint.
    Checks database connectivity and Slack client configuration.
    """
    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.ENVIRONMENT,
        "version": APP_VERSION,
        "checks": {}
    }

    db_healthy = await check_database_health(getattr(request.app.state, "mongo_client", None))
    health_status["checks"]["database"] = "healthy" if db_healthy else "unhealthy"
    if not db_healthy:
        health_status["status"] = "degraded"

    slack = getattr(request.app.state, "slack_service", None)
    health_status["checks"]["slack"] = "configured" if slack and slack.is_configured() else "not_configured"

    status_code = 200 if health_status["status"] == "healthy" else 503
    return JSONResponse(content=health_status, status_code=status_code)


@app.get("/ready", tags=["Health"])
async def readiness_check(request: Request):
    """
    Readiness probe - indicates if app is ready to receive traffic.
    """
    if await check_database_health(getattr(request.app.state, "mongo_client", None)):
        return {"status": "ready"}

    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "database_unavailable"}
    )


@app.get("/live", tags=["Health"])
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "autoresponder.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
