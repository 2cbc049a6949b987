"""
Main FastAPI application for the project suggestion engine
"""
from contextlib import asynccontextmanager
from datetime import datetime
from fastapi import FastAPI, Request
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from suggest_engine.config import settings, get_settings, validate_required_config
from suggest_engine.logging_config import logger
from suggest_engine.routers import suggest_projects
from suggest_engine.routers.suggest_projects import error_response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting suggestion engine", environment=settings.ENVIRONMENT)

    # Validate required configuration
    validate_required_config()

    # Initialize Sentry if DSN provided
    if settings.SENTRY_DSN:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.SENTRY_ENVIRONMENT,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            integrations=[FastApiIntegration()],
        )
        logger.info("Sentry initialized")

    logger.info(
        "Suggestion engine started",
        model=settings.AI_MODEL,
        gateway_timeout=settings.gateway_timeout
    )

    yield

    logger.info("Shutting down suggestion engine")


# Create FastAPI app
app = FastAPI(
    title="Project Suggestion Engine",
    description="AI-powered project idea suggestions for students",
    version="1.0.0",
    lifespan=lifespan
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Project Suggestion Engine",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check, reports whether the gateway credential is present"""
    current = get_settings()
    configured = bool(current.LOVABLE_API_KEY)
    return {
        "status": "healthy" if configured else "degraded",
        "version": "1.0.0",
        "timestamp": datetime.utcnow().isoformat(),
        "checks": {
            "ai_gateway": {
                "configured": configured,
                "status": "ok" if configured else "missing"
            }
        }
    }


# Bare path for direct hosting, platform path for function-style invocation
app.include_router(suggest_projects.router, tags=["Project Suggestions"])
app.include_router(suggest_projects.router, prefix="/functions/v1", tags=["Project Suggestions"])


# Error handlers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with Sentry integration"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        path=request.url.path,
        exc_info=True
    )

    if settings.SENTRY_DSN:
        sentry_sdk.capture_exception(exc)

    return error_response(str(exc) or "Unknown error", 500)


if __name__ == "__main__":
    import uvicorn
    # Only enable reload in development
    reload_enabled = settings.ENVIRONMENT == "development" or settings.DEBUG
    uvicorn.run("suggest_engine.main:app", host="0.0.0.0", port=8001, reload=reload_enabled)
