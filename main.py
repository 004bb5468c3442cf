"""
FastAPI Application Entry Point

Integrates:
  - Slash command webhook handler
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from webhook import bot_router
from config import Config

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("Notifications bot starting up...")
    logger.info(f"Bot command: {Config.BOT_COMMAND}")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    if not Config.SLACK_SIGNING_SECRET:
        logger.warning("SLACK_SIGNING_SECRET is not set; every Slack request will be rejected")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Notifications bot shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Notifications Bot API",
    description="Slash commands for managing notification subscriptions",
    version="1.0.0",
    lifespan=lifespan,
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(bot_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    if Config.validate():
        return {"status": "ready"}
    return {"status": "not_ready", "reason": "SLACK_SIGNING_SECRET not configured"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Notifications Bot API",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "slack_webhook": "POST /webhook/slack",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=Config.BOT_PORT,
        reload=Config.ENVIRONMENT == "development",
    )
