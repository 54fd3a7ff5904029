"""MotivateMe API - local service for schedule reminders and coaching audio.

Runs the reminder notifier in the background and exposes the schedule,
coaching and voice endpoints.
Run with: uvicorn coach_api.main:app --port 8100
"""

from contextlib import asynccontextmanager
from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI

import config
from logger import logger
from .schedule_routes import router as schedule_router
from .services import build_services
from .voice_routes import router as voice_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the reminder checks on startup; stop them on shutdown."""
    services = getattr(app.state, "services", None) or build_services()
    app.state.services = services

    scheduler = AsyncIOScheduler()
    services.notifier.start(scheduler)
    scheduler.start()
    logger.info(f"{config.APP_NAME} API started")

    yield

    services.notifier.stop()
    scheduler.shutdown(wait=False)
    logger.info(f"{config.APP_NAME} API stopped")


app = FastAPI(
    title="MotivateMe API",
    description="Schedule reminders and coaching audio",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(schedule_router)
app.include_router(voice_router)


# ============================================================
# Health Check
# ============================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "MotivateMe API",
        "timestamp": datetime.now().isoformat()
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
