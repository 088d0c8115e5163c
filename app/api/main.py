from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.routers import events, health, metrics, monitors, ui
from app.core.config import settings
from app.core.errors import InvalidObservationError, InvalidWindowError, MonitorSourceError

logger = logging.getLogger(__name__)

app = FastAPI(title="Uptime Status API")

app.include_router(monitors.router)
app.include_router(metrics.router)
app.include_router(events.router)
app.include_router(ui.router)
app.include_router(health.router)


@app.exception_handler(InvalidWindowError)
async def invalid_window_handler(request: Request, exc: InvalidWindowError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})


@app.exception_handler(InvalidObservationError)
async def invalid_observation_handler(request: Request, exc: InvalidObservationError) -> JSONResponse:
    logger.warning("rejected monitor data: %s", exc, extra={"path": request.url.path})
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)})


@app.exception_handler(MonitorSourceError)
async def monitor_source_handler(request: Request, exc: MonitorSourceError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)})


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
