"""Health check endpoint with dependency validation."""

import time
from typing import Any

import aiofiles.os
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.projectdesk.core.db import get_session


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", tags=["health"])
    async def health(request: Request) -> JSONResponse:
        """Check the database and the upload directory."""
        health_status: dict[str, Any] = {
            "status": "healthy",
            "database": "unknown",
            "uploads": "unknown",
            "timestamp": time.time(),
        }

        try:
            async with get_session(request.app.state.engine) as session:
                await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            health_status["database"] = f"unhealthy: {str(e)}"
            health_status["status"] = "unhealthy"

        upload_dir = request.app.state.file_store.base_dir
        if await aiofiles.os.path.isdir(upload_dir):
            health_status["uploads"] = "healthy"
        else:
            health_status["uploads"] = "unhealthy: upload directory missing"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)
