"""
FastAPI Application

Main entry point for the running weather web API.
"""

import logging
from typing import Dict

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from runweather.api.deps import get_settings
from runweather.api.models.responses import ErrorResponse
from runweather.api.routes import locations, preferences, recommendations
from runweather.errors import LocationUnavailable, RunWeatherError, WeatherFetchFailed
from runweather.logger import setup_logging

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)
log = logging.getLogger("runweather.api")

# Initialize FastAPI app
app = FastAPI(
    title="Running Weather API",
    description="Clothing, gear and checklist recommendations for runners from current weather",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS configuration - allow frontend to access API
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # React dev server
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(recommendations.router, prefix="/api", tags=["Recommendations"])
app.include_router(locations.router, prefix="/api", tags=["Locations"])
app.include_router(preferences.router, prefix="/api", tags=["Preferences"])

ERROR_STATUS = {
    LocationUnavailable: status.HTTP_404_NOT_FOUND,
    WeatherFetchFailed: status.HTTP_502_BAD_GATEWAY,
}


@app.get("/")
async def root() -> Dict[str, str]:
    """Root endpoint - API information."""
    return {
        "name": "Running Weather API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "runweather-api"}


@app.exception_handler(RunWeatherError)
async def run_weather_exception_handler(request, exc: RunWeatherError):
    """Report provider and location failures as retryable errors."""
    log.warning("%s: %s", type(exc).__name__, exc.detail)
    body = ErrorResponse(
        error=exc.user_message,
        message=exc.detail,
        retryable=exc.retryable,
    )
    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=body.model_dump(exclude_none=True),
    )


# Global exception handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Handle HTTP exceptions with consistent error format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "message": str(exc.detail)},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected exceptions."""
    log.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "runweather.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
