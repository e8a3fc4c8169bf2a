"""
FastAPI backend - Mock Flight API.

Serves:
- REST API for the simulated flight's current position
- Health endpoint
- Prometheus metrics endpoint
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from simulator import FlightSimulator, load_flight_from_env
from models import FlightInfo
from metrics import get_metrics, HTTP_REQUESTS
from contracts.constants import (
    API_PATH_FLIGHT_INFO,
    API_PATH_HEALTH,
    API_PATH_METRICS,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Configuration
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "8080"))
CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")


# Global state
simulator: FlightSimulator = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global simulator

    logger.info("=" * 50)
    logger.info("Mock Flight API - Starting")
    logger.info("=" * 50)

    # Departure is the moment the service starts
    flight = load_flight_from_env()
    simulator = FlightSimulator(flight)
    logger.info(
        f"Simulating flight {flight.id} {flight.origin}->{flight.destination} "
        f"over {flight.duration_ms} ms, departure={simulator.reference_time_ms}"
    )

    yield

    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Mock Flight API",
    description="Linearly interpolated position of a single simulated flight",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Middleware to track HTTP requests."""
    response = await call_next(request)
    HTTP_REQUESTS.labels(
        method=request.method,
        path=request.url.path,
        status=response.status_code
    ).inc()
    return response


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Mock Flight API",
        "version": "1.0.0",
        "endpoints": {
            "flight_info": API_PATH_FLIGHT_INFO,
            "health": API_PATH_HEALTH,
            "metrics": API_PATH_METRICS
        }
    }


@app.get(API_PATH_HEALTH)
async def health():
    """Health check endpoint."""
    if not simulator:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "flight_id": None, "flight_status": None}
        )

    return {
        "status": "healthy",
        "flight_id": simulator.flight.id,
        "flight_status": simulator.status()
    }


@app.get(API_PATH_FLIGHT_INFO, response_model=FlightInfo)
async def get_flight_info():
    """
    Get the simulated flight's current position and telemetry.

    Position is linearly interpolated between origin and destination
    based on the time elapsed since the service started.
    """
    if not simulator:
        return JSONResponse(
            status_code=503,
            content={"error": "Service not ready"}
        )

    return simulator.get_flight_info()


@app.get(API_PATH_METRICS)
async def metrics():
    """Prometheus metrics endpoint."""
    return await get_metrics()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=BACKEND_HOST,
        port=BACKEND_PORT,
        log_level="info"
    )
