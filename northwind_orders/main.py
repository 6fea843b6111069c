"""
FastAPI Application Entry Point - Northwind Orders Service
"""
import asyncio

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from northwind_orders import __version__
from northwind_orders.api import health, orders
from northwind_orders.config import configure_logging, settings
from northwind_orders.database import engine, init_db

configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
logger = structlog.get_logger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Northwind Orders Service",
    description="CRUD API over Northwind orders, their lines and referenced entities",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_timeout(request: Request, call_next):
    """Answer 504 when a request runs longer than REQUEST_TIMEOUT_SECONDS"""
    try:
        return await asyncio.wait_for(call_next(request), timeout=settings.REQUEST_TIMEOUT_SECONDS)
    except asyncio.TimeoutError:
        logger.error("request_timeout", method=request.method, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            content={"detail": "Request timed out"}
        )


# Include routers
app.include_router(health.router)
app.include_router(orders.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)


@app.on_event("startup")
def startup_event():
    """Initialize database on startup"""
    logger.info("service_starting", service=settings.SERVICE_NAME)
    init_db()
    logger.info("service_started", service=settings.SERVICE_NAME, port=settings.SERVICE_PORT)


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("service_stopping", service=settings.SERVICE_NAME)
    engine.dispose()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("northwind_orders.main:app", host="0.0.0.0", port=settings.SERVICE_PORT)
