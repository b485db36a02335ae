"""
Virtual SA Service Main Application
"""
from contextlib import asynccontextmanager
from datetime import datetime

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import Counter, Histogram, make_asgi_app
from starlette.exceptions import HTTPException

from .api import proxy
from .api.v1 import discovery, roi
from .config import configure_logging, settings
from .dependencies import get_catalog, get_nvidia_client


# Metrics
REQUEST_COUNT = Counter('http_requests_total', 'Total HTTP requests', ['method', 'endpoint', 'status'])
REQUEST_DURATION = Histogram('http_request_duration_seconds', 'HTTP request duration')

# Logger
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    configure_logging()
    logger.info("Starting Virtual SA service...")

    # A broken catalog must stop startup
    app.state.catalog = get_catalog()

    if not get_nvidia_client().configured:
        logger.warning("NVIDIA_API_KEY is not set; discovery and proxy endpoints will return errors")

    logger.info("Virtual SA service started successfully")

    yield

    logger.info("Virtual SA service shutdown complete")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="ROI simulator, discovery accelerator and NVIDIA API proxy",
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)


# Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if not settings.DEBUG:
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.ALLOWED_HOSTS,
    )


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with timing"""
    start_time = datetime.utcnow()

    response = await call_next(request)

    process_time = (datetime.utcnow() - start_time).total_seconds()

    if settings.ENABLE_METRICS:
        REQUEST_COUNT.labels(
            method=request.method,
            endpoint=request.url.path,
            status=response.status_code
        ).inc()
        REQUEST_DURATION.observe(process_time)

    logger.info(
        "HTTP request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration=f"{process_time:.3f}s",
        user_agent=request.headers.get("user-agent", ""),
        client_ip=request.client.host if request.client else None,
    )

    return response


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Custom HTTP exception handler"""
    logger.error(
        "HTTP exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": f"http_{exc.status_code}",
                "message": exc.detail,
                "timestamp": datetime.utcnow().isoformat(),
                "path": request.url.path,
            }
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.error(
        "Unhandled exception",
        exception=str(exc),
        path=request.url.path,
        method=request.method,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "internal_server_error",
                "message": "An unexpected error occurred",
                "timestamp": datetime.utcnow().isoformat(),
                "path": request.url.path,
            }
        }
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint for load balancers"""
    catalog = get_catalog()
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "version": settings.VERSION,
        "services": {
            "catalog": {
                "scenarios": len(catalog.scenarios),
                "deployments": len(catalog.deployments),
            },
            "nvidia_api": "configured" if get_nvidia_client().configured else "missing_key",
        }
    }


# Include routers
app.include_router(
    roi.router,
    prefix="/api/v1/roi",
    tags=["roi"]
)

app.include_router(
    discovery.router,
    prefix="/api/v1/discovery",
    tags=["discovery"]
)

app.include_router(
    proxy.router,
    prefix="/api/nvidia",
    tags=["proxy"]
)

# Prometheus metrics endpoint
if settings.ENABLE_METRICS:
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs" if settings.DEBUG else None,
        "health": "/health",
        "metrics": "/metrics" if settings.ENABLE_METRICS else None,
    }


if __name__ == "__main__":
    uvicorn.run(
        "virtual_sa.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info" if not settings.DEBUG else "debug",
        access_log=True,
        server_header=False,
        date_header=False,
    )
