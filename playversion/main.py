from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from playversion.config import settings
from playversion.models.schemas import ErrorResponse
from playversion.api.routes import router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application starting up, Play Store base URL: {settings.PLAY_STORE_URL}")
    yield
    logger.info("Application shutting down...")

app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information"""
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json"
        },
        "endpoints": {
            "lookup_version": "/{package_name}",
            "health": "/health"
        },
        "status": "active"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(),
        "version": settings.API_VERSION,
        "service": settings.API_TITLE
    }


# Catch-all package route goes after the fixed paths above
app.include_router(router, tags=["Version Lookup"])


# Global exception handlers
@app.exception_handler(404)
async def not_found_handler(request, exc):
    message = exc.detail if isinstance(exc, HTTPException) else "The requested resource was not found"
    return JSONResponse(
        status_code=404,
        content=ErrorResponse(
            error="Not Found",
            message=message,
            status_code=404
        ).model_dump(mode="json")
    )


@app.exception_handler(500)
async def internal_server_error_handler(request, exc):
    logger.error(f"Internal server error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An internal server error occurred",
            status_code=500
        ).model_dump(mode="json")
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error="HTTP Error",
            message=exc.detail,
            status_code=exc.status_code
        ).model_dump(mode="json")
    )


def run():
    import uvicorn

    # Reload needs the import string rather than the app object
    uvicorn.run(
        "playversion.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    run()
