"""Main FastAPI application"""
from fastapi import FastAPI
from leadform.config import get_settings
from leadform.middleware.cors import setup_cors
from leadform.middleware.error_handler import ErrorHandlerMiddleware
from contextlib import asynccontextmanager
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings = get_settings()
    logger.info(f"Registro API starting (env={settings.environment}, version={settings.app_version})")
    yield
    logger.info("Registro API stopped")


app = FastAPI(
    title="Registro API",
    description="Lead intake for the registration form",
    version=get_settings().app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Setup CORS
setup_cors(app)

# Add error handling middleware
app.add_middleware(ErrorHandlerMiddleware)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Registro API",
        "version": get_settings().app_version,
        "docs": "/docs"
    }

# Import and include routers
from leadform.routers import registro

app.include_router(registro.router, prefix="/api/registro", tags=["Registro"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
