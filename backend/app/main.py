import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import create_tables

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    yield


app = FastAPI(
    title="PharmaPlus Admin API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_request_path(request: Request, call_next):
    logger.info(f"Request path: {request.url.path}")
    return await call_next(request)


# Import routers after app creation to avoid circular imports
from app.api import (
    promotions,
    products,
    admin_stats
)

# Routers - all already have /api prefix
app.include_router(promotions.router)
app.include_router(products.router)
app.include_router(admin_stats.router)


@app.get("/")
def root():
    return {"status": "ok", "service": "pharmaplus-admin-api"}


@app.get("/api/health")
def health_check():
    return {
        "status": "healthy",
        "env": settings.ENV
    }
