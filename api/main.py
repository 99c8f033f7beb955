"""
LayerZero deployments FastAPI server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .upstream import initialize_upstream, close_upstream
from .routes import chains, deployments, health

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown."""
    initialize_upstream(settings.UPSTREAM_URL, settings.REQUEST_TIMEOUT, settings.CACHE_TTL_SECONDS)
    logger.info(f"Proxying {settings.UPSTREAM_URL} with a {settings.CACHE_TTL_SECONDS}s cache")
    yield
    close_upstream()


app = FastAPI(
    title="LayerZero Deployments API",
    docs_url="/docs",
    lifespan=lifespan
)

# CORS for web clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_methods=["GET"],
    allow_headers=["*"],
)


app.include_router(deployments.router, prefix="/api")
app.include_router(health.router, prefix="/api/v1")
app.include_router(chains.router, prefix="/api/v1")


@app.get("/")
async def root():
    return {"name": "LayerZero Deployments API", "health": "/api/v1/health"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
