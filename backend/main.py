"""
Devkit Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import cron, diff, generators, regex, tokens, workspace
from services.config_manager import ConfigManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    logger.info("[Backend] Starting Devkit Backend...")
    config_manager = ConfigManager.get_instance()
    logger.info("[Backend] ConfigManager initialized (%s)", config_manager.config_file)

    yield
    logger.info("[Backend] Shutting down Devkit Backend...")


app = FastAPI(
    title="Devkit Backend",
    description="Text analysis engines behind the developer utilities desktop app",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the desktop webview
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Client runs locally
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(regex.router, prefix="/api/regex", tags=["regex"])
app.include_router(cron.router, prefix="/api/cron", tags=["cron"])
app.include_router(tokens.router, prefix="/api/token", tags=["token"])
app.include_router(generators.router, prefix="/api/generators", tags=["generators"])
app.include_router(workspace.router, prefix="/api/workspace", tags=["workspace"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "devkit-backend"}


def run():
    """Console entry point"""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    server = ConfigManager.get_instance().get_config()["server"]
    uvicorn.run(app, host=server["host"], port=server["port"])


if __name__ == "__main__":
    run()
