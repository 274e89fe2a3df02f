"""
FastAPI Gateway for LG Resolution

A gateway API that resolves template references in activities through the
language generation service.
"""

import os
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lg_resolver import LGEndpoint, LGOptions, LGResolver, InvalidConfigurationError, load_config

from .api import activities

logger = logging.getLogger(__name__)


def create_resolver() -> LGResolver:
    """
    Build the resolver from LG_CONFIG (YAML file) or LG_* environment variables

    Raises:
        InvalidConfigurationError: If the configuration is incomplete
    """
    config_path = os.getenv("LG_CONFIG")
    if config_path:
        endpoint, options = load_config(Path(config_path))
    else:
        endpoint, options = LGEndpoint.from_env(), LGOptions.from_env()
    return LGResolver(endpoint, options)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown"""
    # Startup
    logger.info("LG Gateway starting...")
    try:
        app.state.resolver = create_resolver()
    except InvalidConfigurationError as e:
        logger.error(f"LG resolver not configured: {e}")
        app.state.resolver = None

    yield

    # Shutdown
    logger.info("LG Gateway shutting down...")
    if app.state.resolver is not None:
        await app.state.resolver.close()


# Initialize FastAPI app
app = FastAPI(
    title="LG Resolution Gateway API",
    description="Gateway API for resolving template references in activities",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "resolver_configured": getattr(app.state, "resolver", None) is not None,
        "timestamp": datetime.utcnow().isoformat()
    }


# Include routers
app.include_router(activities.router)
