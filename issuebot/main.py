"""FastAPI server hosting the issuebot agents."""

import logging
import os
import sys
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from issuebot import __version__
from issuebot.bootstrap import (
    check_environment,
    configure_logging,
    missing_required_variables,
)
from issuebot.constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_PORT,
)
from issuebot.driver.agent_logic import AgentLogic
from issuebot.env import CORS_ORIGINS, DEBUG, HOST, PORT
from issuebot.routers.agents import AgentRouterClass


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    check_environment()
    yield


def create_app(driver: AgentLogic | None = None) -> FastAPI:
    app = FastAPI(
        title="issuebot API",
        description="Hosted agents for chat completion and GitHub issues",
        version=__version__,
        lifespan=lifespan,
    )

    limiter = Limiter(key_func=get_remote_address)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # CORS configuration
    cors_origins = os.getenv(CORS_ORIGINS, DEFAULT_CORS_ORIGINS).split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    agent_router = AgentRouterClass(limiter=limiter, driver=driver)
    app.include_router(agent_router.router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


configure_logging()
logger = logging.getLogger(__name__)

app = create_app()


if __name__ == "__main__":
    missing = missing_required_variables()
    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)

    host = os.getenv(HOST, DEFAULT_HOST)
    port = int(os.getenv(PORT, str(DEFAULT_PORT)))
    debug = os.getenv(DEBUG, "false").lower() == "true"

    uvicorn.run(
        "issuebot.main:app",
        host=host,
        port=port,
        reload=debug,
    )
