"""Agent router - HTTP interface for the hosted agents.

This router handles HTTP concerns only (validation, error codes, serialization).
All business logic is delegated to AgentLogic driver.
"""

import logging
import os
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter

from issuebot.config import AgentRunRequest
from issuebot.constants import DEFAULT_AGENT_RATE_LIMIT
from issuebot.driver.agent_logic import AgentLogic
from issuebot.env import AGENT_RATE_LIMIT


class AgentRouterClass:
    """HTTP router for agent endpoints."""

    def __init__(
        self,
        limiter: Limiter,
        driver: AgentLogic | None = None,
    ):
        """Initialize agent router.

        Args:
            limiter: Rate limiter instance
            driver: Agent driver, created on demand if not given
        """
        self.router = APIRouter()
        self.limiter = limiter
        self.run_limit = os.getenv(AGENT_RATE_LIMIT, DEFAULT_AGENT_RATE_LIMIT)
        self.logger = logging.getLogger(__name__)

        # Inject driver (business logic layer)
        self.driver = driver or AgentLogic()

        # Set up routes
        self._setup_routes()

    def _setup_routes(self):
        """Set up API routes with rate limiting."""
        self.router.get("/agents")(self.list_agents)
        self.router.get("/agents/{agent_name}/welcome")(self.get_welcome)
        self.router.post("/agents/{agent_name}/run")(
            self.limiter.limit(self.run_limit)(self.run_agent)
        )

    async def list_agents(self) -> dict[str, Any]:
        return self.driver.list_agents().model_dump()

    async def get_welcome(self, agent_name: str) -> dict[str, Any]:
        try:
            return self.driver.welcome(agent_name).model_dump()
        except ValueError as e:
            raise HTTPException(status_code=404, detail=str(e))

    async def run_agent(
        self,
        request: Request,
        agent_name: str,
        req_data: AgentRunRequest,
    ) -> dict[str, Any]:
        """HTTP handler for agent runs.

        Args:
            request: FastAPI request object, used by the rate limiter
            agent_name: Name of the agent to run
            req_data: Request text

        Returns:
            Dictionary containing the agent name and its text output

        Raises:
            HTTPException: 404 for an unknown agent, 500 if the agent fails
        """
        try:
            agent = self.driver.get_agent(agent_name)
        except ValueError as e:
            raise HTTPException(status_code=404, detail=str(e))

        try:
            result = await self.driver.run(agent.name, req_data.input)
            return result.model_dump()
        except Exception as e:
            # Unexpected error - log and return 500
            self.logger.error(f"Error in run_agent for {agent_name}: {e}")
            raise HTTPException(
                status_code=500,
                detail=f"Failed to run agent: {str(e)}"
            )
