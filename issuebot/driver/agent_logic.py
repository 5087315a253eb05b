"""Agent driver - Business logic behind the agent endpoints.

Owns one instance of every agent and dispatches requests by agent name.
"""

import logging

from issuebot.agent.agents.base import BaseAgent
from issuebot.agent.agents.completion_agent import CompletionAgent
from issuebot.agent.agents.issue_agent import IssueAgent
from issuebot.config import (
    AgentInfo,
    AgentListResponse,
    AgentRunResponse,
    AgentWelcome,
)


class AgentLogic:
    """Registry of the hosted agents."""

    def __init__(self, agents: list[BaseAgent] | None = None):
        """Initialize agent driver.

        Args:
            agents: Agents to serve, defaults to the completion agent and
                the GitHub issue agent.
        """
        self.logger = logging.getLogger(__name__)
        if agents is None:
            agents = [CompletionAgent(), IssueAgent()]
        self.agents: dict[str, BaseAgent] = {agent.name: agent for agent in agents}

    def get_agent(self, agent_name: str) -> BaseAgent:
        """Look up an agent.

        Raises:
            ValueError: If no agent has this name.
        """
        agent = self.agents.get(agent_name)
        if agent is None:
            raise ValueError(f"Unknown agent: {agent_name}")
        return agent

    def list_agents(self) -> AgentListResponse:
        return AgentListResponse(
            agents=[
                AgentInfo(name=agent.name, description=agent.description)
                for agent in self.agents.values()
            ])

    def welcome(self, agent_name: str) -> AgentWelcome:
        return self.get_agent(agent_name).welcome()

    async def run(self, agent_name: str, user_message: str | None) -> AgentRunResponse:
        agent = self.get_agent(agent_name)
        self.logger.info(f"Running {agent_name}")
        output = await agent.chat(user_message)
        return AgentRunResponse(agent=agent_name, output=output)
