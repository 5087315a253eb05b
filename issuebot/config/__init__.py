from .agent import (
    AgentInfo,
    AgentListResponse,
    AgentRunRequest,
    AgentRunResponse,
    AgentWelcome,
    WelcomePrompt,
)
from .github import CreateIssueInput, ToolOutcome

__all__ = [
    "AgentInfo",
    "AgentListResponse",
    "AgentRunRequest",
    "AgentRunResponse",
    "AgentWelcome",
    "WelcomePrompt",
    "CreateIssueInput",
    "ToolOutcome",
]
