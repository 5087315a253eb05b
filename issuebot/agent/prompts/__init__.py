from .issue_prompts import ISSUE_AGENT_SYSTEM_PROMPT

__all__ = [
    "ISSUE_AGENT_SYSTEM_PROMPT",
]
