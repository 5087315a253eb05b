"""Errors raised inside the agents.

None of these reach the caller of the issue agent: the tool handler and the
resolver collapse them into a single line of text.
"""


class AgentError(Exception):
    """Base class for all agent errors."""


class ConfigurationError(AgentError):
    """A required setting (e.g. a credential) is missing."""


class ValidationError(AgentError):
    """Tool input does not have the expected shape."""


class ExternalApiError(AgentError):
    """The GitHub API call failed, for whatever reason."""


class ModelInvocationError(AgentError):
    """The language model call failed or returned an unusable tool call."""


def single_line(error: Exception | str) -> str:
    """Collapse the text of an error onto one line."""
    return " ".join(str(error).split())
