import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest


def make_tool_call(call_id: str, name: str, arguments: dict | str):
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return SimpleNamespace(
        id=call_id,
        type="function",
        function=SimpleNamespace(name=name, arguments=arguments),
    )


def make_completion(content: str | None = None, tool_calls: list | None = None):
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def tool_call():
    """Factory for OpenAI-shaped function tool calls."""
    return make_tool_call


@pytest.fixture
def completion():
    """Factory for OpenAI-shaped chat completions."""
    return make_completion


@pytest.fixture
def openai_client():
    """AsyncOpenAI stand-in; set ``chat.completions.create`` side effects."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def github_client():
    """GitHubClient stand-in returning a fixed issue url."""
    client = MagicMock()
    client.create_issue = AsyncMock(
        return_value="https://github.com/acme/widgets/issues/42")
    return client


@pytest.fixture
def github_token(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_token")
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    return "ghp_test_token"
