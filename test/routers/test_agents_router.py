"""Tests for the agent HTTP endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from issuebot.agent.agents.completion_agent import CompletionAgent
from issuebot.agent.agents.issue_agent import IssueAgent
from issuebot.driver.agent_logic import AgentLogic
from issuebot.main import create_app


@pytest.fixture
def agents(openai_client):
    completion_agent = CompletionAgent(client=openai_client)
    completion_agent.chat = AsyncMock(return_value="relayed")
    issue_agent = IssueAgent(client=openai_client)
    issue_agent.chat = AsyncMock(return_value="Failed to create issue: nope")
    return completion_agent, issue_agent


@pytest.fixture
def client(agents):
    app = create_app(driver=AgentLogic(agents=list(agents)))
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_agents(client):
    response = client.get("/api/v1/agents")

    assert response.status_code == 200
    names = [agent["name"] for agent in response.json()["agents"]]
    assert names == ["completion-agent", "github-issue-agent"]


def test_welcome(client):
    response = client.get("/api/v1/agents/github-issue-agent/welcome")

    assert response.status_code == 200
    body = response.json()
    assert body["welcome"]
    assert body["prompts"][0]["content_type"] == "text/plain"


def test_welcome_unknown_agent(client):
    response = client.get("/api/v1/agents/nope/welcome")
    assert response.status_code == 404


def test_run_agent(client, agents):
    _, issue_agent = agents

    response = client.post(
        "/api/v1/agents/github-issue-agent/run",
        json={"input": "Open an issue"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "agent": "github-issue-agent",
        "output": "Failed to create issue: nope",
    }
    issue_agent.chat.assert_awaited_once_with("Open an issue")


def test_run_agent_without_input(client, agents):
    completion_agent, _ = agents

    response = client.post("/api/v1/agents/completion-agent/run", json={})

    assert response.status_code == 200
    assert response.json()["output"] == "relayed"
    completion_agent.chat.assert_awaited_once_with(None)


def test_run_unknown_agent(client):
    response = client.post("/api/v1/agents/nope/run", json={"input": "hi"})
    assert response.status_code == 404


def test_run_agent_failure(client, agents):
    completion_agent, _ = agents
    completion_agent.chat.side_effect = RuntimeError("upstream down")

    response = client.post("/api/v1/agents/completion-agent/run",
                           json={"input": "hi"})

    assert response.status_code == 500
    assert "upstream down" in response.json()["detail"]
