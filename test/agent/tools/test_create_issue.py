"""Tests for the create_issue tool handler."""

import pydantic
import pytest

from issuebot.agent.tools.create_issue import CreateIssueTool, parse_repository
from issuebot.config import CreateIssueInput
from issuebot.errors import ExternalApiError, ValidationError


@pytest.fixture
def tool(github_client):
    return CreateIssueTool(client_factory=lambda token, base_url: github_client)


class TestParseRepository:

    def test_owner_and_repo(self):
        assert parse_repository("acme/widgets") == ("acme", "widgets")

    @pytest.mark.parametrize(
        "repository",
        ["acme", "acme/", "/widgets", "acme/widgets/extra", "", "/"],
    )
    def test_rejects_malformed(self, repository):
        with pytest.raises(ValidationError, match="Invalid repository format"):
            parse_repository(repository)


class TestCreateIssueTool:

    def test_schema(self, tool):
        schema = tool.openai_schema()
        function = schema["function"]
        assert schema["type"] == "function"
        assert function["name"] == "create_issue"
        assert "GitHub issue" in function["description"]
        assert set(function["parameters"]["required"]) == {
            "repository", "title", "body"
        }

    def test_input_model(self, tool):
        assert tool.input_model is CreateIssueInput

    @pytest.mark.asyncio
    async def test_success(self, tool, github_client, github_token):
        outcome = await tool.run(
            repository="acme/widgets",
            title="Crash on startup",
            body="## Description\nNull pointer on launch",
        )

        assert outcome.success is True
        assert outcome.url == "https://github.com/acme/widgets/issues/42"
        assert outcome.message == "Issue created successfully in acme/widgets!"
        assert outcome.error is None
        github_client.create_issue.assert_awaited_once_with(
            owner="acme",
            repo_name="widgets",
            title="Crash on startup",
            body="## Description\nNull pointer on launch",
        )

    @pytest.mark.asyncio
    async def test_passes_token_and_api_url(self, github_client, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_abc")
        monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3")
        seen = []

        def factory(token, base_url):
            seen.append((token, base_url))
            return github_client

        await CreateIssueTool(client_factory=factory).run(
            repository="acme/widgets", title="t", body="b")

        assert seen == [("ghp_abc", "https://github.example.com/api/v3")]

    @pytest.mark.asyncio
    async def test_missing_token(self, tool, github_client, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)

        outcome = await tool.run(repository="acme/widgets", title="t", body="b")

        assert outcome.success is False
        assert "GITHUB_TOKEN" in outcome.error
        assert outcome.message == f"Failed to create issue: {outcome.error}"
        github_client.create_issue.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("repository", ["widgets", "acme/widgets/x", "acme/"])
    async def test_invalid_repository(self, tool, github_client, github_token,
                                      repository):
        outcome = await tool.run(repository=repository, title="t", body="b")

        assert outcome.success is False
        assert outcome.url is None
        assert "Invalid repository format" in outcome.message
        github_client.create_issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_api_error(self, tool, github_client, github_token):
        github_client.create_issue.side_effect = ExternalApiError(
            "GitHub API error 404: Not Found")

        outcome = await tool.run(repository="acme/widgets", title="t", body="b")

        assert outcome.success is False
        assert outcome.error == "GitHub API error 404: Not Found"
        assert outcome.message == (
            "Failed to create issue: GitHub API error 404: Not Found")

    @pytest.mark.asyncio
    async def test_unexpected_error_is_not_raised(self, tool, github_client,
                                                  github_token):
        github_client.create_issue.side_effect = ConnectionError("reset by peer")

        outcome = await tool.run(repository="acme/widgets", title="t", body="b")

        assert outcome.success is False
        assert outcome.message == "Failed to create issue: reset by peer"

    @pytest.mark.asyncio
    async def test_outcome_is_frozen(self, tool, github_token):
        outcome = await tool.run(repository="acme/widgets", title="t", body="b")
        with pytest.raises(pydantic.ValidationError):
            outcome.success = False
