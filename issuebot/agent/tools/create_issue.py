import logging
import os
from typing import Callable

from issuebot.client.github_client import GitHubClient
from issuebot.config import CreateIssueInput, ToolOutcome
from issuebot.constants import DEFAULT_GITHUB_API_URL
from issuebot.env import GITHUB_API_URL, GITHUB_TOKEN
from issuebot.errors import ConfigurationError, ValidationError, single_line

from .tool import Tool

logger = logging.getLogger(__name__)


def parse_repository(repository: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its two parts.

    Raises:
        ValidationError: Unless there are exactly two non-empty segments.
    """
    parts = repository.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValidationError(
            f"Invalid repository format: '{repository}'. "
            "Expected owner/repo.")
    owner, repo_name = parts
    return owner, repo_name


class CreateIssueTool(Tool):
    """Create a new GitHub issue in a repository. Requires the repository
    (owner/repo), a title and a markdown body. Do not call this tool if any
    of them is unknown."""

    input_model = CreateIssueInput

    def __init__(
        self,
        client_factory: Callable[[str, str], GitHubClient] = GitHubClient,
    ):
        self.client_factory = client_factory

    @property
    def name(self) -> str:
        return "create_issue"

    async def run(self, repository: str, title: str, body: str) -> ToolOutcome:
        """Create the issue and report what happened.

        Every failure, including missing configuration and a malformed
        repository, is returned as an unsuccessful outcome so the model
        receives a regular tool result.
        """
        try:
            token = os.getenv(GITHUB_TOKEN)
            if not token:
                raise ConfigurationError(
                    f"{GITHUB_TOKEN} environment variable is not set")
            owner, repo_name = parse_repository(repository)

            base_url = os.getenv(GITHUB_API_URL, DEFAULT_GITHUB_API_URL)
            client = self.client_factory(token, base_url)
            logger.info(f"Creating issue in {owner}/{repo_name}: {title!r}")
            url = await client.create_issue(
                owner=owner,
                repo_name=repo_name,
                title=title,
                body=body,
            )
        except Exception as e:
            error = single_line(e)
            logger.warning(f"Failed to create issue in {repository}: {error}")
            return ToolOutcome(
                success=False,
                error=error,
                message=f"Failed to create issue: {error}",
            )

        return ToolOutcome(
            success=True,
            url=url,
            message=f"Issue created successfully in {repository}!",
        )
