import asyncio

from github import Auth, Github, GithubException

from issuebot.constants import DEFAULT_GITHUB_API_URL
from issuebot.errors import ExternalApiError


class GitHubClient:

    def __init__(self, token: str, base_url: str = DEFAULT_GITHUB_API_URL):
        """Initialize GitHub client with an access token."""
        self.token = token
        self.base_url = base_url

    async def create_issue(
        self,
        owner: str,
        repo_name: str,
        title: str,
        body: str,
    ) -> str:
        r"""Create an issue and return its html url.

        Raises:
            ExternalApiError: If GitHub rejects the request (auth, not
                found, rate limit, validation, ...).
        """

        def _create_issue() -> str:
            github = Github(
                auth=Auth.Token(self.token),
                base_url=self.base_url,
                retry=None,
            )
            try:
                repo = github.get_repo(f"{owner}/{repo_name}")
                issue = repo.create_issue(title=title, body=body)
                return issue.html_url
            finally:
                github.close()

        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, _create_issue)
        except GithubException as e:
            raise ExternalApiError(_describe_github_error(e)) from e


def _describe_github_error(e: GithubException) -> str:
    message = None
    if isinstance(e.data, dict):
        message = e.data.get("message")
    if not message:
        message = str(e)
    return f"GitHub API error {e.status}: {message}"
