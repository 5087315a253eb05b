from pydantic import BaseModel, ConfigDict, Field


class CreateIssueInput(BaseModel):
    r"""Create a new GitHub issue in the given repository.
    Only call this when the repository, the title and the description
    are all known.
    """
    repository: str = Field(
        description=("The GitHub repository in the format owner/repo, "
                     "e.g. 'octocat/hello-world'."))
    title: str = Field(description="A concise title for the issue.")
    body: str = Field(
        description=("The issue description, formatted as markdown and "
                     "reflecting what the user asked for."))


class ToolOutcome(BaseModel):
    r"""Result of one tool execution, as reported back to the model.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    url: str | None = None
    error: str | None = None
