from pydantic import BaseModel, Field


class AgentRunRequest(BaseModel):
    input: str | None = None


class AgentRunResponse(BaseModel):
    agent: str
    output: str


class WelcomePrompt(BaseModel):
    data: str
    content_type: str = "text/plain"


class AgentWelcome(BaseModel):
    r"""Discovery information shown to a user before the first request.
    """
    welcome: str
    prompts: list[WelcomePrompt] = Field(default_factory=list)


class AgentInfo(BaseModel):
    name: str
    description: str


class AgentListResponse(BaseModel):
    agents: list[AgentInfo] = Field(default_factory=list)
