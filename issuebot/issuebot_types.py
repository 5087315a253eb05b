from enum import Enum


class ChatModel(str, Enum):
    GPT_4O = "gpt-4o"


class AgentName(str, Enum):
    COMPLETION = "completion-agent"
    GITHUB_ISSUE = "github-issue-agent"
