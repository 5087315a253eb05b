import logging

from openai import AsyncOpenAI

from issuebot.agent.agents.base import BaseAgent
from issuebot.agent.prompts import ISSUE_AGENT_SYSTEM_PROMPT
from issuebot.agent.tools import CreateIssueTool
from issuebot.agent.utils.tool_loop import ToolLoopResult, run_tool_loop
from issuebot.config import AgentWelcome, WelcomePrompt
from issuebot.constants import (
    ISSUE_AGENT_EMPTY_INPUT_MESSAGE,
    ISSUE_AGENT_ERROR_PREFIX,
    ISSUE_AGENT_MAX_STEPS,
)
from issuebot.errors import single_line
from issuebot.issuebot_types import AgentName, ChatModel


class IssueAgent(BaseAgent):
    """Turns a free-text request into a GitHub issue."""

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        create_issue_tool: CreateIssueTool | None = None,
    ):
        super().__init__(client)
        self.name = AgentName.GITHUB_ISSUE.value
        self.description = (
            "Extracts the repository, title and description from a request "
            "and opens the matching GitHub issue.")
        self.system_prompt = ISSUE_AGENT_SYSTEM_PROMPT
        self.model = ChatModel.GPT_4O
        self.tools = [create_issue_tool or CreateIssueTool()]
        self.max_steps = ISSUE_AGENT_MAX_STEPS
        self.logger = logging.getLogger(__name__)

    async def chat(self, user_message: str | None) -> str:
        """
        Main entrypoint for issue requests.

        Args:
            user_message: The request text, may be empty.

        Returns:
            The clarification asked by the model, the outcome of the issue
            creation, or a description of the error that occurred.
        """
        if not user_message or not user_message.strip():
            return ISSUE_AGENT_EMPTY_INPUT_MESSAGE

        messages = [
            {
                "role": "system",
                "content": self.system_prompt
            },
            {
                "role": "user",
                "content": user_message
            },
        ]
        try:
            result = await run_tool_loop(
                client=self.chat_client,
                model=self.model.value,
                messages=messages,
                tools=self.tools,
                max_steps=self.max_steps,
            )
            return self._format_result(result)
        except Exception as e:
            self.logger.exception(f"Error while handling issue request: {e}")
            return f"{ISSUE_AGENT_ERROR_PREFIX}{single_line(e)}"

    def _format_result(self, result: ToolLoopResult) -> str:
        if not result.tool_results:
            return result.text

        # Only the final tool result is reported
        outcome = result.tool_results[-1].outcome
        if outcome.success and outcome.url:
            return f"{outcome.message} View it at: {outcome.url}"
        return outcome.message

    def welcome(self) -> AgentWelcome:
        return AgentWelcome(
            welcome=("Hi! Describe the GitHub issue you want to open, "
                     "including the repository, and I will create it for "
                     "you."),
            prompts=[
                WelcomePrompt(
                    data=("Create an issue at https://github.com/acme/widgets "
                          "titled 'Crash on startup' describing a null "
                          "pointer on launch")),
            ],
        )
