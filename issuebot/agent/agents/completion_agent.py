import logging

from openai import AsyncOpenAI

from issuebot.agent.agents.base import BaseAgent
from issuebot.config import AgentWelcome, WelcomePrompt
from issuebot.constants import (
    COMPLETION_FALLBACK_INPUT,
    COMPLETION_FALLBACK_OUTPUT,
)
from issuebot.issuebot_types import AgentName, ChatModel


class CompletionAgent(BaseAgent):
    """Relays the request text to the chat model and returns its reply."""

    def __init__(self, client: AsyncOpenAI | None = None):
        super().__init__(client)
        self.name = AgentName.COMPLETION.value
        self.description = (
            "Forwards the request to an OpenAI chat model and returns the "
            "reply verbatim.")
        self.model = ChatModel.GPT_4O
        self.logger = logging.getLogger(__name__)

    async def chat(self, user_message: str | None) -> str:
        content = user_message or COMPLETION_FALLBACK_INPUT

        completion = await self.chat_client.chat.completions.create(
            model=self.model.value,
            messages=[{
                "role": "user",
                "content": content
            }],
        )

        message = completion.choices[0].message if completion.choices else None
        if message is None or not message.content:
            self.logger.warning("Chat completion returned no content")
            return COMPLETION_FALLBACK_OUTPUT
        return message.content

    def welcome(self) -> AgentWelcome:
        return AgentWelcome(
            welcome=("Welcome! Send me any text and I will pass it to "
                     f"{self.model.value} and return the answer."),
            prompts=[WelcomePrompt(data=COMPLETION_FALLBACK_INPUT)],
        )
