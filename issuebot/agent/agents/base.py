import os
from abc import ABC, abstractmethod

from openai import AsyncOpenAI

from issuebot.config import AgentWelcome
from issuebot.env import OPENAI_API_KEY


class BaseAgent(ABC):

    def __init__(self, client: AsyncOpenAI | None = None):
        """
            An agent abstraction class
        """
        self.name = ""
        self.description = ""
        self.tools = []
        if client is None:
            api_key = os.getenv(OPENAI_API_KEY)
            if api_key is None:
                # Local mode: the server can start and list agents, but
                # every model call will fail with an authentication error
                api_key = "fake_openai_api_key"
                self.local_mode = True
            else:
                self.local_mode = False
            client = AsyncOpenAI(api_key=api_key)
        else:
            self.local_mode = False
        self.chat_client = client

    @abstractmethod
    async def chat(self, user_message: str | None) -> str:
        """
        Common chat interface: one request text in, one response text out.
        """

    @abstractmethod
    def welcome(self) -> AgentWelcome:
        """Greeting and example prompts used for discovery."""
