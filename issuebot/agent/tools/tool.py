import inspect
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from issuebot.agent.utils.openai_tools import get_openai_tool_schema


class Tool(ABC):
    """A function the model may call.

    Subclasses declare the pydantic model describing their arguments and
    implement ``run``, which receives the validated arguments as keyword
    arguments.
    """

    input_model: type[BaseModel]

    @property
    @abstractmethod
    def name(self) -> str:
        """Name the model uses to call the tool."""

    @property
    def description(self) -> str:
        return inspect.getdoc(self) or ""

    def openai_schema(self) -> dict[str, Any]:
        return get_openai_tool_schema(
            self.input_model,
            name=self.name,
            description=self.description,
        )

    def parse_arguments(self, arguments: dict[str, Any]) -> BaseModel:
        """Validate raw model arguments against ``input_model``."""
        return self.input_model.model_validate(arguments)

    @abstractmethod
    async def run(self, **kwargs: Any) -> BaseModel:
        ...
