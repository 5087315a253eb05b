import json
import logging
from dataclasses import dataclass, field
from typing import Any

import pydantic
from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel

from issuebot.agent.tools.tool import Tool
from issuebot.errors import ModelInvocationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    tool_call_id: str
    tool_name: str
    outcome: BaseModel


@dataclass
class ToolLoopResult:
    text: str = ""
    steps: int = 0
    tool_results: list[ToolResult] = field(default_factory=list)


def _tool_call_message(content: str | None,
                       tool_calls: list[Any]) -> dict[str, Any]:
    return {
        "role": "assistant",
        "content": content,
        "tool_calls": [
            {
                "id": call.id,
                "type": "function",
                "function": {
                    "name": call.function.name,
                    "arguments": call.function.arguments,
                },
            } for call in tool_calls
        ],
    }


def _format_validation_error(e: pydantic.ValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: "
        f"{error['msg']}" for error in e.errors())


def _parse_tool_call(call: Any, tools: dict[str, Tool]) -> tuple[Tool, BaseModel]:
    tool = tools.get(call.function.name)
    if tool is None:
        raise ModelInvocationError(
            f"Model requested unknown tool '{call.function.name}'")
    try:
        arguments = json.loads(call.function.arguments or "{}")
        parsed = tool.parse_arguments(arguments)
    except json.JSONDecodeError as e:
        raise ModelInvocationError(
            f"Invalid arguments for tool '{tool.name}': {e}") from e
    except pydantic.ValidationError as e:
        raise ModelInvocationError(
            f"Invalid arguments for tool '{tool.name}': "
            f"{_format_validation_error(e)}") from e
    return tool, parsed


async def run_tool_loop(
    client: AsyncOpenAI,
    model: str,
    messages: list[dict[str, Any]],
    tools: list[Tool],
    max_steps: int,
) -> ToolLoopResult:
    r"""Let the model answer, calling tools for at most ``max_steps`` steps.

    A step is one chat completion. When the completion contains tool calls
    they are all validated first, then executed in order, their results are appended to the conversation
    and the next step starts. The loop ends on the first completion without
    tool calls or once ``max_steps`` completions were made; tool calls from
    the final step are still executed.

    Args:
        client: The OpenAI client.
        model: The model name.
        messages: Initial conversation, left unmodified.
        tools: Tools the model may call.
        max_steps: Maximum number of completions.

    Returns:
        ToolLoopResult: Text of the last completion and every tool result
            in execution order.

    Raises:
        ModelInvocationError: If the API call fails or the model calls a
            tool that does not exist or with malformed arguments.
    """
    conversation = list(messages)
    tools_by_name = {tool.name: tool for tool in tools}
    schemas = [tool.openai_schema() for tool in tools]
    result = ToolLoopResult()

    while result.steps < max_steps:
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=conversation,
                tools=schemas,
            )
        except OpenAIError as e:
            raise ModelInvocationError(str(e)) from e
        result.steps += 1

        if not response.choices:
            raise ModelInvocationError("Model returned no choices")
        message = response.choices[0].message
        result.text = message.content or ""
        tool_calls = message.tool_calls or []
        if not tool_calls:
            break

        logger.debug(
            f"Step {result.steps}: model requested "
            f"{[call.function.name for call in tool_calls]}")
        conversation.append(_tool_call_message(message.content, tool_calls))
        # Every call of the step is checked before any of them runs
        parsed_calls = [(call, *_parse_tool_call(call, tools_by_name))
                        for call in tool_calls]
        for call, tool, arguments in parsed_calls:
            outcome = await tool.run(**arguments.model_dump())
            tool_result = ToolResult(tool_call_id=call.id,
                                     tool_name=tool.name,
                                     outcome=outcome)
            result.tool_results.append(tool_result)
            conversation.append({
                "role": "tool",
                "tool_call_id": tool_result.tool_call_id,
                "content": tool_result.outcome.model_dump_json(),
            })

    return result
