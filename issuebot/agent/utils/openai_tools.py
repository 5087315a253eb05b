import inspect
from typing import Any, Callable

from pydantic import BaseModel, create_model


def _description_from_doc(obj: Any) -> str:
    doc = inspect.getdoc(obj) or ""
    # Keep the summary paragraph, drop Args/Returns sections
    return doc.split("\n\n")[0].strip()


def _model_from_function(func: Callable[..., Any]) -> type[BaseModel]:
    fields: dict[str, Any] = {}
    for name, param in inspect.signature(func).parameters.items():
        if name in ("self", "cls"):
            continue
        annotation = (param.annotation
                      if param.annotation is not inspect.Parameter.empty else
                      Any)
        default = (param.default
                   if param.default is not inspect.Parameter.empty else ...)
        fields[name] = (annotation, default)
    return create_model(func.__name__, **fields)


def get_openai_tool_schema(
    func_or_model: Callable[..., Any] | type[BaseModel],
    name: str | None = None,
    description: str | None = None,
) -> dict[str, Any]:
    r"""Build an OpenAI function tool schema.

    Args:
        func_or_model: A pydantic model class whose fields are the tool
            parameters, or a plain function whose signature is used.
        name: Tool name, defaults to the class or function name.
        description: Tool description, defaults to the first paragraph
            of the docstring.

    Returns:
        dict[str, Any]: ``{"type": "function", "function": {...}}``.
    """
    if isinstance(func_or_model, type) and issubclass(func_or_model,
                                                      BaseModel):
        model = func_or_model
    else:
        model = _model_from_function(func_or_model)

    parameters = model.model_json_schema()
    parameters.pop("title", None)
    for prop in parameters.get("properties", {}).values():
        prop.pop("title", None)

    return {
        "type": "function",
        "function": {
            "name": name or func_or_model.__name__,
            "description": description or _description_from_doc(func_or_model),
            "parameters": parameters,
        },
    }
