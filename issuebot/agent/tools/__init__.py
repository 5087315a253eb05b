from .create_issue import CreateIssueTool
from .tool import Tool

__all__ = ["CreateIssueTool", "Tool"]
