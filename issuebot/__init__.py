"""issuebot: hosted LLM agents for chat completion and GitHub issue creation."""

__version__ = "0.1.0"
