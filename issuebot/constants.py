DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3500
DEFAULT_CORS_ORIGINS = "http://localhost:3000"
DEFAULT_AGENT_RATE_LIMIT = "60/minute"
DEFAULT_LOG_LEVEL = "INFO"

# One extraction attempt, optionally followed by one step after the tool call
ISSUE_AGENT_MAX_STEPS = 2

COMPLETION_FALLBACK_INPUT = "Say this is a test"
COMPLETION_FALLBACK_OUTPUT = "Something went wrong"

ISSUE_AGENT_EMPTY_INPUT_MESSAGE = (
    "Please provide details about the GitHub issue you want to create, "
    "including the repository (owner/repo), a title and a description."
)
ISSUE_AGENT_ERROR_PREFIX = "An error occurred while processing your request: "
