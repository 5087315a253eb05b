"""Environment variable definitions for issuebot.

Each variable includes documentation on its purpose, expected values, and
defaults.

Usage:
    import os
    from issuebot.env import GITHUB_TOKEN

    token = os.getenv(GITHUB_TOKEN)
"""

# =============================================================================
# Credentials
# =============================================================================

OPENAI_API_KEY = "OPENAI_API_KEY"
"""
.. envvar:: OPENAI_API_KEY

API key used by both agents to call the OpenAI Chat Completions API.
Required when running the server.
"""

GITHUB_TOKEN = "GITHUB_TOKEN"
"""
.. envvar:: GITHUB_TOKEN

Personal access token used by the ``create_issue`` tool.
Without it the issue agent still answers, but every issue creation fails.
"""

# =============================================================================
# GitHub
# =============================================================================

GITHUB_API_URL = "GITHUB_API_URL"
"""
.. envvar:: GITHUB_API_URL

Base URL of the GitHub REST API. Set it for GitHub Enterprise Server.

**Default:** ``https://api.github.com``
"""

# =============================================================================
# Server
# =============================================================================

HOST = "HOST"
"""
.. envvar:: HOST

Interface the server binds to.

**Default:** ``0.0.0.0``
"""

PORT = "PORT"
"""
.. envvar:: PORT

Port the server listens on.

**Default:** ``3500``
"""

DEBUG = "DEBUG"
"""
.. envvar:: DEBUG

Enable uvicorn auto-reload. Accepts ``true`` or ``false``.

**Default:** ``false``
"""

CORS_ORIGINS = "CORS_ORIGINS"
"""
.. envvar:: CORS_ORIGINS

Comma-separated list of origins allowed to call the API.

**Default:** ``http://localhost:3000``
"""

AGENT_RATE_LIMIT = "AGENT_RATE_LIMIT"
"""
.. envvar:: AGENT_RATE_LIMIT

Rate limit applied to agent runs, in slowapi notation.

**Default:** ``60/minute``
"""

LOG_LEVEL = "LOG_LEVEL"
"""
.. envvar:: LOG_LEVEL

Root logging level.

**Default:** ``INFO``
"""
