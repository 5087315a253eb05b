"""Startup checks and logging setup for the agent server."""

import logging
import os
from dataclasses import dataclass, field

from issuebot.constants import DEFAULT_LOG_LEVEL
from issuebot.env import GITHUB_TOKEN, LOG_LEVEL, OPENAI_API_KEY

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging() -> None:
    """Apply ``LOG_LEVEL`` to the root logger."""
    level = os.getenv(LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op when handlers already exist
    logging.getLogger().setLevel(level)


def missing_required_variables() -> list[str]:
    return [name for name in (OPENAI_API_KEY, ) if not os.getenv(name)]


@dataclass
class EnvironmentReport:
    missing_required: list[str] = field(default_factory=list)
    missing_optional: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_required


def check_environment() -> EnvironmentReport:
    """Log missing credentials and report what is missing.

    ``OPENAI_API_KEY`` is required by both agents. ``GITHUB_TOKEN`` only
    disables issue creation, every attempt then fails with a configuration
    error.
    """
    report = EnvironmentReport()

    for name in missing_required_variables():
        report.missing_required.append(name)
        logger.error(
            f"{name} is not set. Set it in the environment or in "
            "the .env file.")

    if not os.getenv(GITHUB_TOKEN):
        report.missing_optional.append(GITHUB_TOKEN)
        logger.warning(
            f"{GITHUB_TOKEN} is not set. The GitHub issue agent will not be "
            "able to create issues.")

    return report
