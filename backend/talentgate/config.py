"""Configuration management for the access-control engine.

This module provides utilities for loading and validating configuration
from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from dotenv import load_dotenv

if TYPE_CHECKING:
    from pathlib import Path

LOGGER = logging.getLogger(__name__)


def configure_logging(app_config: AppConfig) -> None:
    """Configure logging based on the application configuration.

    :param app_config: The application configuration instance
    """
    if not app_config.logging_level:
        logging.basicConfig(level=logging.INFO, force=True)
        return

    numeric_level = getattr(logging, app_config.logging_level.upper(), None)
    if not isinstance(numeric_level, int):
        LOGGER.warning("Invalid log level: %s, using INFO", app_config.logging_level)
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, force=True)


@dataclass
class AppConfig:
    """Application configuration loaded from environment variables.

    **Usage:**

    Load a .env file first if needed, then create the config:

    .. code-block:: python

        from dotenv import load_dotenv
        load_dotenv('.env')
        config = AppConfig()
    """

    DEFAULT_EMAIL_DOMAIN: ClassVar[str] = "flowdot.ai"
    DEFAULT_AVATAR_BASE_URL: ClassVar[str] = "https://i.pravatar.cc/150"

    # Logging configuration
    logging_level: str | None = field(
        default_factory=lambda: os.getenv("LOGGING_LEVEL"),
    )

    # Provisioning configuration
    email_domain: str = field(
        default_factory=lambda: os.getenv(
            "EMAIL_DOMAIN",
            AppConfig.DEFAULT_EMAIL_DOMAIN,
        ),
    )
    avatar_base_url: str = field(
        default_factory=lambda: os.getenv(
            "AVATAR_BASE_URL",
            AppConfig.DEFAULT_AVATAR_BASE_URL,
        ),
    )

    def __post_init__(self) -> None:
        """Post-initialization validation."""
        self.email_domain = self.email_domain.strip().lstrip("@")
        if not self.email_domain or " " in self.email_domain:
            msg = f"EMAIL_DOMAIN has invalid value: {self.email_domain!r}"
            raise ValueError(msg)
        if not self.avatar_base_url.startswith(("http://", "https://")):
            msg = f"AVATAR_BASE_URL must be an http(s) URL, got: {self.avatar_base_url}"
            raise ValueError(msg)

    def email_for(self, name: str) -> str:
        """Derive a workspace email address from a display name.

        :param name: Display name of the user, e.g. ``Jane Doe``
        :return: The email address, e.g. ``jane.doe@flowdot.ai``
        """
        local_part = name.strip().lower().replace(" ", ".", 1)
        return f"{local_part}@{self.email_domain}"

    def avatar_for(self, seed: str) -> str:
        """Build an avatar URL seeded by a user identifier."""
        return f"{self.avatar_base_url}?u={seed}"


def load_config_from_env(env_file: str | Path | None = None) -> AppConfig:
    """Load application configuration from environment variables.

    :param env_file: Optional path to a .env file loaded before reading the environment
    :return: An AppConfig instance populated with environment variable values
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)

    return AppConfig()
