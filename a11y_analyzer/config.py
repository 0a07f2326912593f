"""
Configuration Management

Loads configuration from .env files and provides typed config objects.
Handles retrieval settings, rule selection and output defaults.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import Config

_TRUE = {"1", "true", "yes", "on"}


def load_config(env_file: Optional[Path] = None) -> Config:
    """
    Load configuration from .env file and environment variables.

    Searches for .env file in:
    1. Provided env_file path
    2. Current directory
    3. User's home directory

    Environment variables override .env file values.

    Args:
        env_file: Optional path to .env file

    Returns:
        Config object with all settings

    Raises:
        pydantic.ValidationError: If a value is out of range

    Example:
        config = load_config()
        analyzer = A11yAnalyzer(config)
    """
    # Load .env file
    if env_file and env_file.exists():
        load_dotenv(env_file)
    elif Path(".env").exists():
        load_dotenv(".env")
    elif (Path.home() / ".env").exists():
        load_dotenv(Path.home() / ".env")

    # Build config from environment
    config = Config(
        user_agent=os.getenv("A11Y_USER_AGENT", "Accessibility-Analyzer/1.0"),
        timeout=float(os.getenv("A11Y_TIMEOUT", "10")),
        rules=os.getenv("A11Y_RULES", ""),
        parallel_rules=os.getenv("A11Y_PARALLEL_RULES", "false").strip().lower() in _TRUE,
        output=os.getenv("A11Y_OUTPUT", "rich")
    )

    return config
