"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.addressbook.runtime.config.config_data import ConfigData
from src.addressbook.runtime.config.settings import EnvironmentVariables


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        else:
            value = os.getenv(var_expr)
            if value is None:
                raise ValueError(f"Required environment variable {var_expr} not set")
            return value

    pattern = r'\$\{([^}]+)\}'
    return re.sub(pattern, replacer, text)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        ConfigData built from the ``config`` section of the file

    Raises:
        ValueError: If required environment variables are missing or the
            file does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        config_data = loaded.get("config", {}) or {}
        return ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(env: EnvironmentVariables | None = None) -> ConfigData:
    """Build the configuration used for the lifetime of the process.

    The YAML file named by ``APP_CONFIG_FILE`` is the base; when it does not
    exist the built-in defaults are used. Environment variables then override
    the environment, port, log level and database URL.
    """
    env = env or EnvironmentVariables()
    config_path = Path(env.config_file)

    if config_path.exists():
        logger.info("Loading configuration from {}", config_path)
        config = load_templated_yaml(config_path)
    else:
        logger.warning("Configuration file {} not found; using defaults", config_path)
        config = ConfigData()

    if env.environment:
        config.app.environment = env.environment
    if env.port is not None:
        config.app.port = env.port
    if env.log_level:
        config.logging.level = env.log_level.upper()
    if env.database_url:
        config.database.url = env.database_url

    return config
