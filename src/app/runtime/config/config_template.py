"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.app.runtime.config.config_data import ConfigData


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

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        # Handle error messages: ${VAR:?message}
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

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    env_variables = [
        (var, value) for var, value in os.environ.items() if var.startswith(prefix)
    ]
    for var_name, var_value in env_variables:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Validated configuration built from the file's ``config`` section

    Raises:
        ValueError: If required environment variables are missing or the
            file does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(file_path: Path | None = None) -> ConfigData:
    """Load configuration from ``file_path`` (or ``APP_CONFIG_FILE``), falling back to defaults."""
    path = file_path or Path(os.getenv("APP_CONFIG_FILE", "config.yaml"))
    if not path.exists():
        logger.warning("Configuration file {} not found; using defaults", path)
        return ConfigData()
    return load_templated_yaml(path)
