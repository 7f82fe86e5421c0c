import json
import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from baseball_cli.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BASEBALL_CLI_CONFIG"


def find_config_path(filename: str = "config/config.yaml") -> Path:
    """
    Walk upwards from this file's directory to locate the given config file.
    Returns the Path to the first matching file.
    Raises FileNotFoundError if not found.
    """
    current = Path(__file__).resolve()
    for parent in (current, *current.parents):
        candidate = parent / filename
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(
        f"Could not locate {filename} in any parent directories")


def resolve_config_path(path: Optional[str] = None) -> Path:
    """
    Pick the config file to load.

    An explicit path wins, then the BASEBALL_CLI_CONFIG environment variable
    (a .env file in the working directory is honoured), then the config
    bundled with the package.
    """
    if path:
        return Path(path)
    load_dotenv(find_dotenv(usecwd=True))
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return find_config_path()


def load_config(path: Optional[str] = None) -> dict:
    """
    Load and parse the YAML or JSON config file.

    Usage:
        from baseball_cli.utils.config_loader import load_config
        config = load_config()
    """
    try:
        config_path = resolve_config_path(path)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e

    logger.debug(f"Loading config from: {config_path}")
    try:
        content = config_path.read_text(encoding="utf-8")
        if config_path.suffix == ".json":
            config = json.loads(content)
        else:
            config = yaml.safe_load(content)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config {config_path} must be a mapping")
    return config
