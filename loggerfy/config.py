"""Configuration module: frozen dataclass loaded from environment variables.

An optional YAML file named by LOGGERFY_CONFIG supplies values that the
environment leaves unset.
"""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    service: str = "default-service"
    environment: str = "development"


def load_yaml_config(path: str | None) -> dict:
    """Load overrides from a YAML file. Returns empty dict if no usable file."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError:
        logger.warning("Invalid YAML in %s, using defaults", path)
        return {}
    except UnicodeDecodeError:
        logger.warning("Config file %s is not valid UTF-8, using defaults", path)
        return {}
    except OSError as e:
        logger.warning("Cannot read config file %s (%s), using defaults", path, e)
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def _first_set(*values) -> str | None:
    for value in values:
        if value:
            return str(value)
    return None


def load_config() -> Config:
    """Build Config from env vars, then the optional YAML file, then defaults."""
    yaml_data = load_yaml_config(os.environ.get("LOGGERFY_CONFIG"))
    return Config(
        service=_first_set(
            os.environ.get("SERVICE_NAME"), yaml_data.get("service")
        ) or Config.service,
        environment=_first_set(
            os.environ.get("APP_ENV"), yaml_data.get("environment")
        ) or Config.environment,
    )
