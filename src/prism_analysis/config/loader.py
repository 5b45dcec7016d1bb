"""YAML configuration loading utilities."""

import os
from importlib import resources
from pathlib import Path

import yaml

from prism_analysis.config.models import PrismConfig

CONFIG_ENV_VAR = "PRISM_CONFIG"
DEFAULT_CONFIG_FILE = "default.yaml"


def load_config(path: Path | str | None = None) -> PrismConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to a YAML config file. When omitted, the file named by the
            PRISM_CONFIG env var is used, falling back to the bundled default.

    Returns:
        Validated PrismConfig. An empty file yields all defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path) if path is not None else resolve_config_path()
    with path.open() as f:
        raw = yaml.safe_load(f)

    return PrismConfig.model_validate(raw or {})


def resolve_config_path() -> Path:
    """Config path from PRISM_CONFIG if set, else the bundled default."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else get_default_config_path()


def get_default_config_path() -> Path:
    """Path to the default config shipped inside the package."""
    return Path(str(resources.files("prism_analysis.config").joinpath(DEFAULT_CONFIG_FILE)))
