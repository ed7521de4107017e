"""Read a CrosscheckConfig from YAML."""

import logging
from pathlib import Path

import yaml

from crosscheck.config.models import CrosscheckConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "default.yaml"


def load_config(path: Path | str) -> CrosscheckConfig:
    """Parse ``path`` as YAML and validate it.

    An empty file yields the built-in defaults. Credentials the file leaves
    out are taken from the environment.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If a value has the wrong shape.
    """
    path = Path(path)
    logger.debug(f"Loading config from {path}")
    with path.open() as f:
        raw = yaml.safe_load(f)

    return CrosscheckConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """The ``default.yaml`` installed alongside this module."""
    return Path(__file__).with_name(DEFAULT_CONFIG_NAME)
