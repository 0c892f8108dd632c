"""Load run configurations from YAML files."""

import logging
from pathlib import Path

import yaml

from diagnostic_runner.models.config import RunConfig

log = logging.getLogger(__name__)


def load_run_config(path: Path) -> RunConfig:
    """Load and validate a run configuration.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty or is not valid YAML
        pydantic.ValidationError: If the content does not match the schema

    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {path}")

    config = RunConfig.model_validate(data)
    log.debug("Loaded %d diagnostic(s) from %s", len(config.diagnostics), path)
    return config
