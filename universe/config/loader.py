"""
Load provider configuration blocks from YAML or JSON files.
"""

from pathlib import Path
from typing import Any

import yaml

from universe.config.provider import ConfigurationError

PROVIDER_SECTION = "provider"


def load_provider_config(path: str | Path) -> dict[str, Any]:
    """
    Read a provider configuration block from a file.

    The document is either the block itself or a mapping with the block
    under a top-level ``provider`` key. JSON files load too, being YAML.

    Example file:
        provider:
          executor: python3
          script: scripts/job.py
          environment:
            API_URL: https://example.com

    Args:
        path: File to read

    Returns:
        The provider block as a plain dict

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or does
            not hold a mapping
    """
    config_path = Path(path)
    try:
        with config_path.open() as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read provider config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigurationError(
            f"Provider config {config_path} must be a mapping, got {type(document).__name__}"
        )

    if PROVIDER_SECTION in document:
        block = document[PROVIDER_SECTION]
        if block is None:
            return {}
        if not isinstance(block, dict):
            raise ConfigurationError(
                f"'{PROVIDER_SECTION}' in {config_path} must be a mapping, "
                f"got {type(block).__name__}"
            )
        return block

    return document
