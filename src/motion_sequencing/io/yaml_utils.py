"""Define utility functions for importing data from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml_data(yaml_path: Path, required_keys: set[str] | None = None) -> Any:
    """Load data from a YAML file into Python data structures.

    :param yaml_path: Path to the YAML file to be imported
    :param required_keys: Set of top-level keys required in the loaded data (if None, ignored)
    :return: Dictionary mapping strings to values, or a list of dictionaries, etc.
    :raises FileNotFoundError: If the YAML file does not exist
    :raises RuntimeError: If the file cannot be parsed as YAML
    :raises KeyError: If a required key is missing in the loaded data
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data: dict | list | None = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to load from YAML file: {yaml_path}") from error

    if required_keys:
        if not isinstance(yaml_data, dict):
            raise KeyError(f"Expected a mapping with keys {sorted(required_keys)} in {yaml_path}")
        missing = sorted(required_keys - yaml_data.keys())
        if missing:
            raise KeyError(f"Required key '{missing[0]}' was missing in data from {yaml_path}")

    return yaml_data


def load_yaml_section(yaml_path: Path, section: str) -> Any:
    """Load the value stored under a single required top-level key of a YAML file."""
    return load_yaml_data(yaml_path, required_keys={section})[section]
