"""
Configuration Utilities

Helper functions for exporting, validating and comparing configurations.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from loguru import logger

from .settings import GridstatsConfig


def export_config_to_json(config: GridstatsConfig, output_path: Path) -> None:
    """
    Export configuration to JSON file

    Args:
        config: GridstatsConfig instance to export
        output_path: Path where to save the JSON file
    """
    with open(output_path, "w") as f:
        json.dump(config.model_dump(mode="json"), f, indent=2)

    logger.info(f"Configuration exported to {output_path}")


def validate_config_file(config_path: Path) -> List[str]:
    """
    Validate a configuration file and return any issues

    Args:
        config_path: Path to configuration file

    Returns:
        List of validation messages (empty if valid)
    """
    try:
        with open(config_path, "r") as f:
            GridstatsConfig(**json.load(f))
    except (OSError, ValueError) as e:
        return [f"Configuration validation failed: {str(e)}"]
    return []


def compare_configs(
    config1: GridstatsConfig, config2: GridstatsConfig
) -> Dict[str, Any]:
    """
    Compare two configurations and return differences

    Args:
        config1: First configuration
        config2: Second configuration

    Returns:
        Dictionary of differences keyed by dotted path
    """
    dict1 = config1.model_dump(mode="json")
    dict2 = config2.model_dump(mode="json")

    differences = {}

    def compare_dicts(d1, d2, path=""):
        for key in set(d1.keys()) | set(d2.keys()):
            current_path = f"{path}.{key}" if path else key

            if key not in d1:
                differences[current_path] = {"config1": "<missing>", "config2": d2[key]}
            elif key not in d2:
                differences[current_path] = {"config1": d1[key], "config2": "<missing>"}
            elif isinstance(d1[key], dict) and isinstance(d2[key], dict):
                compare_dicts(d1[key], d2[key], current_path)
            elif d1[key] != d2[key]:
                differences[current_path] = {"config1": d1[key], "config2": d2[key]}

    compare_dicts(dict1, dict2)
    return differences


def create_config_template() -> str:
    """Create a JSON configuration template with all available options."""
    return GridstatsConfig().model_dump_json(indent=2)
