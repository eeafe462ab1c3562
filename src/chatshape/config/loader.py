"""
Render configuration management utilities.

This module loads RenderOptions profiles from a YAML configuration file at
the project root. The file is optional: without it every profile renders
with default options.
"""

import logging
import os
from pathlib import Path

import yaml

from chatshape.render.types import RenderOptions

logger = logging.getLogger(__name__)

_BOOL_FIELDS = ("show_reasoning", "streaming")


def get_config_path() -> Path:
    """
    Get the path to the render configuration file.

    Looks for chatshape.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "chatshape.yaml"


def load_render_options(
    profile: str = "default", path: Path | str | None = None
) -> RenderOptions:
    """
    Load a RenderOptions profile from YAML.

    Example file:

        default:
          show_reasoning: false
        debug:
          show_reasoning: true
          json_indent: 4

    Args:
        profile: Top-level key of the profile to load
        path: Explicit config file. Must exist when given.

    Returns:
        RenderOptions for the profile (defaults if the profile is absent)

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ValueError: If an option has the wrong type
        RuntimeError: If the file cannot be parsed
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Render config not found at {config_path}")
    else:
        config_path = get_config_path()
        if not config_path.exists():
            logger.debug(f"No render config at {config_path}, using defaults")
            return RenderOptions()

    logger.debug(f"Loading render config from: {config_path}")

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise RuntimeError(f"Error loading render config: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Render config at {config_path} must be a mapping")

    section = config.get(profile) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Profile '{profile}' in {config_path} must be a mapping")

    options = RenderOptions()
    for name in _BOOL_FIELDS:
        if name in section:
            value = section[name]
            if not isinstance(value, bool):
                raise ValueError(
                    f"Option '{name}' in profile '{profile}' must be true or false"
                )
            setattr(options, name, value)

    if "json_indent" in section:
        indent = section["json_indent"]
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise ValueError(
                f"Option 'json_indent' in profile '{profile}' must be a non-negative integer"
            )
        options.json_indent = indent

    return options
