"""
Render configuration utilities.

Usage:
    from chatshape.config import load_render_options

    options = load_render_options("debug")
"""

from chatshape.config.loader import load_render_options, get_config_path

__all__ = ["load_render_options", "get_config_path"]
