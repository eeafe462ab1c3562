"""
Config loading tests - verify render option profiles.

Tests cover defaults, explicit paths and every validation error path.
"""

import pytest
from chatshape.config import load_render_options
from chatshape.render import RenderOptions


def test_missing_default_file_uses_defaults(tmp_path, monkeypatch):
    """Should fall back to defaults when chatshape.yaml doesn't exist."""
    monkeypatch.setattr(
        "chatshape.config.loader.get_config_path", lambda: tmp_path / "chatshape.yaml"
    )

    assert load_render_options() == RenderOptions()


def test_load_profile(tmp_path, monkeypatch):
    """Should load the requested profile."""
    config_content = """
default:
  show_reasoning: false
debug:
  show_reasoning: true
  streaming: true
  json_indent: 4
    """
    config_file = tmp_path / "chatshape.yaml"
    config_file.write_text(config_content)
    monkeypatch.setattr("chatshape.config.loader.get_config_path", lambda: config_file)

    options = load_render_options("debug")

    assert options.show_reasoning is True
    assert options.streaming is True
    assert options.json_indent == 4


def test_absent_profile_uses_defaults(tmp_path):
    """Should return defaults for a profile the file doesn't define."""
    config_file = tmp_path / "render.yaml"
    config_file.write_text("default:\n  show_reasoning: true\n")

    assert load_render_options("other", path=config_file) == RenderOptions()


def test_empty_file_uses_defaults(tmp_path):
    config_file = tmp_path / "render.yaml"
    config_file.write_text("")

    assert load_render_options(path=config_file) == RenderOptions()


def test_explicit_missing_path(tmp_path):
    """Should raise FileNotFoundError when an explicit path is missing."""
    with pytest.raises(FileNotFoundError) as exc_info:
        load_render_options(path=tmp_path / "nope.yaml")

    assert "nope.yaml" in str(exc_info.value)


def test_non_bool_flag(tmp_path):
    """Should raise ValueError when a flag isn't a boolean."""
    config_file = tmp_path / "render.yaml"
    config_file.write_text("default:\n  show_reasoning: 'yes please'\n")

    with pytest.raises(ValueError) as exc_info:
        load_render_options(path=config_file)

    assert "show_reasoning" in str(exc_info.value)


@pytest.mark.parametrize("indent", ["-1", "two", "true"])
def test_invalid_json_indent(tmp_path, indent):
    config_file = tmp_path / "render.yaml"
    config_file.write_text(f"default:\n  json_indent: {indent}\n")

    with pytest.raises(ValueError) as exc_info:
        load_render_options(path=config_file)

    assert "json_indent" in str(exc_info.value)


def test_profile_not_a_mapping(tmp_path):
    config_file = tmp_path / "render.yaml"
    config_file.write_text("default: [1, 2]\n")

    with pytest.raises(ValueError) as exc_info:
        load_render_options(path=config_file)

    assert "default" in str(exc_info.value)


def test_malformed_yaml(tmp_path):
    """Should wrap YAML parse errors in RuntimeError."""
    config_file = tmp_path / "render.yaml"
    config_file.write_text("default: [unclosed\n")

    with pytest.raises(RuntimeError) as exc_info:
        load_render_options(path=config_file)

    assert "Error loading render config" in str(exc_info.value)
