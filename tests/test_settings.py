from pathlib import Path

import pytest
from pydantic import ValidationError

from flightgraph.config import PALETTE, load_settings

REPO_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "graphs.yaml"


def write_yaml(path: Path, text: str):
    path.write_text(text)


def test_defaults_without_file(tmp_path: Path):
    for s in (load_settings(), load_settings(tmp_path / "missing.yaml")):
        assert s.palette == PALETTE
        assert s.default_height == 1
        assert s.log_level == "WARNING"


def test_shipped_config_matches_builtin_palette():
    assert load_settings(REPO_CONFIG).palette == PALETTE


def test_file_and_overrides_are_merged(tmp_path: Path):
    path = tmp_path / "graphs.yaml"
    write_yaml(
        path,
        """
graphs:
  default_height: 2
  palette: ["#111111", "#222222"]
""",
    )
    s = load_settings(path, overrides={"graphs": {"log_level": "debug"}})
    assert s.default_height == 2
    assert s.palette == ["#111111", "#222222"]
    assert s.log_level == "DEBUG"


def test_non_mapping_top_level_rejected(tmp_path: Path):
    path = tmp_path / "graphs.yaml"
    write_yaml(path, "- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_settings(path)


def test_unknown_top_level_key_rejected(tmp_path: Path):
    path = tmp_path / "graphs.yaml"
    write_yaml(path, "viz:\n  enable: false\n")
    with pytest.raises(ValueError):
        load_settings(path)


@pytest.mark.parametrize(
    "override",
    [
        {"palette": ["red"]},
        {"palette": []},
        {"default_height": 0.5},
        {"unknown": 1},
    ],
)
def test_invalid_settings_rejected(override):
    with pytest.raises(ValidationError):
        load_settings(overrides={"graphs": override})


def test_non_mapping_graphs_section_in_file_rejected(tmp_path: Path):
    path = tmp_path / "graphs.yaml"
    write_yaml(path, "graphs:\n  - 1\n")
    with pytest.raises(TypeError):
        load_settings(path)


@pytest.mark.parametrize("section", ["oops", [1, 2]])
def test_non_mapping_graphs_section_in_overrides_rejected(section):
    with pytest.raises(TypeError):
        load_settings(overrides={"graphs": section})


def test_override_palette_replaces_file_palette(tmp_path: Path):
    path = tmp_path / "graphs.yaml"
    write_yaml(path, 'graphs:\n  palette: ["#111111", "#222222"]\n  default_height: 3\n')
    s = load_settings(path, overrides={"graphs": {"palette": ["#333333"]}})
    assert s.palette == ["#333333"]
    assert s.default_height == 3
