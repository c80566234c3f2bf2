"""
Tests for `AlignerConfigLoader`, covering the bundled defaults, user files and
rejection of malformed values.
"""
from __future__ import annotations

# --- Standard Library Imports ---
from importlib.resources import files as ir_files

# --- Third-Party Imports ---
import pytest

# --- Local Application Imports ---
import dna_tiler
from dna_tiler.config import AlignerConfig, AlignerConfigLoader, default_config_path, read_yaml


def test_bundled_defaults_exist_and_load():
    """
    The package ships a default YAML file that parses into an `AlignerConfig`.
    """
    assert (ir_files(dna_tiler) / "data" / "aligner_defaults.yaml").is_file()

    config = AlignerConfigLoader().load()
    assert isinstance(config, AlignerConfig)
    assert config.max_reference_length == 10000
    assert config.show_progress is False
    assert config.color is True
    assert config.auto_uppercase is True


def test_default_config_path_points_into_package():
    assert default_config_path().endswith("aligner_defaults.yaml")


def test_user_file_overrides_and_keeps_defaults(tmp_path):
    """
    Keys present in the file override the dataclass defaults; the rest keep them.
    Unknown keys are ignored.
    """
    path = tmp_path / "aligner.yml"
    path.write_text("aligner:\n  max_reference_length: 50\n  color: false\n  unused: 3\n", encoding="utf-8")

    config = AlignerConfigLoader().load(yaml_path=path)
    assert config.max_reference_length == 50
    assert config.color is False
    assert config.show_progress is False
    assert config.auto_uppercase is True


def test_empty_file_gives_dataclass_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert AlignerConfigLoader().load(yaml_path=path) == AlignerConfig()


@pytest.mark.parametrize("body", [
    "aligner:\n  max_reference_length: ten\n",
    "aligner:\n  max_reference_length: -1\n",
    "aligner:\n  max_reference_length: true\n",
    "aligner:\n  color: yes-please\n",
    "aligner: [1, 2]\n",
])
def test_malformed_values_raise(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError):
        AlignerConfigLoader().load(yaml_path=path)


def test_read_yaml_rejects_other_suffixes(tmp_path):
    path = tmp_path / "aligner.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(ValueError):
        read_yaml(path)


def test_read_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError):
        read_yaml(path)
