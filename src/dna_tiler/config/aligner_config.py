from __future__ import annotations
from dataclasses import dataclass
from importlib.resources import files as importlib_files
from pathlib import Path
from typing import Any, Mapping

from dna_tiler.config.yaml_io import read_yaml

DEFAULT_CONFIG_NAME = "aligner_defaults.yaml"


@dataclass(slots=True)
class AlignerConfig:
    """
    Runtime settings shared by the index builder, the tiling engine and the CLI.

    Attributes
    ----------
    max_reference_length : int
        Longest reference accepted for all-substrings indexing. Index size
        grows with the square of the reference length. 0 disables the cap.
    show_progress : bool
        If True, show tqdm progress bars while indexing and tiling.
    color : bool
        If True, the CLI report uses ANSI colors.
    auto_uppercase : bool
        If True, the CLI uppercases input before validation. If False,
        lowercase bases are rejected.
    """
    max_reference_length: int = 0
    show_progress: bool = False
    color: bool = True
    auto_uppercase: bool = True


# ---------- Typed field helpers ----------

def get_int(node: Mapping[str, Any], key: str, default: int) -> int:
    """Fetch a non-negative integer field, falling back to `default` when absent."""
    value = node.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}.")
    if value < 0:
        raise ValueError(f"'{key}' must be >= 0, got {value}.")
    return value


def get_bool(node: Mapping[str, Any], key: str, default: bool) -> bool:
    """Fetch a boolean field, falling back to `default` when absent."""
    value = node.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}.")
    return value


class AlignerConfigLoader:
    """
    Loads `AlignerConfig` settings from a YAML file.

    The file holds an ``aligner:`` mapping. Missing keys keep their dataclass
    defaults and unknown keys are ignored.
    """
    def load(self, yaml_path: str | Path | None = None) -> AlignerConfig:
        """
        Parse a configuration file into an `AlignerConfig`.

        Parameters
        ----------
        yaml_path : str | Path | None
            Path to the YAML file. If None, the defaults bundled with the
            package are used.

        Returns
        -------
        AlignerConfig
            The parsed configuration.

        Raises
        ------
        ValueError
            If the file is not YAML, the ``aligner`` node is not a mapping,
            or a field has the wrong type.
        """
        if yaml_path is None:
            yaml_path = default_config_path()

        data = read_yaml(yaml_path)
        node = data.get("aligner") or {}
        if not isinstance(node, dict):
            raise ValueError("YAML 'aligner' entry must be a mapping.")

        defaults = AlignerConfig()
        return AlignerConfig(
            max_reference_length=get_int(node, "max_reference_length", defaults.max_reference_length),
            show_progress=get_bool(node, "show_progress", defaults.show_progress),
            color=get_bool(node, "color", defaults.color),
            auto_uppercase=get_bool(node, "auto_uppercase", defaults.auto_uppercase),
        )


def default_config_path() -> str:
    """Location of the configuration file shipped as package data."""
    return str(importlib_files("dna_tiler") / "data" / DEFAULT_CONFIG_NAME)
