from dna_tiler.config.aligner_config import AlignerConfig, AlignerConfigLoader, default_config_path
from dna_tiler.config.yaml_io import read_yaml

__all__ = [
    "AlignerConfig",
    "AlignerConfigLoader",
    "default_config_path",
    "read_yaml",
]
