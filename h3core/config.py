"""
Configuration
=============

Runtime settings for the h3core command line and benchmark harness.

Example:
    config = H3CoreConfig.from_yaml('configs/benchmark.yaml')
    config.validate()
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import OptionInvalidError
from .index.constants import MAX_RES, POLYGON_TO_CELLS_BUFFER

logger = logging.getLogger(__name__)

DISTANCE_UNITS = ('km', 'm', 'rads')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class H3CoreConfig:
    """Settings shared by the CLI subcommands."""
    log_level: str = 'INFO'
    distance_unit: str = 'km'
    polygon_buffer: int = POLYGON_TO_CELLS_BUFFER
    benchmark_iterations: int = 1000
    benchmark_resolution: int = 9
    benchmark_seed: int = 42

    def validate(self) -> 'H3CoreConfig':
        """Raise OptionInvalidError for unknown or out-of-range settings."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise OptionInvalidError(f"Unknown log level {self.log_level!r}")
        if self.distance_unit not in DISTANCE_UNITS:
            raise OptionInvalidError(
                f"Unknown distance unit {self.distance_unit!r}, expected one of {DISTANCE_UNITS}"
            )
        if self.polygon_buffer < 0:
            raise OptionInvalidError(f"polygon_buffer must be >= 0, got {self.polygon_buffer}")
        if self.benchmark_iterations <= 0:
            raise OptionInvalidError(
                f"benchmark_iterations must be positive, got {self.benchmark_iterations}"
            )
        if not 0 <= self.benchmark_resolution <= MAX_RES:
            raise OptionInvalidError(
                f"benchmark_resolution {self.benchmark_resolution} outside 0..{MAX_RES}"
            )
        return self

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> 'H3CoreConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(config_data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in config_data.items() if k in known})

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'H3CoreConfig':
        """Load configuration from YAML file."""
        with open(yaml_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}
        config = cls.from_dict(config_data)
        logger.info(f"Loaded config from {yaml_path}")
        return config

    def save_yaml(self, yaml_path: Union[str, Path]):
        """Save configuration to YAML file."""
        with open(yaml_path, 'w') as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved config to {yaml_path}")
