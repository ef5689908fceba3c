"""
Configuration for maze generation runs.

``MazeConfig`` is the validated parameter set shared by the command line and
by programmatic callers; ``load_config_file`` and ``save_config_file`` read
and write it as JSON or YAML.
"""

from __future__ import annotations

import json
import time
import warnings
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from mazegraph.geometry.mazes.maze_generator import (
    DEFAULT_OUTPUT,
    DEFAULT_SIZE,
    DepthFirstMazeGenerator,
    MazeAlgorithm,
    create_maze_generator,
)


class MazeConfig(BaseModel):
    """
    Parameters of a single maze generation run.

    Sizes are image pixels, border included. Even sizes are accepted and get
    a two-pixel border on the far edge.
    """

    seed: int = Field(default_factory=lambda: int(time.time()), ge=0, description="Random seed")
    width: int = Field(DEFAULT_SIZE, gt=2, description="Image width in pixels")
    height: int = Field(DEFAULT_SIZE, gt=2, description="Image height in pixels")
    output: Path = Field(Path(DEFAULT_OUTPUT), description="Output image path")
    algorithm: MazeAlgorithm = Field(MazeAlgorithm.DEPTH_FIRST, description="Generation algorithm")

    @field_validator("width", "height")
    @classmethod
    def warn_even_size(cls, v: int) -> int:
        """Even sizes waste one pixel row or column on a double border."""
        if v % 2 == 0:
            warnings.warn(
                f"Even maze size ({v}) leaves a two-pixel border on the far edge",
                UserWarning,
            )
        return v

    model_config = ConfigDict(validate_assignment=True)

    def create_generator(self, trace: bool = False) -> DepthFirstMazeGenerator:
        return create_maze_generator(self.seed, self.width, self.height, self.algorithm, trace=trace)


def load_config_file(config_path: str | Path) -> dict[str, Any]:
    """
    Load configuration from JSON or YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary with configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file format is unsupported or cannot be parsed
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported config file format: {suffix}")

    try:
        with open(config_path) as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Error loading config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Error loading config file {config_path}: expected a mapping, got {type(data).__name__}")
    return data


def save_config_file(config: MazeConfig, output_path: str | Path) -> None:
    """
    Save configuration to JSON or YAML file.

    Args:
        config: Configuration to save
        output_path: Path where to save the configuration
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported config file format: {suffix}")

    data = config.model_dump(mode="json")
    with open(output_path, "w") as f:
        if suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, indent=2, default_flow_style=False)
