"""Slicing parameters and their YAML configuration file.

A configuration file is a YAML mapping whose keys are the field names of
:class:`SlicerConfig`, for example::

    layer_height: 0.2
    perimeter_spacing: 0.4
    precision: 4

Search order used by :func:`load_config`:
    1. An explicit path passed by the caller
    2. The file named by the ``SIMPLESLICE_CONFIG`` environment variable
    3. ``~/.config/simpleslice/config.yaml`` (``%APPDATA%`` on Windows)
    4. Built-in defaults
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

__all__ = [
    "SIMPLESLICE_CONFIG",
    "SlicerConfig",
    "load_config",
    "user_config_path",
]

# Environment variable naming a configuration file
SIMPLESLICE_CONFIG = "SIMPLESLICE_CONFIG"


@dataclass(frozen=True)
class SlicerConfig:
    """Parameters for slicing and toolpath output.

    Attributes:
        layer_height: Distance between slicing planes (mm)
        perimeter_spacing: Inward offset between layer perimeters (mm);
            ``None`` disables layer perimeters
        precision: Decimal places in G-code coordinates; negative values
            are clamped to 0
        spacing: Perimeter spacing for the rectangle/circle generators (mm)
        circle_segments: Polygon segments per circle perimeter (>= 3)
    """
    layer_height: float = 0.2
    perimeter_spacing: Optional[float] = None
    precision: int = 16
    spacing: float = 0.5
    circle_segments: int = 16

    def __post_init__(self):
        if self.layer_height <= 0:
            raise ValueError(f"layer_height must be positive, got {self.layer_height}")
        if self.spacing <= 0:
            raise ValueError(f"spacing must be positive, got {self.spacing}")
        if self.precision < 0:
            object.__setattr__(self, "precision", 0)
        if self.circle_segments < 3:
            raise ValueError(f"circle_segments must be >= 3, got {self.circle_segments}")

    def merged(self, **overrides: Any) -> "SlicerConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def user_config_path() -> Path:
    """Location of the per-user configuration file."""
    if sys.platform == "win32":
        config_base = Path(os.environ.get("APPDATA", "~")).expanduser()
    else:
        config_base = Path.home() / ".config"
    return config_base / "simpleslice" / "config.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load and validate a YAML configuration file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config format in {path}: expected mapping at root")

    known = {f.name for f in fields(SlicerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(
            f"Unknown config keys in {path}: {unknown}. "
            f"Expected some of: {sorted(known)}"
        )
    return data


def load_config(path: Optional[os.PathLike] = None) -> SlicerConfig:
    """Load a :class:`SlicerConfig`.

    Args:
        path: Optional explicit path to a YAML file (overrides search)

    Raises:
        FileNotFoundError: If an explicit or environment-named file is missing
        ValueError: If the file is malformed or holds invalid values
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return SlicerConfig(**_load_yaml(path))

    env_path = os.environ.get(SIMPLESLICE_CONFIG)
    if env_path:
        path = Path(env_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(
                f"Config file named by ${SIMPLESLICE_CONFIG} not found: {path}"
            )
        return SlicerConfig(**_load_yaml(path))

    user_path = user_config_path()
    if user_path.is_file():
        return SlicerConfig(**_load_yaml(user_path))

    return SlicerConfig()
