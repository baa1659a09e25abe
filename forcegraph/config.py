"""Configuration management for forcegraph."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .layout.fruchterman_reingold import LayoutParams

CONFIG_DIR = Path.home() / ".forcegraph"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


@dataclass
class LayoutConfig:
    """Layout and canvas settings."""

    attraction_constant: float = 1.0
    repulsion_constant: float = 1.0
    width: float = 800.0
    height: float = 600.0
    iterations: int = 80
    initial_temperature: float = 50.0
    cooling: float = 10.0
    frame_delay: float = 0.2  # seconds
    seed: Optional[int] = None  # None = unseeded random placement

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def to_params(self) -> LayoutParams:
        return LayoutParams(
            attraction_constant=float(self.attraction_constant),
            repulsion_constant=float(self.repulsion_constant),
            iterations=int(self.iterations),
            initial_temperature=float(self.initial_temperature),
            cooling=float(self.cooling),
            frame_delay=float(self.frame_delay),
            width=float(self.width),
            height=float(self.height),
        )


def load_config(path: Union[str, Path, None] = None) -> LayoutConfig:
    """Load config from YAML (default ~/.forcegraph/config.yaml) if it exists.

    Unknown keys are ignored.
    """
    path = Path(path) if path is not None else CONFIG_FILE
    if not path.exists():
        return LayoutConfig()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
    known = {f.name for f in fields(LayoutConfig)}
    return LayoutConfig(**{k: v for k, v in data.items() if k in known})


def save_config(config: LayoutConfig, path: Union[str, Path, None] = None) -> Path:
    """Save config as YAML (default ~/.forcegraph/config.yaml)."""
    path = Path(path) if path is not None else CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(config.to_dict(), default_flow_style=False), encoding="utf-8")
    return path
