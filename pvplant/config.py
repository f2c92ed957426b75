"""Plant model and sweep configuration.

Defaults are defined here and can be overridden via config file.
"""

from dataclasses import dataclass, field
from pathlib import Path
import json
import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ModuleConfig:
    """Default module size."""
    default_elements_x: int = 20
    default_elements_y: int = 30


@dataclass
class SweepConfig:
    """Light source sweep parameters."""
    start_angle: float = -math.pi / 2  # Sunrise [rad]
    end_angle: float = math.pi / 2  # Sunset [rad]
    step: float = math.pi / 16  # Source movement per sample [rad]


@dataclass
class Config:
    """Root configuration."""
    module: ModuleConfig = field(default_factory=ModuleConfig)
    sweep: SweepConfig = field(default_factory=SweepConfig)


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from JSON file or return defaults.

    Args:
        path: Path to config JSON file. If None, returns defaults.

    Returns:
        Configuration object
    """
    if path is None or not path.exists():
        return Config()

    with open(path) as f:
        data = json.load(f)

    config = Config()

    if "module" in data:
        mod = data["module"]
        config.module.default_elements_x = int(
            mod.get("default_elements_x", config.module.default_elements_x)
        )
        config.module.default_elements_y = int(
            mod.get("default_elements_y", config.module.default_elements_y)
        )

    if "sweep" in data:
        sweep = data["sweep"]
        config.sweep.start_angle = sweep.get("start_angle", config.sweep.start_angle)
        config.sweep.end_angle = sweep.get("end_angle", config.sweep.end_angle)
        config.sweep.step = sweep.get("step", config.sweep.step)

    if config.sweep.step <= 0:
        raise ValueError("sweep step must be positive")

    logger.debug("Loaded config from %s", path)
    return config


# Default config file path
CONFIG_FILE = Path(__file__).parent.parent / "config.json"

# Global state
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance.

    Auto-loads from config.json if it exists.
    """
    global _config

    if _config is None:
        _config = load_config(CONFIG_FILE)

    return _config


def set_config(config: Config) -> None:
    """Set global configuration instance."""
    global _config
    _config = config


def reload_config() -> Config:
    """Force reload configuration from file."""
    global _config
    _config = load_config(CONFIG_FILE)
    return _config
