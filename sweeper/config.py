# sweeper/config.py

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

import yaml

from .board import validate_board_parameters

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


@dataclass(frozen=True)
class Difficulty:
    name: str
    width: int
    height: int
    num_mines: int

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height, "num_mines": self.num_mines}


@dataclass
class GameConfig:
    presets: Dict[str, Difficulty] = field(default_factory=dict)
    default_difficulty: str = "beginner"
    tick_interval: float = 1.0
    host: str = "0.0.0.0"
    port: int = 5000

    def preset(self, name: str) -> Difficulty:
        try:
            return self.presets[name.lower()]
        except KeyError:
            raise KeyError(f"Unknown difficulty {name!r}, available: {sorted(self.presets)}") from None


def load_config(path: Optional[str] = None) -> GameConfig:
    """
    Load the game configuration from a YAML file (defaults to the bundled config.yaml).
    Every preset is checked against the board rules.
    """
    config_path = path or DEFAULT_CONFIG_PATH
    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    presets = {}
    for name, params in (raw.get("difficulties") or {}).items():
        width = int(params["width"])
        height = int(params["height"])
        num_mines = int(params["num_mines"])
        validate_board_parameters(width, height, num_mines)
        presets[name.lower()] = Difficulty(name.lower(), width, height, num_mines)

    config = GameConfig(presets=presets)
    config.default_difficulty = str(raw.get("default_difficulty", config.default_difficulty)).lower()
    if presets and config.default_difficulty not in presets:
        raise KeyError(f"Default difficulty {config.default_difficulty!r} is not a configured preset")

    running_bomb = raw.get("running_bomb") or {}
    config.tick_interval = float(running_bomb.get("tick_interval", config.tick_interval))

    server = raw.get("server") or {}
    config.host = str(server.get("host", config.host))
    config.port = int(server.get("port", config.port))
    return config
