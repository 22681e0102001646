import json
import logging
import os

from pac_errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "tick_rate": 60,
    "pacman_speed": 3.0,
    "ghost_speed": 2.0,
    "pacman_radius": 0.35,
    "ghost_radius": 0.35,
    "gravity": -12.0,
    "jump_impulse": 6.0,
    "angle_anneal_rate": 0.2,
    "power_up_duration": 8.0,
    "pellet_score": 10,
    "power_up_score": 50,
    "bob_period": 2.0,
    "bob_amplitude": 0.15,
}

INT_KEYS = ("pellet_score", "power_up_score")

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.json")


def load_config(path=None):
    cfg = DEFAULT_CONFIG.copy()
    path = path or CONFIG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return cfg
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return cfg

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: expected a JSON object")
        return cfg
    unknown = sorted(k for k in data if k not in cfg)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in {path}: {', '.join(unknown)}")
    for k in cfg.keys():
        if k in data:
            cfg[k] = data[k]
    logger.debug(f"Loaded config from {path}")
    return cfg


def validate_config(overrides=None):
    """Merge ``overrides`` onto the defaults and check every value.

    Returns a new dict; raises ConfigError on the first bad value.
    """
    cfg = DEFAULT_CONFIG.copy()
    overrides = overrides or {}
    unknown = sorted(k for k in overrides if k not in cfg)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    cfg.update(overrides)

    for key, value in cfg.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key} must be a number, got {value!r}")
        cfg[key] = int(value) if key in INT_KEYS else float(value)

    if cfg["tick_rate"] <= 0:
        raise ConfigError("tick_rate must be positive")
    for key in ("pacman_speed", "ghost_speed", "pacman_radius", "ghost_radius", "jump_impulse", "power_up_duration"):
        if cfg[key] < 0:
            raise ConfigError(f"{key} must not be negative")
    if cfg["gravity"] >= 0:
        raise ConfigError("gravity must be negative")
    if not 0 < cfg["angle_anneal_rate"] <= 1:
        raise ConfigError("angle_anneal_rate must be in (0, 1]")
    if cfg["bob_period"] <= 0:
        raise ConfigError("bob_period must be positive")
    for key in ("pacman_speed", "ghost_speed"):
        if cfg[key] / cfg["tick_rate"] > 1:
            raise ConfigError(f"{key} moves more than one cell per tick at tick_rate {cfg['tick_rate']:g}")
    return cfg
