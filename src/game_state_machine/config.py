import json
import logging
import math
from dataclasses import dataclass

from game_state_machine.interpreter import DEFAULT_PROMPT
from game_state_machine.state_machine import DEFAULT_UPDATE_DURATION

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    update_duration: float = DEFAULT_UPDATE_DURATION
    prompt: str = DEFAULT_PROMPT
    log_level: str = "WARNING"


KNOWN_KEYS = ("update_duration", "prompt", "log_level")


def check_update_duration(update_duration) -> float:
    if isinstance(update_duration, bool) or not isinstance(update_duration, (int, float)):
        raise ConfigError(f"update_duration must be a number, got {update_duration!r}")
    if not math.isfinite(update_duration):
        raise ConfigError(f"update_duration must be finite, got {update_duration}")
    if update_duration < 0:
        raise ConfigError(f"update_duration must not be negative, got {update_duration}")
    return float(update_duration)


def load_config(config_file=None) -> Settings:
    """Read settings from a JSON file. With no file, every default applies."""
    if config_file is None:
        return Settings()

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
        logger.info(f"Successfully loaded config from {config_file}")
    except FileNotFoundError:
        logger.error(f"Config file {config_file} not found.")
        raise
    except json.JSONDecodeError:
        logger.error(f"Error decoding JSON from config file {config_file}.")
        raise
    except UnicodeDecodeError:
        logger.error(f"Config file {config_file} is not valid UTF-8.")
        raise

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_file} must hold a JSON object")
    return settings_from_dict(config)


def settings_from_dict(config: dict) -> Settings:
    for key in config:
        if key not in KNOWN_KEYS:
            logger.warning(f"Ignoring unknown config key: {key}")

    update_duration = check_update_duration(config.get('update_duration', DEFAULT_UPDATE_DURATION))

    prompt = config.get('prompt', DEFAULT_PROMPT)
    if not isinstance(prompt, str):
        raise ConfigError(f"prompt must be a string, got {prompt!r}")

    log_level = config.get('log_level', "WARNING")
    if not isinstance(log_level, str) or not isinstance(logging.getLevelName(log_level.upper()), int):
        raise ConfigError(f"Unknown log_level: {log_level!r}")

    return Settings(
        update_duration=update_duration,
        prompt=prompt,
        log_level=log_level.upper(),
    )
