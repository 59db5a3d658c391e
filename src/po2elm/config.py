import copy
import logging
import pathlib
from typing import Any

import yaml

from po2elm.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "output": {
        "module": "Strings",
        "lang_module": "Lang",
    },
}


def merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_folder: str | pathlib.Path) -> dict[str, Any]:
    """Load ``config.yml`` from the folder, falling back to the defaults."""
    config_file_path = pathlib.Path(config_folder).absolute() / "config.yml"
    try:
        with open(config_file_path, "r", encoding="utf-8") as file:
            loaded = yaml.safe_load(file)
    except FileNotFoundError:
        logger.debug(f"No configuration at {config_file_path}, using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Invalid configuration {config_file_path}: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Configuration {config_file_path} must be a mapping")
    for section in DEFAULT_CONFIG:
        if section in loaded and not isinstance(loaded[section], dict):
            raise ConfigurationError(
                f"Section {section!r} of {config_file_path} must be a mapping"
            )
    return merge(DEFAULT_CONFIG, loaded)


def setup_logging(config: dict[str, Any]) -> None:
    logging.basicConfig(
        level=logging.getLevelName(str(config["logging"]["level"]).upper()),
        format=config["logging"]["format"],
        datefmt=config["logging"]["datefmt"],
    )
