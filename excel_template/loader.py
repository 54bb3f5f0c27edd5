"""
Loading of data model files and the YAML config.
"""

import json
import logging
import os

import yaml

from .errors import ModelLoadError

logger = logging.getLogger(__name__)

_JSON_EXTENSIONS = {".json"}
_YAML_EXTENSIONS = {".yaml", ".yml"}


def load_config(config_path):
    """Load configuration from a YAML file."""
    defaults = {
        "sheets": None,
        "output_dir": None,
        "log_level": "INFO",
    }
    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f) or {}
        defaults.update(user_config)
    return defaults


def load_model(path):
    """Read a JSON or YAML data model whose root is a mapping."""
    if not os.path.exists(path):
        raise ModelLoadError(path, "file not found")

    ext = os.path.splitext(path)[1].lower()
    try:
        with open(path, "r", encoding="utf-8") as f:
            if ext in _JSON_EXTENSIONS:
                data = json.load(f)
            elif ext in _YAML_EXTENSIONS:
                data = yaml.safe_load(f)
            else:
                raise ModelLoadError(path, f"unsupported model format '{ext}'")
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ModelLoadError(path, f"could not parse: {e}") from e

    if not isinstance(data, dict):
        raise ModelLoadError(
            path, f"root must be a mapping, got {type(data).__name__}")

    logger.info(f"Loaded model: {path} ({len(data)} fields)")
    return data
