# config_loader.py
import os
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

CONFIG_ENV_VAR = "TREEHUFF_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")

DEFAULTS = {
    "huffman": {"debug_level": 0, "suffix": ".hf"},
    "logging": {"level": "WARNING", "format": "%(levelname)s %(name)s: %(message)s"},
}


def load_config(config_path=None):
    """
    Loads the YAML config. The path is config_path if given, else
    $TREEHUFF_CONFIG (also read from a .env file), else the packaged default.
    Sections and keys missing from the file keep their DEFAULTS values.
    """
    if config_path is None:
        load_dotenv(find_dotenv(usecwd=True))
        config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    config = {section: dict(values) for section, values in DEFAULTS.items()}
    for section, values in loaded.items():
        if isinstance(values, dict):
            config.setdefault(section, {}).update(values)
        else:
            config[section] = values
    return config
