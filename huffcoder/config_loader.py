# config_loader.py
import os

import yaml

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


def load_config(config_path=None):
    if config_path is None:
        config_path = os.environ.get("HUFFCODER_CONFIG", DEFAULT_CONFIG_PATH)
    with open(config_path, "r") as f:
        config = yaml.safe_load(f)
    return config or {}
