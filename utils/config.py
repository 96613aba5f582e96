import os
from enum import Enum
from functools import lru_cache

import yaml


class SettingsModule(Enum):
    DEV = "memberhub.settings_dev"
    TESTING = "memberhub.settings_test"
    PRODUCTION = "memberhub.settings_prod"


RUN_ENV = os.environ.get("RUN_ENV", "PRODUCTION")


if RUN_ENV == "DEV":
    settings_module = SettingsModule.DEV.value
elif RUN_ENV == "TESTING":
    settings_module = SettingsModule.TESTING.value
else:
    settings_module = SettingsModule.PRODUCTION.value


def get_settings_module():
    return settings_module


class MissingConfigException(Exception):
    pass


@lru_cache
def _load_yaml_config():
    path = os.environ.get("MEMBERHUB_YML", "/config/memberhub.yml")
    if not os.path.exists(path):
        return {}
    with open(path) as f:
        content = yaml.safe_load(f)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise MissingConfigException(f"Config file {path} must contain a mapping")
    return content


def _env_override(path):
    # `("setup", "graphql", "max_depth")` -> `SETUP__GRAPHQL__MAX_DEPTH`
    env_key = "__".join(part.upper() for part in path)
    if env_key not in os.environ:
        return None, False
    return yaml.safe_load(os.environ[env_key]), True


def get_config(*path, default=None):
    value, found = _env_override(path)
    if found:
        return value

    current = _load_yaml_config()
    for part in path:
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current
