"""League configuration management."""

from functools import lru_cache
from pathlib import Path

from .constants import CONFIG_PATH
from .schemas import LeagueConfig
from .utils import load_json


@lru_cache(maxsize=4)
def get_config(path: Path | str | None = None) -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Falls back to the built-in defaults when no file exists at the default
    location. An explicit path must exist. Configuration is cached per path.

    Returns:
        LeagueConfig object with validated settings

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from kostkas.config import get_config
        config = get_config()
        print(f"Qualification ratio: {config.qualification_ratio}")
    """
    if path is None:
        if not CONFIG_PATH.exists():
            return LeagueConfig()
        path = CONFIG_PATH
    return load_json(path, schema=LeagueConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
