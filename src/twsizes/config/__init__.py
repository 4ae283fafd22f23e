from twsizes.config.loader import ConfigSource, load_config, resolve_config
from twsizes.config.model import SizesConfig

__all__ = [
    "ConfigSource",
    "SizesConfig",
    "load_config",
    "resolve_config",
]
