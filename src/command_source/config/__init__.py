from .loader import ConfigError, load_config, parse_config
from .models import AppConfig, LoggingConfig, SourceConfig

__all__ = ["AppConfig", "ConfigError", "LoggingConfig", "SourceConfig", "load_config", "parse_config"]
