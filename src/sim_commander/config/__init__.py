"""
Sim Commander Configuration System

    from sim_commander.config import get_config, load_config

    config = get_config()
    print(config.suggestions.max_suggestions)   # 5
    print(config.execution.retry_delay_seconds) # 0.5
"""

from .loader import (
    ConfigLoader,
    load_config,
    get_config,
    reload_config,
    validate_config_file,
    ConfigurationError,
)

from .models import (
    SimCommanderConfig,
    AppConfig,
    SuggestionConfig,
    ExecutionConfig,
    HelpConfig,
    LogLevel,
    DEFAULT_POPULAR_COMMANDS,
)

__all__ = [
    "ConfigLoader",
    "get_config",
    "load_config",
    "reload_config",
    "validate_config_file",
    "ConfigurationError",
    "SimCommanderConfig",
    "AppConfig",
    "SuggestionConfig",
    "ExecutionConfig",
    "HelpConfig",
    "LogLevel",
    "DEFAULT_POPULAR_COMMANDS",
]
