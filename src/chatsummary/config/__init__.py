"""設定管理モジュール"""

from chatsummary.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from chatsummary.config.models import AppConfig, LLMConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LLMConfig",
    "LoggingConfig",
    "expand_env_vars",
    "load_config",
]
