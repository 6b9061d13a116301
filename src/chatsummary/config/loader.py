"""config.yaml の読み込み

文字列中の ``${NAME}`` は読み込み時に環境変数で置き換える。
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from chatsummary.config.models import AppConfig, LLMConfig, LoggingConfig

_ENV_REF = re.compile(r"\$\{(?P<name>[^}]+)\}")
_LLM_OPTIONAL_KEYS = ("temperature", "max_tokens")


class ConfigError(Exception):
    """設定ファイルに起因するエラー"""


class ConfigValidationError(ConfigError):
    """項目の欠落、または値の型や内容が不正"""


class EnvironmentVariableError(ConfigError):
    """参照された環境変数が定義されていない"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Environment variable '{name}' is not set")


def expand_env_vars(value: str) -> str:
    """``${NAME}`` 参照を環境変数の値で置き換える

    Raises:
        EnvironmentVariableError: 参照先が未定義
    """

    def lookup(match: re.Match[str]) -> str:
        name = match.group("name")
        if name not in os.environ:
            raise EnvironmentVariableError(name)
        return os.environ[name]

    return _ENV_REF.sub(lookup, value)


def _expand(node: Any) -> Any:
    if isinstance(node, str):
        return expand_env_vars(node)
    if isinstance(node, list):
        return [_expand(item) for item in node]
    if isinstance(node, dict):
        return {key: _expand(item) for key, item in node.items()}
    return node


def _as_mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigValidationError(f"'{where}' must be a mapping")
    return value


def _check_level(level: Any, where: str) -> str:
    name = str(level).upper()
    # getLevelName は未知の名前に対して文字列を返す
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigValidationError(f"'{where}' has unknown log level {level!r}")
    return name


def _parse_llm(section: dict[str, Any]) -> LLMConfig:
    if not section.get("model"):
        raise ConfigValidationError("Required field 'llm.model' is missing")
    options = {key: section[key] for key in _LLM_OPTIONAL_KEYS if key in section}
    return LLMConfig(model=str(section["model"]), **options)


def _parse_logging(section: Any) -> LoggingConfig:
    if section is None:
        return LoggingConfig()
    section = _as_mapping(section, "logging")
    loggers = _as_mapping(section.get("loggers") or {}, "logging.loggers")
    return LoggingConfig(
        level=_check_level(section.get("level", "INFO"), "logging.level"),
        loggers={
            str(name): _check_level(level, f"logging.loggers.{name}")
            for name, level in loggers.items()
        },
    )


def load_config(path: str | Path) -> AppConfig:
    """config.yaml を読み込んで AppConfig を返す

    Raises:
        OSError: ファイルを読めない（存在しない場合は FileNotFoundError）
        yaml.YAMLError: YAML として解釈できない
        ConfigError: 内容が不正
    """
    text = Path(path).read_text(encoding="utf-8")
    data = _as_mapping(_expand(yaml.safe_load(text) or {}), "config")

    if data.get("llm") is None:
        raise ConfigValidationError("Required field 'llm' is missing")

    return AppConfig(
        llm=_parse_llm(_as_mapping(data["llm"], "llm")),
        logging=_parse_logging(data.get("logging")),
    )
