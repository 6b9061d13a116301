"""設定ローダーのテスト"""

from pathlib import Path
from typing import Callable

import pytest
import yaml

from chatsummary.config import (
    AppConfig,
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    LLMConfig,
    LoggingConfig,
    expand_env_vars,
    load_config,
)

WriteConfig = Callable[[str], Path]


@pytest.fixture
def write_config(tmp_path: Path) -> WriteConfig:
    """YAML 文字列を config.yaml に書き出してパスを返す"""

    def write(content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return write


class TestExpandEnvVars:
    """expand_env_varsのテスト"""

    def test_replaces_references(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """参照を環境変数の値に置き換える"""
        monkeypatch.setenv("CS_PROVIDER", "openai")
        monkeypatch.setenv("CS_MODEL", "gpt-4o-mini")

        assert expand_env_vars("${CS_PROVIDER}/${CS_MODEL}") == "openai/gpt-4o-mini"

    @pytest.mark.parametrize("value", ["", "gpt-4o", "$CS_MODEL", "{CS_MODEL}"])
    def test_leaves_plain_text(self, value: str) -> None:
        """${...} 形式でなければ変更しない"""
        assert expand_env_vars(value) == value

    def test_undefined_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """未定義の変数は名前付きのエラーになる"""
        monkeypatch.delenv("CS_MISSING", raising=False)

        with pytest.raises(EnvironmentVariableError) as exc_info:
            expand_env_vars("${CS_MISSING}")

        assert exc_info.value.name == "CS_MISSING"


class TestLoadConfig:
    """load_configのテスト"""

    def test_full_config(self, write_config: WriteConfig) -> None:
        """全項目を指定した設定を読み込める"""
        path = write_config(
            "llm:\n"
            "  model: gpt-4o\n"
            "  temperature: 0.2\n"
            "  max_tokens: 300\n"
            "logging:\n"
            "  level: debug\n"
            "  loggers:\n"
            "    LiteLLM: warning\n"
        )

        assert load_config(path) == AppConfig(
            llm=LLMConfig(model="gpt-4o", temperature=0.2, max_tokens=300),
            logging=LoggingConfig(level="DEBUG", loggers={"LiteLLM": "WARNING"}),
        )

    def test_minimal_config_uses_defaults(self, write_config: WriteConfig) -> None:
        """model だけ指定すれば残りはデフォルト値"""
        config = load_config(write_config("llm:\n  model: gpt-4o\n"))

        assert config.llm == LLMConfig(model="gpt-4o")
        assert config.logging == LoggingConfig()

    def test_expands_nested_env_vars(
        self, write_config: WriteConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """ネストした値やロガー設定の中でも展開される"""
        monkeypatch.setenv("CS_MODEL", "claude-3-haiku")
        monkeypatch.setenv("CS_LITELLM_LEVEL", "ERROR")
        path = write_config(
            "llm:\n"
            "  model: ${CS_MODEL}\n"
            "logging:\n"
            "  loggers:\n"
            "    LiteLLM: ${CS_LITELLM_LEVEL}\n"
        )

        config = load_config(path)

        assert config.llm.model == "claude-3-haiku"
        assert config.logging.loggers == {"LiteLLM": "ERROR"}

    def test_accepts_str_path(self, write_config: WriteConfig) -> None:
        """str のパスも受け付ける"""
        path = write_config("llm:\n  model: gpt-4o\n")

        assert load_config(str(path)).llm.model == "gpt-4o"

    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("", "'llm'"),
            ("logging:\n  level: INFO\n", "'llm'"),
            ("llm:\n  temperature: 0.1\n", "'llm.model'"),
            ("llm:\n  model: ''\n", "'llm.model'"),
            ("llm: gpt-4o\n", "'llm' must be a mapping"),
            ("- llm\n", "'config' must be a mapping"),
            ("llm:\n  model: x\nlogging: INFO\n", "'logging' must be a mapping"),
            ("llm:\n  model: x\nlogging:\n  level: LOUD\n", "'logging.level'"),
            (
                "llm:\n  model: x\nlogging:\n  loggers:\n    httpx: NOISY\n",
                "'logging.loggers.httpx'",
            ),
        ],
    )
    def test_invalid_content(
        self, write_config: WriteConfig, content: str, expected: str
    ) -> None:
        """内容の不備は箇所を示すConfigValidationErrorになる"""
        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(write_config(content))

        assert expected in str(exc_info.value)
        assert isinstance(exc_info.value, ConfigError)

    def test_undefined_env_var(
        self, write_config: WriteConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """未定義の環境変数はConfigErrorとして扱える"""
        monkeypatch.delenv("CS_MISSING", raising=False)

        with pytest.raises(ConfigError):
            load_config(write_config("llm:\n  model: ${CS_MISSING}\n"))

    def test_missing_file(self, tmp_path: Path) -> None:
        """存在しないファイルはFileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")

    def test_broken_yaml(self, write_config: WriteConfig) -> None:
        """YAML構文エラーはそのまま送出される"""
        with pytest.raises(yaml.YAMLError):
            load_config(write_config("llm: [unclosed\n"))
