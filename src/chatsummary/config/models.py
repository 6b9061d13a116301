"""設定の型定義"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LLMConfig:
    """要約に使うモデルと生成パラメータ

    フィールド名は litellm.completion の引数名と同じにしている。
    """

    model: str
    temperature: float = 0.7
    max_tokens: int = 1000


@dataclass(frozen=True)
class LoggingConfig:
    """ルートロガーのレベルと、ロガー名ごとの上書き"""

    level: str = "INFO"
    loggers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AppConfig:
    """config.yaml 全体"""

    llm: LLMConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)
