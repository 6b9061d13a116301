"""アプリケーションのエントリポイント"""

import argparse
import logging
import sys

import yaml

from chatsummary.config import ConfigError, LoggingConfig, load_config
from chatsummary.domain.exceptions import SummaryNotImplementedError
from chatsummary.infrastructure.exceptions import LLMError, TranscriptError
from chatsummary.infrastructure.llm import LiteLLMClient, LLMChatSummaryService
from chatsummary.infrastructure.transcript import load_chat_messages

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# 128 + SIGINT
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


def apply_logging_config(config: LoggingConfig) -> None:
    """設定ファイルのログレベルを反映する

    出力形式は起動時の basicConfig のまま変えない。
    """
    logging.getLogger().setLevel(config.level)
    for name, level in config.loggers.items():
        logging.getLogger(name).setLevel(level)


def create_parser() -> argparse.ArgumentParser:
    """CLIパーサーを作成"""
    parser = argparse.ArgumentParser(
        prog="chatsummary",
        description="チャット履歴の要約",
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="設定ファイルのパス (default: config.yaml)",
    )
    parser.add_argument(
        "transcript",
        help="要約するメッセージを記述した YAML ファイル",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """要約を実行する"""
    args = create_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ConfigError) as e:
        logger.error("Failed to load config %s: %s", args.config, e)
        sys.exit(1)

    apply_logging_config(config.logging)

    try:
        messages = load_chat_messages(args.transcript)
    except (OSError, yaml.YAMLError, TranscriptError) as e:
        logger.error("Failed to load transcript %s: %s", args.transcript, e)
        sys.exit(1)

    service = LLMChatSummaryService(LiteLLMClient(config.llm))
    logger.info("Summarizing %d messages with %s", len(messages), config.llm.model)

    try:
        summary = service.summarize(messages)
    except SummaryNotImplementedError as e:
        logger.error("%s", e)
        sys.exit(2)
    except LLMError as e:
        logger.error("Summarization failed: %s", e)
        sys.exit(1)

    print(summary)


def run() -> None:
    """Run the command line entry point."""
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    run()
