"""Domain exceptions."""


class SummaryNotImplementedError(NotImplementedError):
    """要約ロジックが未実装の場合に発生する例外

    サービスはチャットクライアントを保持しているが、
    プロンプト構築や応答の解析はまだ存在しない。
    """

    def __init__(self, message_count: int, message: str = "") -> None:
        """初期化

        Args:
            message_count: 要約対象として渡されたメッセージ数
            message: エラーメッセージ（オプション）
        """
        self.message_count = message_count
        super().__init__(
            message
            or f"Chat summarization is not implemented ({message_count} messages)"
        )
