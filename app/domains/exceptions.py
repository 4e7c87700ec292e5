"""
画像テキスト抽出で発生する例外

各例外はクライアントへ返すメッセージとHTTPステータスコードを保持する。
"""
from typing import Optional


class ExtractorError(Exception):
    """抽出処理の基底例外"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(ExtractorError):
    """APIキーなどの必須設定が不足している"""

    status_code = 500


class ImageValidationError(ExtractorError):
    """入力が不正（画像なし・画像以外・テキスト未検出）"""

    status_code = 400


class ImageProcessingError(ExtractorError):
    """画像のデコード・エンコードに失敗した"""

    status_code = 422


class UpstreamError(ExtractorError):
    """外部APIが失敗ステータスを返した"""

    def __init__(self, label: str, status_code: int, body: str = "",
                 max_chars: Optional[int] = None):
        self.label = label
        self.body = body
        detail = body
        if max_chars is not None and len(detail) > max_chars:
            detail = detail[:max_chars] + "..."
        super().__init__(f"{label}: {detail}", status_code)


class UnexpectedError(ExtractorError):
    """上記以外の想定外エラー（通信障害・不正なJSONなど）"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(f"Internal Server Error: {message}")


class InvalidTransitionError(ValueError):
    """画面状態の不正な遷移"""
    pass
