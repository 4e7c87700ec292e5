import os


class Settings:
    """アプリケーション設定"""

    # Google Cloud Vision設定
    GOOGLE_VISION_API_KEY: str = os.getenv("GOOGLE_VISION_API_KEY", "")
    VISION_API_URL: str = os.getenv(
        "VISION_API_URL", "https://vision.googleapis.com/v1/images:annotate")

    # Dify設定
    DIFY_API_KEY: str = os.getenv("DIFY_API_KEY", "")
    DIFY_API_URL: str = os.getenv("DIFY_API_URL", "https://api.dify.ai/v1")
    DIFY_USER: str = os.getenv("DIFY_USER", "image-extractor-user")

    # 外部APIエラー本文をクライアントへ返す際の最大文字数
    UPSTREAM_ERROR_MAX_CHARS: int = int(
        os.getenv("UPSTREAM_ERROR_MAX_CHARS", "1000"))


# グローバル設定インスタンス
settings = Settings()
