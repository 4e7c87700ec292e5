"""
外部APIクライアント設定
"""
import logging
import requests

from config import settings
from domains.exceptions import UpstreamError
from domains.ocr_engine import build_annotate_payload
from domains.extraction_engine import build_workflow_payload

logger = logging.getLogger(__name__)


def create_http_session():
    """
    JSON送受信用のHTTPセッションを作成
    """
    session = requests.Session()
    session.headers.update({"Content-Type": "application/json"})
    return session


class VisionClient:
    """Google Cloud Vision API (REST) を呼び出すクライアント"""

    def __init__(self, api_key: str, api_url: str, session=None, error_max_chars=None):
        self.api_key = api_key
        self.api_url = api_url
        self.session = session or create_http_session()
        self.error_max_chars = error_max_chars

    def annotate(self, image_base64: str) -> dict:
        """TEXT_DETECTION を実行してレスポンスJSONを返す

        Raises:
            UpstreamError: Vision API が失敗ステータスを返した場合
        """
        response = self.session.post(
            self.api_url,
            params={"key": self.api_key},
            json=build_annotate_payload(image_base64),
        )

        if not response.ok:
            logger.error(f"Vision API failed: {response.text}")
            raise UpstreamError(
                "Vision API Error", response.status_code, response.text,
                max_chars=self.error_max_chars)

        return response.json()


class DifyClient:
    """Dify Workflow API を呼び出すクライアント"""

    def __init__(self, api_key: str, base_url: str, user: str, session=None, error_max_chars=None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user = user
        self.session = session or create_http_session()
        self.error_max_chars = error_max_chars

    def run_workflow(self, ocr_text: str, user_prompt: str) -> dict:
        """ワークフローを blocking モードで実行してレスポンスJSONを返す

        Raises:
            UpstreamError: Dify が失敗ステータスを返した場合
        """
        response = self.session.post(
            f"{self.base_url}/workflows/run",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json=build_workflow_payload(ocr_text, user_prompt, self.user),
        )

        if not response.ok:
            logger.error(f"Workflow failed: {response.text}")
            raise UpstreamError(
                "Analysis failed", response.status_code, response.text,
                max_chars=self.error_max_chars)

        return response.json()


def create_vision_client(config=None):
    """
    設定からVisionクライアントを作成
    """
    config = config or settings
    return VisionClient(
        api_key=config.GOOGLE_VISION_API_KEY,
        api_url=config.VISION_API_URL,
        error_max_chars=config.UPSTREAM_ERROR_MAX_CHARS,
    )


def create_dify_client(config=None):
    """
    設定からDifyクライアントを作成
    """
    config = config or settings
    return DifyClient(
        api_key=config.DIFY_API_KEY,
        base_url=config.DIFY_API_URL,
        user=config.DIFY_USER,
        error_max_chars=config.UPSTREAM_ERROR_MAX_CHARS,
    )
