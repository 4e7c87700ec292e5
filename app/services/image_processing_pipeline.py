"""
画像処理パイプライン
OCR→情報抽出の完全フローを管理
受け取った画像に対してOCR処理と情報抽出を順次実行
"""
import logging
from typing import Optional

from clients import create_dify_client, create_vision_client
from config import settings
from domains.exceptions import (
    ConfigurationError, ExtractorError, ImageValidationError, UnexpectedError
)
from services.extraction_service import ExtractionService
from services.ocr_service import OcrService
from utils import is_image_mime_type, parse_data_url, prepare_image
from utils.helpers import NOT_AN_IMAGE_MESSAGE

logger = logging.getLogger(__name__)


class ImageProcessingPipeline:
    """OCR→情報抽出の完全パイプライン"""

    def __init__(self, config=None, ocr_service=None, extraction_service=None):
        self.config = config or settings
        self.ocr_service = ocr_service or OcrService(
            create_vision_client(self.config))
        self.extraction_service = extraction_service or ExtractionService(
            create_dify_client(self.config))

    def check_configuration(self) -> None:
        """APIキーが設定されているか確認する"""
        logger.info(f"Dify Key configured: {bool(self.config.DIFY_API_KEY)}")
        logger.info(
            f"Google Key configured: {bool(self.config.GOOGLE_VISION_API_KEY)}")

        if not self.config.DIFY_API_KEY:
            logger.error("Missing Dify API Key")
            raise ConfigurationError("Dify API Key is not configured")
        if not self.config.GOOGLE_VISION_API_KEY:
            logger.error("Missing Google Vision API Key")
            raise ConfigurationError("Google Vision API Key is not configured")

    def process_complete_pipeline(self, image: Optional[str], prompt: Optional[str] = None) -> str:
        """OCR→情報抽出の完全パイプラインを実行し、回答文字列を返す

        Raises:
            ExtractorError: いずれかの段階で失敗した場合
        """
        try:
            logger.info("Starting complete pipeline")

            if not image:
                raise ImageValidationError("Image is required")

            # 外部APIを呼ぶ前に設定を確認
            self.check_configuration()

            embeddable = parse_data_url(image)

            # 1. OCR処理
            ocr_text = self.ocr_service.extract_text(embeddable)

            # 2. 情報抽出処理
            answer = self.extraction_service.extract_information(ocr_text, prompt)

            logger.info("Successfully completed pipeline")
            return answer

        except ExtractorError as e:
            logger.error(f"Pipeline failed: {e.message}")
            raise
        except Exception as e:
            logger.error(f"Pipeline failed unexpectedly: {e}")
            raise UnexpectedError(str(e)) from e

    def process_upload(self, image_data: bytes, content_type: Optional[str],
                       prompt: Optional[str] = None) -> str:
        """アップロード画像をリサイズしてからパイプラインを実行する"""
        if not is_image_mime_type(content_type):
            raise ImageValidationError(NOT_AN_IMAGE_MESSAGE)

        # リサイズの前に設定を確認
        self.check_configuration()

        prepared = prepare_image(image_data, content_type)
        return self.process_complete_pipeline(prepared.image.to_data_url(), prompt)
