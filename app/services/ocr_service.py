import logging

from domains.exceptions import ImageValidationError
from domains.ocr_engine import extract_text
from schemas import EmbeddableImage

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No text detected in the image."


class OcrService:
    """OCR処理を管理するサービスクラス"""

    def __init__(self, vision_client):
        self.vision_client = vision_client

    def extract_text(self, image: EmbeddableImage) -> str:
        """画像からテキストを抽出する

        Raises:
            ImageValidationError: テキストが検出されなかった場合
        """
        logger.info(f"OCR処理を実行中 ({image.mime_type})")
        vision_data = self.vision_client.annotate(image.base64_payload)

        ocr_text = extract_text(vision_data)
        if not ocr_text:
            logger.warning("テキストが検出されませんでした")
            raise ImageValidationError(NO_TEXT_MESSAGE)

        logger.info(f"OCR完了: テキスト長 {len(ocr_text)}")
        return ocr_text
