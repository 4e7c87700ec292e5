"""
Google Cloud Vision (images:annotate) のリクエスト生成とレスポンス解析
"""
import logging

logger = logging.getLogger(__name__)


def build_annotate_payload(image_base64: str) -> dict:
    """TEXT_DETECTION のリクエストボディを作成する"""
    return {
        "requests": [
            {
                "image": {
                    "content": image_base64
                },
                "features": [
                    {
                        "type": "TEXT_DETECTION"
                    }
                ]
            }
        ]
    }


def extract_text(vision_data: dict) -> str:
    """
    Vision API レスポンスから検出テキストを取り出す

    responses[0].textAnnotations[0].description が全文。
    アノテーションが無い場合は空文字を返す。
    """
    responses = vision_data.get("responses") or []
    first = responses[0] if responses else {}

    # 画像単位のエラーは HTTP 200 のまま responses[0].error に入る（テキスト未検出として扱う）
    error = first.get("error")
    if error:
        message = error.get("message", "") if isinstance(error, dict) else str(error)
        logger.warning(f"Vision API returned an image error: {message}")

    detections = first.get("textAnnotations") or []
    if not detections:
        return ""
    return detections[0].get("description") or ""
