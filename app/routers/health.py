from fastapi import APIRouter

from config import settings

router = APIRouter(tags=["Health"])

SERVICE_NAME = "image-text-extractor"


@router.get("/")
def read_root():
    """稼働確認と利用可能なエンドポイント"""
    return {
        "service": SERVICE_NAME,
        "endpoints": ["/api/analyze", "/api/analyze/upload", "/api/prepare"],
    }


@router.get("/health")
def health_check():
    """ヘルスチェック（APIキーの設定有無も返す）"""
    return {
        "status": "ok",
        "ocr_configured": bool(settings.GOOGLE_VISION_API_KEY),
        "workflow_configured": bool(settings.DIFY_API_KEY),
    }
