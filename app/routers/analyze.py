from typing import Optional
from fastapi import APIRouter, File, Form, UploadFile
import logging

from schemas import ExtractionRequest, ExtractionResponse, ErrorResponse
from services.image_processing_pipeline import ImageProcessingPipeline
from routers.common import error_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Analyze"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

# パイプラインのインスタンス（設定はプロセス起動時に一度だけ読み込む）
pipeline = ImageProcessingPipeline()


def set_pipeline(new_pipeline):
    """パイプラインを差し替える"""
    global pipeline
    pipeline = new_pipeline


@router.post("/analyze", response_model=ExtractionResponse, responses=ERROR_RESPONSES)
def analyze(request: ExtractionRequest):
    """画像からテキストを抽出し、ワークフローで構造化した結果を返す"""
    logger.info("API Request received")
    try:
        answer = pipeline.process_complete_pipeline(request.image, request.prompt)
        return ExtractionResponse(answer=answer)
    except Exception as e:
        return error_response(e)


@router.post("/analyze/upload", response_model=ExtractionResponse, responses=ERROR_RESPONSES)
def analyze_upload(file: UploadFile = File(...), prompt: Optional[str] = Form(None)):
    """アップロード画像をリサイズしてから解析する"""
    logger.info(f"Upload analyze request received: {file.filename}")
    try:
        image_data = file.file.read()
        answer = pipeline.process_upload(image_data, file.content_type, prompt)
        return ExtractionResponse(answer=answer)
    except Exception as e:
        return error_response(e)
