from fastapi import APIRouter, File, UploadFile
import logging

from schemas import PrepareResponse, ErrorResponse
from utils import prepare_image
from routers.common import error_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Prepare"])


@router.post(
    "/prepare",
    response_model=PrepareResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def prepare(file: UploadFile = File(...)):
    """画像を縮小・圧縮して data URL を返す"""
    try:
        prepared = prepare_image(file.file.read(), file.content_type)
        return PrepareResponse(
            image=prepared.image.to_data_url(),
            mime_type=prepared.image.mime_type,
            width=prepared.width,
            height=prepared.height,
            original_width=prepared.original_width,
            original_height=prepared.original_height,
            was_resized=prepared.was_resized,
        )
    except Exception as e:
        return error_response(e)
