import logging
import traceback

from fastapi.responses import JSONResponse

from domains.exceptions import ExtractorError, UnexpectedError
from schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(error: Exception) -> JSONResponse:
    """例外を { ok: false, error } 形式のレスポンスに変換する"""
    if not isinstance(error, ExtractorError):
        logger.error(f"Unexpected error: {str(error)}")
        logger.error(traceback.format_exc())
        error = UnexpectedError(str(error))

    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(error=error.message).model_dump(),
    )
