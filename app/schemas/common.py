from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """エラーレスポンス"""
    ok: bool = False
    error: str
