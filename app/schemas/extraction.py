from pydantic import BaseModel
from typing import Optional


class ExtractionRequest(BaseModel):
    """テキスト抽出リクエスト

    image は "data:image/png;base64,..." 形式
    """
    image: Optional[str] = None
    prompt: Optional[str] = None


class ExtractionResponse(BaseModel):
    """テキスト抽出結果"""
    ok: bool = True
    answer: str
