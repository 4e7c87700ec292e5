from pydantic import BaseModel


class EmbeddableImage(BaseModel):
    """MIMEタイプとBase64ペイロードを持つ埋め込み可能な画像"""
    mime_type: str
    base64_payload: str

    def to_data_url(self) -> str:
        """data:<mime>;base64,<payload> 形式の文字列に変換する"""
        return f"data:{self.mime_type};base64,{self.base64_payload}"


class PreparedImage(BaseModel):
    """リサイズ・圧縮済みの画像"""
    image: EmbeddableImage
    width: int
    height: int
    original_width: int
    original_height: int

    @property
    def was_resized(self) -> bool:
        return (self.width, self.height) != (self.original_width, self.original_height)


class PrepareResponse(BaseModel):
    """画像前処理APIのレスポンス"""
    ok: bool = True
    image: str
    mime_type: str
    width: int
    height: int
    original_width: int
    original_height: int
    was_resized: bool
