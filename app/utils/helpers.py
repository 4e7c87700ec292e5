"""
共通ヘルパー関数
"""
import base64
import logging
import re
from io import BytesIO
from typing import Optional
from PIL import Image, ImageOps, UnidentifiedImageError

from domains.exceptions import ImageProcessingError, ImageValidationError
from schemas import EmbeddableImage, PreparedImage

logger = logging.getLogger(__name__)

MAX_IMAGE_DIMENSION = 1024
JPEG_QUALITY = 70
OUTPUT_MIME_TYPE = "image/jpeg"

NOT_AN_IMAGE_MESSAGE = "画像ファイルを選択してください。"

_DATA_URL_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.+)$", re.DOTALL)


def is_image_mime_type(content_type: Optional[str]) -> bool:
    return bool(content_type) and content_type.lower().startswith("image/")


def parse_data_url(value: str) -> EmbeddableImage:
    """
    data:<mime>;base64,<payload> 形式の文字列を EmbeddableImage に変換する

    Raises:
        ImageValidationError: 形式が不正、または画像のMIMEタイプでない場合
    """
    match = _DATA_URL_PATTERN.match(value.strip())
    if not match:
        raise ImageValidationError(
            "Image must be a data URL (data:<mime>;base64,<payload>)")

    mime_type = match.group("mime")
    if not is_image_mime_type(mime_type):
        raise ImageValidationError(NOT_AN_IMAGE_MESSAGE)

    payload = re.sub(r"\s+", "", match.group("payload"))
    return EmbeddableImage(mime_type=mime_type, base64_payload=payload)


def _to_rgb(img):
    """JPEG保存用にRGBへ変換（透過部分は白で塗りつぶす）"""
    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        rgba = img.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


def resize_image(image_data, max_dimension=MAX_IMAGE_DIMENSION, quality=JPEG_QUALITY):
    """
    画像をリサイズしてJPEGに再エンコードする関数
    - 長辺が max_dimension を超える場合は長辺を max_dimension に合わせて縮小
    - 拡大はしない
    - アスペクト比は維持

    Returns:
        (JPEGバイト列, 元のサイズ, リサイズ後のサイズ)
    """
    try:
        img = Image.open(BytesIO(image_data))
        img.load()
        img = ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as e:
        logger.error(f"画像デコードエラー: {str(e)}")
        raise ImageProcessingError(f"画像を読み込めませんでした: {str(e)}")

    width, height = img.size
    logger.info(f"元の画像サイズ: {width}x{height}px")

    scale = min(1.0, max_dimension / max(width, height))
    new_width = max(1, round(width * scale))
    new_height = max(1, round(height * scale))

    if scale < 1.0:
        img = img.resize((new_width, new_height), Image.LANCZOS)
        logger.info(f"リサイズ後の画像サイズ: {new_width}x{new_height}px")
    else:
        logger.info("リサイズ不要: 再圧縮のみ実行")

    try:
        output = BytesIO()
        _to_rgb(img).save(output, format="JPEG", quality=quality)
    except (OSError, ValueError) as e:
        logger.error(f"画像エンコードエラー: {str(e)}")
        raise ImageProcessingError(f"画像を変換できませんでした: {str(e)}")

    return output.getvalue(), (width, height), (new_width, new_height)


def prepare_image(image_data: bytes, content_type: Optional[str],
                  max_dimension: int = MAX_IMAGE_DIMENSION,
                  quality: int = JPEG_QUALITY) -> PreparedImage:
    """
    アップロードされた画像を送信用に縮小・圧縮し、埋め込み可能な形式にする

    Raises:
        ImageValidationError: MIMEタイプが画像でない場合（デコードは行わない）
        ImageProcessingError: デコード・エンコードに失敗した場合
    """
    if not is_image_mime_type(content_type):
        logger.warning(f"画像以外のファイルが指定されました: {content_type}")
        raise ImageValidationError(NOT_AN_IMAGE_MESSAGE)

    jpeg_data, (width, height), (new_width, new_height) = resize_image(
        image_data, max_dimension=max_dimension, quality=quality)

    return PreparedImage(
        image=EmbeddableImage(
            mime_type=OUTPUT_MIME_TYPE,
            base64_payload=base64.b64encode(jpeg_data).decode("utf-8"),
        ),
        width=new_width,
        height=new_height,
        original_width=width,
        original_height=height,
    )
