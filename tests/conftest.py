import base64
from io import BytesIO
from unittest.mock import Mock

import pytest
from PIL import Image

from config import Settings


def make_image_bytes(size, fmt="PNG", mode="RGB", color=(200, 30, 30)):
    img = Image.new(mode, size, color)
    buffer = BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


def make_data_url(size=(20, 10)):
    payload = base64.b64encode(make_image_bytes(size)).decode("utf-8")
    return f"data:image/png;base64,{payload}"


def make_response(status_code=200, json_data=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = json_data
    response.text = text
    return response


@pytest.fixture
def configured_settings():
    config = Settings()
    config.GOOGLE_VISION_API_KEY = "google-key"
    config.DIFY_API_KEY = "dify-key"
    config.DIFY_API_URL = "https://dify.example.com/v1"
    config.UPSTREAM_ERROR_MAX_CHARS = 1000
    return config
