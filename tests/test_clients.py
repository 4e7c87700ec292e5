from unittest.mock import Mock

import pytest

from clients import DifyClient, VisionClient, create_dify_client, create_vision_client
from domains.exceptions import UpstreamError

from conftest import make_response


def test_vision_client_posts_image_with_api_key():
    session = Mock()
    session.post.return_value = make_response(json_data={"responses": []})
    client = VisionClient("google-key", "https://vision.example.com/annotate", session=session)

    assert client.annotate("abc") == {"responses": []}

    args, kwargs = session.post.call_args
    assert args == ("https://vision.example.com/annotate",)
    assert kwargs["params"] == {"key": "google-key"}
    assert kwargs["json"]["requests"][0]["image"] == {"content": "abc"}


def test_vision_client_mirrors_error_status_and_body():
    session = Mock()
    session.post.return_value = make_response(403, text="API key not valid")
    client = VisionClient("bad", "https://vision.example.com/annotate", session=session)

    with pytest.raises(UpstreamError) as exc_info:
        client.annotate("abc")
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Vision API Error: API key not valid"


def test_dify_client_runs_workflow_with_bearer_token():
    session = Mock()
    session.post.return_value = make_response(json_data={"data": {"outputs": {"result": "ok"}}})
    client = DifyClient("dify-key", "https://dify.example.com/v1/", "image-extractor-user",
                        session=session)

    client.run_workflow("Hello World", "抽出してください")

    args, kwargs = session.post.call_args
    assert args == ("https://dify.example.com/v1/workflows/run",)
    assert kwargs["headers"] == {"Authorization": "Bearer dify-key"}
    assert kwargs["json"] == {
        "inputs": {"ocr_text": "Hello World", "user_prompt": "抽出してください"},
        "response_mode": "blocking",
        "user": "image-extractor-user",
    }


def test_dify_client_truncates_long_error_body():
    session = Mock()
    session.post.return_value = make_response(500, text="x" * 50)
    client = DifyClient("dify-key", "https://dify.example.com/v1", "u",
                        session=session, error_max_chars=10)

    with pytest.raises(UpstreamError) as exc_info:
        client.run_workflow("text", "prompt")
    assert exc_info.value.message == "Analysis failed: " + "x" * 10 + "..."
    assert exc_info.value.body == "x" * 50


def test_client_factories_read_settings(configured_settings):
    vision = create_vision_client(configured_settings)
    dify = create_dify_client(configured_settings)

    assert vision.api_key == "google-key"
    assert dify.api_key == "dify-key"
    assert dify.base_url == "https://dify.example.com/v1"
    assert dify.user == "image-extractor-user"
