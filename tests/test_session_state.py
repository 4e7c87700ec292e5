import pytest

from domains.exceptions import InvalidTransitionError
from domains.session_state import (
    AnalysisState, Phase, clear_copied, finish_analysis, mark_copied,
    reject_file, select_image, start_analysis
)

IMAGE = "data:image/jpeg;base64,aGVsbG8="


def test_successful_flow():
    state = AnalysisState()
    assert state.phase == Phase.IDLE

    state = select_image(state, IMAGE)
    assert state.phase == Phase.IMAGE_READY

    state = start_analysis(state)
    assert state.phase == Phase.ANALYZING
    assert state.answer is None and state.error is None

    state = finish_analysis(state, {"ok": True, "answer": "Item: Value"})
    assert state.phase == Phase.SUCCEEDED
    assert state.answer == "Item: Value"
    assert state.image == IMAGE


def test_failed_response_uses_error_message():
    state = start_analysis(select_image(AnalysisState(), IMAGE))

    state = finish_analysis(state, {"ok": False, "error": "No text detected in the image."})

    assert state.phase == Phase.FAILED
    assert state.error == "No text detected in the image."
    assert state.answer is None


def test_failed_response_without_message_gets_default():
    state = start_analysis(select_image(AnalysisState(), IMAGE))

    state = finish_analysis(state, {"ok": False})

    assert state.error == "解析に失敗しました"


def test_states_are_immutable():
    state = AnalysisState()
    with pytest.raises(Exception):
        state.phase = Phase.ANALYZING

    select_image(state, IMAGE)
    assert state.phase == Phase.IDLE


def test_cannot_analyze_without_image():
    with pytest.raises(InvalidTransitionError):
        start_analysis(AnalysisState())


def test_cannot_analyze_twice():
    state = start_analysis(select_image(AnalysisState(), IMAGE))
    with pytest.raises(InvalidTransitionError):
        start_analysis(state)


def test_cannot_select_image_while_analyzing():
    state = start_analysis(select_image(AnalysisState(), IMAGE))
    with pytest.raises(InvalidTransitionError):
        select_image(state, IMAGE)


def test_rejected_file_keeps_previous_image_and_allows_retry():
    state = select_image(AnalysisState(), IMAGE)

    state = reject_file(state, "画像ファイルを選択してください。")
    assert state.phase == Phase.FAILED
    assert state.image == IMAGE

    assert start_analysis(state).phase == Phase.ANALYZING


def test_rejected_file_without_image_cannot_be_analyzed():
    state = reject_file(AnalysisState(), "画像ファイルを選択してください。")
    with pytest.raises(InvalidTransitionError):
        start_analysis(state)


def test_selecting_new_image_clears_previous_result():
    state = start_analysis(select_image(AnalysisState(), IMAGE))
    state = mark_copied(finish_analysis(state, {"ok": True, "answer": "old"}))

    state = select_image(state, "data:image/png;base64,bmV3")

    assert state.answer is None
    assert state.copied is False


def test_copy_flag_only_after_success():
    with pytest.raises(InvalidTransitionError):
        mark_copied(select_image(AnalysisState(), IMAGE))

    state = start_analysis(select_image(AnalysisState(), IMAGE))
    state = mark_copied(finish_analysis(state, {"ok": True, "answer": "x"}))
    assert state.copied is True
    assert clear_copied(state).copied is False
