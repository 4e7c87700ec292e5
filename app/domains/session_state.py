"""
画面の解析セッション状態

アップロード・解析中・コピー済みの各フラグを1つの不変な値として保持し、
遷移関数でのみ新しい状態を作る。

    idle → image_ready → analyzing → succeeded | failed

サーバー側のルーターからは使わない。APIを呼び出すクライアント（画面）側が
保持する状態の契約で、finish_analysis は /api/analyze のレスポンスの ok で
成否を判別する。
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from domains.exceptions import InvalidTransitionError


class Phase(str, Enum):
    IDLE = "idle"
    IMAGE_READY = "image_ready"
    ANALYZING = "analyzing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class AnalysisState(BaseModel):
    """1セッション分の画面状態"""
    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.IDLE
    image: Optional[str] = None
    answer: Optional[str] = None
    error: Optional[str] = None
    copied: bool = False


def _require(state: AnalysisState, *phases: Phase) -> None:
    if state.phase not in phases:
        allowed = ", ".join(p.value for p in phases)
        raise InvalidTransitionError(
            f"Cannot transition from {state.phase.value} (expected one of: {allowed})")


def select_image(state: AnalysisState, image: str) -> AnalysisState:
    """画像を選択する（結果とエラーはクリア）"""
    _require(state, Phase.IDLE, Phase.IMAGE_READY, Phase.SUCCEEDED, Phase.FAILED)
    return AnalysisState(phase=Phase.IMAGE_READY, image=image)


def reject_file(state: AnalysisState, message: str) -> AnalysisState:
    """画像以外のファイルが選ばれた。選択済みの画像は残す"""
    _require(state, Phase.IDLE, Phase.IMAGE_READY, Phase.SUCCEEDED, Phase.FAILED)
    return AnalysisState(phase=Phase.FAILED, image=state.image, error=message)


def start_analysis(state: AnalysisState) -> AnalysisState:
    _require(state, Phase.IMAGE_READY, Phase.SUCCEEDED, Phase.FAILED)
    if not state.image:
        raise InvalidTransitionError("No image selected")
    return AnalysisState(phase=Phase.ANALYZING, image=state.image)


def finish_analysis(state: AnalysisState, response: dict) -> AnalysisState:
    """
    サーバーのレスポンス（ok で成否を判別）を反映する
    """
    _require(state, Phase.ANALYZING)
    if response.get("ok"):
        return AnalysisState(
            phase=Phase.SUCCEEDED, image=state.image, answer=response.get("answer", ""))
    return AnalysisState(
        phase=Phase.FAILED,
        image=state.image,
        error=response.get("error") or "解析に失敗しました",
    )


def mark_copied(state: AnalysisState) -> AnalysisState:
    _require(state, Phase.SUCCEEDED)
    return state.model_copy(update={"copied": True})


def clear_copied(state: AnalysisState) -> AnalysisState:
    return state.model_copy(update={"copied": False})
