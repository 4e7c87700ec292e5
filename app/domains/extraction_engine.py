"""
Dify ワークフロー (/workflows/run) のリクエスト生成と結果の正規化
"""
import json
import logging

logger = logging.getLogger(__name__)


def build_workflow_payload(ocr_text: str, user_prompt: str, user: str) -> dict:
    """blocking モードのワークフロー実行リクエストを作成する"""
    return {
        "inputs": {
            "ocr_text": ocr_text,
            "user_prompt": user_prompt
        },
        "response_mode": "blocking",
        "user": user
    }


def normalize_workflow_result(workflow_data: dict) -> str:
    """
    ワークフローのレスポンスをクライアント向けの文字列にまとめる

    レスポンス構造: { data: { outputs: { result: "..." }, status: "succeeded" } }
    outputs.result が無い場合は outputs 全体をJSON文字列にして返す。
    """
    data = workflow_data.get("data") or {}

    if data.get("status") == "failed":
        logger.error(f"Workflow run failed: {data.get('error')}")

    outputs = data.get("outputs")
    result = outputs.get("result") if isinstance(outputs, dict) else None

    if result:
        if isinstance(result, str):
            return result
        return json.dumps(result, ensure_ascii=False, indent=2)

    logger.warning("outputs.result が見つからないため outputs 全体を返します")
    return json.dumps(outputs, ensure_ascii=False, indent=2)
