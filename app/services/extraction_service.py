import logging

from domains.extraction_engine import normalize_workflow_result
from domains.prompts import resolve_user_prompt

logger = logging.getLogger(__name__)


class ExtractionService:
    """OCRテキストをワークフローへ渡して情報抽出するサービスクラス"""

    def __init__(self, dify_client):
        self.dify_client = dify_client

    def extract_information(self, ocr_text: str, prompt=None) -> str:
        """ワークフローを実行し、正規化した回答文字列を返す"""
        user_prompt = resolve_user_prompt(prompt)
        logger.info("ワークフローを実行中")
        workflow_data = self.dify_client.run_workflow(ocr_text, user_prompt)

        answer = normalize_workflow_result(workflow_data)
        logger.info(f"情報抽出完了: 回答長 {len(answer)}")
        return answer
