"""
ワークフローへ渡すプロンプト定義
"""

# プロンプト未指定時にワークフローの user_prompt として渡す既定値
DEFAULT_USER_PROMPT = "抽出してください"


def resolve_user_prompt(prompt=None) -> str:
    """空・未指定のプロンプトを既定値に置き換える"""
    if not prompt:
        return DEFAULT_USER_PROMPT
    return prompt
