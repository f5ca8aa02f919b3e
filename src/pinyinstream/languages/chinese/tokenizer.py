"""
文字分段分詞器

以空白切分，再把每段依文字系統（中文 / 日文假名 / ASCII）切成連續片段。
只用於讓引擎與範例能從原始文字直接產生上游詞元，並非語言學分詞器；
正式索引時應改接真正的中文分詞器輸出。
"""

from typing import List, Optional, Tuple

from pinyinstream.core.tokenizer_interface import Tokenizer


def _script_of(char: str) -> Optional[str]:
    code = ord(char)
    if char.isspace():
        return None
    # 1. ASCII -> 英文
    if code < 128:
        return "en"
    # 2. 平假名/片假名 -> 日文
    if (0x3040 <= code <= 0x309F) or (0x30A0 <= code <= 0x30FF):
        return "ja"
    # 3. 其他 -> 中文（包含漢字與全形標點）
    return "zh"


class ScriptRunTokenizer(Tokenizer):
    """
    文字系統分段分詞器

    範例:
        >>> ScriptRunTokenizer().tokenize("我愛 Python程式")
        ['我愛', 'Python', '程式']
    """

    def get_token_indices(self, text: str) -> List[Tuple[int, int]]:
        """
        取得每個片段在原始文本中的 (start_index, end_index)

        空白不屬於任何片段，會被略過。
        """
        if not text:
            return []

        indices = []
        start = None
        current_script = None

        for i, char in enumerate(text):
            script = _script_of(char)
            if script != current_script:
                # 文字系統切換點，結束當前片段
                if current_script is not None:
                    indices.append((start, i))
                start = i
                current_script = script

        # 處理最後一個片段
        if current_script is not None:
            indices.append((start, len(text)))

        return indices
