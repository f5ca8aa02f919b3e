"""
例外定義
"""


class PinyinStreamError(Exception):
    """pinyinstream 所有例外的基類"""


class UnsupportedFormatCombination(PinyinStreamError):
    """
    拼音輸出格式組合不合法

    例如：帶聲調符號 (WITH_TONE_MARK) 卻要求以 'v' 或 'u:' 表示 ü。
    由 lookup 在查詢時拋出，展開器會在本地吸收並降級為「不轉換」。
    """

    def __init__(self, message: str, format_repr: str = ""):
        super().__init__(message)
        self.format_repr = format_repr
