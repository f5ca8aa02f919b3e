"""
依賴檢查與延遲導入

pypinyin 只在第一次實際查詢拼音時才載入，
讓只使用自訂 lookup 的情境（例如測試）不必付出載入字典的成本。
"""

import importlib.util

CHINESE_INSTALL_HINT = (
    "缺少中文依賴。請執行:\n"
    "  pip install pypinyin\n"
    "或重新安裝本套件:\n"
    "  pip install pinyinstream"
)


def is_chinese_available() -> bool:
    """檢查 pypinyin 是否可用"""
    return importlib.util.find_spec("pypinyin") is not None


def check_chinese_dependencies() -> None:
    """
    確認中文依賴已安裝

    Raises:
        ImportError: 缺少 pypinyin 時，附帶安裝提示
    """
    if not is_chinese_available():
        raise ImportError(CHINESE_INSTALL_HINT)
