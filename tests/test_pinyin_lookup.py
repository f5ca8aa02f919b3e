"""
測試 pypinyin 拼音查詢器

注意：讀音內容取決於 pypinyin 詞庫，這裡只驗證包含關係，不驗證完整集合。
"""

import pytest

from pinyinstream.core.exceptions import UnsupportedFormatCombination
from pinyinstream.core.protocols.lookup import RomanizationLookupProtocol
from pinyinstream.languages.chinese.config import (
    CaseType,
    PinyinOutputFormat,
    ToneType,
    VCharType,
)
from pinyinstream.languages.chinese.phonetic_impl import PinyinLookup

pytest.importorskip("pypinyin")


class TestPinyinLookup:
    """預設格式：小寫、無聲調、以 v 表示 ü"""

    def setup_method(self):
        self.lookup = PinyinLookup()

    def test_implements_protocol(self):
        assert isinstance(self.lookup, RomanizationLookupProtocol)

    def test_basic_lookup(self):
        assert "bei" in self.lookup.lookup("北")
        assert "jing" in self.lookup.lookup("京")

    def test_heteronym(self):
        """多音字回傳多個候選讀音"""
        readings = self.lookup.lookup("行")
        assert "xing" in readings
        assert "hang" in readings

    def test_readings_are_plain_lowercase(self):
        for char in "北京重慶行長":
            for reading in self.lookup.lookup(char):
                assert reading == reading.lower()
                assert reading.isalpha()

    def test_readings_are_distinct(self):
        """去掉聲調後重複的讀音只保留一個"""
        readings = self.lookup.lookup("中")
        assert len(readings) == len(set(readings))
        assert "zhong" in readings

    def test_umlaut_as_v(self):
        assert "lv" in self.lookup.lookup("绿")

    def test_non_chinese_returns_empty(self):
        assert self.lookup.lookup("a") == []
        assert self.lookup.lookup("1") == []
        assert self.lookup.lookup("，") == []
        assert self.lookup.lookup("") == []

    def test_cache_stats(self):
        PinyinLookup.clear_cache()
        self.lookup.lookup("北")
        self.lookup.lookup("北")
        stats = PinyinLookup.get_cache_stats()
        assert stats["hits"] >= 1
        assert stats["misses"] >= 1


class TestOutputFormat:
    """其他輸出格式"""

    def test_u_unicode(self):
        lookup = PinyinLookup(PinyinOutputFormat(v_char_type=VCharType.WITH_U_UNICODE))
        assert "lü" in lookup.lookup("绿")

    def test_u_and_colon(self):
        lookup = PinyinLookup(PinyinOutputFormat(v_char_type=VCharType.WITH_U_AND_COLON))
        assert "lu:" in lookup.lookup("绿")

    def test_tone_number(self):
        lookup = PinyinLookup(PinyinOutputFormat(tone_type=ToneType.WITH_TONE_NUMBER))
        assert "lv4" in lookup.lookup("绿")

    def test_tone_mark(self):
        lookup = PinyinLookup(
            PinyinOutputFormat(tone_type=ToneType.WITH_TONE_MARK, v_char_type=VCharType.WITH_U_UNICODE)
        )
        assert "běi" in lookup.lookup("北")

    def test_uppercase(self):
        lookup = PinyinLookup(PinyinOutputFormat(case_type=CaseType.UPPERCASE))
        assert "BEI" in lookup.lookup("北")

    @pytest.mark.parametrize("v_char_type", [VCharType.WITH_V, VCharType.WITH_U_AND_COLON])
    def test_tone_mark_requires_unicode_u(self, v_char_type):
        lookup = PinyinLookup(PinyinOutputFormat(tone_type=ToneType.WITH_TONE_MARK, v_char_type=v_char_type))
        with pytest.raises(UnsupportedFormatCombination):
            lookup.lookup("北")
