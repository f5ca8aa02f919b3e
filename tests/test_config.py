"""
測試配置類別
"""

import dataclasses

import pytest

from pinyinstream.config import (
    DEFAULT_CONFIG,
    NO_POLYPHONE_LIMIT,
    OutputType,
    PinyinTransformConfig,
    normalize_polyphone_freq,
)
from pinyinstream.core.exceptions import UnsupportedFormatCombination
from pinyinstream.languages.chinese.config import PinyinOutputFormat, ToneType, VCharType


class TestPinyinTransformConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.output_type is OutputType.PINYIN
        assert DEFAULT_CONFIG.min_term_length == 2
        assert DEFAULT_CONFIG.max_polyphone_freq == 10
        assert DEFAULT_CONFIG.keep_original is True
        assert DEFAULT_CONFIG.is_polyphone_limited

    def test_min_term_length_floor(self):
        assert PinyinTransformConfig(min_term_length=0).min_term_length == 1
        assert PinyinTransformConfig(min_term_length=-5).min_term_length == 1

    @pytest.mark.parametrize("value", [None, 0, -1])
    def test_no_polyphone_limit(self, value):
        config = PinyinTransformConfig(max_polyphone_freq=value)
        assert config.max_polyphone_freq == NO_POLYPHONE_LIMIT
        assert not config.is_polyphone_limited

    @pytest.mark.parametrize(
        "value, expected",
        [(None, NO_POLYPHONE_LIMIT), (0, NO_POLYPHONE_LIMIT), (-1, NO_POLYPHONE_LIMIT), (1, 1), (10, 10)],
    )
    def test_normalize_polyphone_freq(self, value, expected):
        assert normalize_polyphone_freq(value) == expected

    def test_output_type_from_int(self):
        """與舊版常數相容：1 / 2 / 3"""
        assert PinyinTransformConfig(output_type=3).output_type is OutputType.BOTH
        assert PinyinTransformConfig(output_type=2).output_type is OutputType.ABBREVIATION

    def test_output_type_flags(self):
        both = PinyinTransformConfig(output_type=OutputType.BOTH)
        assert both.wants_pinyin and both.wants_abbreviation
        abbr = PinyinTransformConfig(output_type=OutputType.ABBREVIATION)
        assert abbr.wants_abbreviation and not abbr.wants_pinyin

    @pytest.mark.parametrize("value", [0, 4, 7, "pinyin"])
    def test_invalid_output_type(self, value):
        with pytest.raises(ValueError):
            PinyinTransformConfig(output_type=value)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.keep_original = False


class TestPinyinOutputFormat:

    def test_default_is_valid(self):
        PinyinOutputFormat().validate()

    def test_tone_mark_with_unicode_u_is_valid(self):
        PinyinOutputFormat(tone_type=ToneType.WITH_TONE_MARK, v_char_type=VCharType.WITH_U_UNICODE).validate()

    def test_tone_mark_with_v_is_invalid(self):
        fmt = PinyinOutputFormat(tone_type=ToneType.WITH_TONE_MARK)
        with pytest.raises(UnsupportedFormatCombination) as exc_info:
            fmt.validate()
        assert "WITH_V" in str(exc_info.value)
