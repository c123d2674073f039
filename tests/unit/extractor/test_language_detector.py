"""
Unit tests for LanguageDetector.
"""

import pytest
from laterlens.extractor.language_detector import LanguageDetector


@pytest.fixture
def detector():
    return LanguageDetector()


class TestLanguageDetector:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("서울의 봄은 짧지만 아름답다.", "ko"),
            ("今天的天气很好，我们去公园散步。", "zh"),
            ("ありがとうございます。", "ja"),
            ("カタカナだけ", "ja"),
            ("The quick brown fox jumps over the lazy dog.", "en"),
            ("# Main Topics:\n## Results 2024\n\n# Key Points:\n• First item", "en"),
            ("🎉🎉🔥 💯 ✨✨", "unknown"),
            ("Ça va très bien, merci.", "unknown"),
            ("", "unknown"),
            ("   \n\t ", "unknown"),
        ],
    )
    def test_detect(self, detector, text, expected):
        assert detector.detect(text) == expected

    def test_korean_checked_before_chinese(self, detector):
        assert detector.detect("韓國 한국어 문장") == "ko"

    def test_kanji_reports_chinese(self, detector):
        # Han ideographs are checked before kana.
        assert detector.detect("日本語のテキスト") == "zh"

    def test_only_first_thousand_characters_sampled(self, detector):
        text = "a" * 1000 + "한국어"

        assert detector.detect(text) == "en"
