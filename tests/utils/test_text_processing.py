"""text_processing 모듈 단위 테스트."""

import unicodedata

import pytest

from pronunciation_coach.utils.text_processing import (
    TextNormalizer,
    NormalizedPair,
    create_text_normalizer,
    safe_lower,
    safe_strip,
    remove_accents,
    extract_vowels,
    strip_vowels,
    count_accents,
)


class TestTextNormalizer:
    """TextNormalizer 클래스 테스트."""

    @pytest.fixture
    def normalizer(self):
        return create_text_normalizer()

    def test_clean_strips_spanish_punctuation(self, normalizer):
        assert normalizer.clean("¿Hablo?") == "hablo"
        assert normalizer.clean("¡Comí!") == "comí"

    def test_clean_collapses_whitespace(self, normalizer):
        assert normalizer.clean("  Yo   hablo,  bien ") == "yo hablo bien"

    def test_clean_none_and_empty(self, normalizer):
        assert normalizer.clean(None) == ""
        assert normalizer.clean("") == ""

    def test_fold_accents_keeps_enye(self, normalizer):
        assert normalizer.fold_accents("niño") == "niño"
        assert normalizer.fold_accents("conjugación") == "conjugacion"
        assert normalizer.fold_accents("pingüino") == "pinguino"

    def test_normalize(self, normalizer):
        assert normalizer.normalize("¡Comí!") == "comi"

    def test_normalize_pair(self, normalizer):
        pair = normalizer.normalize_pair("Comí", "comi")

        assert isinstance(pair, NormalizedPair)
        assert pair.target == "comi"
        assert pair.recognized == "comi"
        assert pair.target_original == "comí"
        assert pair.recognized_original == "comi"
        assert pair.is_exact_match is True

    def test_normalize_pair_not_exact(self, normalizer):
        pair = normalizer.normalize_pair("hablo", "como")
        assert pair.is_exact_match is False

    def test_decomposed_input_matches_precomposed(self, normalizer):
        decomposed = unicodedata.normalize('NFD', "Comí")
        pair = normalizer.normalize_pair("comí", decomposed)

        assert pair.recognized_original == "comí"
        assert pair.is_exact_match is True


class TestHelpers:
    """모듈 수준 헬퍼 함수 테스트."""

    def test_safe_lower_and_strip(self):
        assert safe_lower(None) == ""
        assert safe_lower("HABLO") == "hablo"
        assert safe_strip(None) == ""
        assert safe_strip("  hablo ") == "hablo"

    def test_remove_accents(self):
        assert remove_accents("está") == "esta"
        assert remove_accents("") == ""

    def test_remove_accents_decomposed_keeps_enye(self):
        assert remove_accents(unicodedata.normalize('NFD', "comió")) == "comio"
        assert remove_accents(unicodedata.normalize('NFD', "añadió")) == "añadio"
        assert remove_accents(unicodedata.normalize('NFD', "AÑO")) == "AÑO"

    def test_extract_vowels(self):
        assert extract_vowels("hablo") == ['a', 'o']
        assert extract_vowels("") == []

    def test_strip_vowels(self):
        assert strip_vowels("hablo") == "hbl"
        assert strip_vowels("yo hablo") == "yhbl"

    def test_count_accents(self):
        assert count_accents("está") == 1
        assert count_accents("esta") == 0
        assert count_accents(None) == 0
