"""pronunciation_analyzer 모듈 단위 테스트."""

import logging
import unicodedata

import pytest
from unittest.mock import Mock

from pronunciation_coach.analyzers.pronunciation.assessment_types import (
    SemanticClassification,
    SemanticType,
)
from pronunciation_coach.analyzers.pronunciation.feedback import ACCENT_DRILL, ENCOURAGEMENT
from pronunciation_coach.analyzers.pronunciation.pronunciation_analyzer import PronunciationAnalyzer
from pronunciation_coach.analyzers.semantic.semantic_validator import FormTableValidator
from pronunciation_coach.core.analysis_config import AnalysisConfig
from pronunciation_coach.models.assessment import (
    AssessmentContext,
    AssessmentRequest,
    AssessmentResult,
    TECHNICAL_ERROR_FEEDBACK,
    TECHNICAL_ERROR_SUGGESTION,
)
from pronunciation_coach.utils.logging_config import create_silent_logger

FORMS = {
    'hablar': {('indicative', 'pres', '1s'): {'hablo'}},
    'comer': {
        ('indicative', 'pres', '1s'): {'como'},
        ('indicative', 'pretIndef', '1s'): {'comí'},
    },
}


@pytest.fixture
def analyzer():
    return PronunciationAnalyzer(logger=create_silent_logger())


@pytest.fixture
def validating_analyzer():
    return PronunciationAnalyzer(
        semantic_validator=FormTableValidator(FORMS),
        logger=create_silent_logger(),
    )


class TestInitialization:
    """PronunciationAnalyzer 초기화 테스트."""

    def test_default_config(self, analyzer):
        assert isinstance(analyzer.config, AnalysisConfig)
        assert analyzer.semantic_validator is None

    def test_rejects_invalid_validator(self):
        with pytest.raises(TypeError):
            PronunciationAnalyzer(semantic_validator=object())

    def test_config_changes_after_construction_do_not_apply(self):
        config = AnalysisConfig()
        analyzer = PronunciationAnalyzer(config, logger=create_silent_logger())

        config.update(strict_exact_match=False)
        analyzer.config.update(strict_exact_match=False, default_confidence=0.1)

        assert analyzer.config is not config
        result = analyzer.assess("hablo", "hablo")
        assert result.accuracy == 100
        fresh = PronunciationAnalyzer(logger=create_silent_logger())
        assert result.to_dict() == fresh.assess("hablo", "hablo").to_dict()


class TestWeightedRegime:
    """의미 검증기 없이 가중 합산 방식 테스트."""

    def test_exact_match(self, analyzer):
        result = analyzer.assess("hablo", "hablo")

        assert isinstance(result, AssessmentResult)
        assert result.accuracy == 100
        assert result.is_correct_for_srs is True
        assert result.regime == "weighted"
        assert result.feedback == '¡Perfecto! Pronunciación exacta y clara.'
        assert result.suggestions == [ENCOURAGEMENT]
        assert result.semantic_validation is None

    def test_exact_match_ignores_case_accents_and_punctuation(self, analyzer):
        result = analyzer.assess("¿Comí?", "comi")

        assert result.accuracy == 100
        assert result.is_correct_for_srs is True

    @pytest.mark.parametrize("target,recognized", [
        ("comí", unicodedata.normalize('NFD', "comí")),
        (unicodedata.normalize('NFD', "comió"), "comio"),
    ])
    def test_decomposed_accents_count_as_exact_match(self, analyzer, target, recognized):
        result = analyzer.assess(target, recognized)

        assert result.detailed_analysis['textSimilarity']['exact_match'] is True
        assert result.accuracy == 100
        assert result.is_correct_for_srs is True

    def test_legacy_exact_match(self):
        analyzer = PronunciationAnalyzer(AnalysisConfig(strict_exact_match=False))
        result = analyzer.assess("hablo", "hablo")

        assert result.accuracy == 95
        assert result.is_correct_for_srs is True

    def test_vowel_error(self, analyzer):
        result = analyzer.assess("hablo", "hiblo")

        # 80*0.4 + 84*0.3 + 75*0.2 + 80*0.1
        assert result.accuracy == 80
        assert result.is_correct_for_srs is False
        assert result.feedback == 'Buena pronunciación, pero puede mejorar.'
        assert result.detailed_analysis['textSimilarity']['similarity'] == 80
        assert result.detailed_analysis['phoneticAnalysis']['common_errors'][0]['type'] == 'vowel_confusion'

    def test_detailed_analysis_keys(self, analyzer):
        result = analyzer.assess("hablo", "hiblo", {'confidence': 0.95, 'timingMs': 1200})

        assert set(result.detailed_analysis) == {
            'semanticValidation', 'textSimilarity', 'phoneticAnalysis',
            'stressAnalysis', 'fluentAnalysis', 'weighted_score', 'regime',
        }
        assert result.detailed_analysis['fluentAnalysis']['clarity_score'] == 100
        assert result.accuracy == 82

    def test_phonetics_breakdown(self, analyzer):
        breakdown = analyzer.assess("hablo", "hablo").phonetics_breakdown

        assert breakdown['word'] == 'hablo'
        assert breakdown['vowels'] == 'a-o'
        assert breakdown['consonants'] == 'h-b-l'

    def test_empty_strings_are_defined(self, analyzer):
        result = analyzer.assess("", "")

        assert result.regime == "weighted"
        assert 0 <= result.accuracy <= 100
        assert result.suggestions


class TestSemanticRegime:
    """의미 검증 결과에 고정된 점수 방식 테스트."""

    def test_exact_match_scenario(self, validating_analyzer):
        result = validating_analyzer.assess("hablo", "hablo", AssessmentContext(lemma='hablar'))

        assert result.accuracy == 100
        assert result.is_correct_for_srs is True
        assert result.regime == "semantic"
        assert result.feedback == '¡Perfecto! Pronunciación y conjugación exactas.'

    def test_accent_error_scenario(self, validating_analyzer):
        context = {'lemma': 'comer', 'mood': 'indicative', 'tense': 'pretIndef', 'person': '1s'}
        result = validating_analyzer.assess("comí", "comi", context)

        assert result.accuracy == 85
        assert result.is_correct_for_srs is False
        assert 'acentuación' in result.feedback
        assert result.semantic_validation['type'] == 'accent_error'
        assert ACCENT_DRILL in result.suggestions
        assert len(result.suggestions) <= 4

    def test_different_verb_scenario(self, validating_analyzer):
        context = AssessmentContext(lemma='hablar', mood='indicative', tense='pres', person='1s')
        result = validating_analyzer.assess("hablo", "como", context)

        assert result.accuracy == 10
        assert result.is_correct_for_srs is False
        assert result.semantic_validation['type'] == 'different_verb'
        assert result.feedback.startswith('"como" es conjugación de "comer"')

    def test_supplied_classification_dict(self, analyzer):
        result = analyzer.assess("comí", "comi", classification={
            'type': 'accent_error',
            'pedagogicalScore': 85,
            'suggestion': 'Practica la acentuación española',
        })

        assert result.accuracy == 85
        assert result.regime == "semantic"
        assert result.suggestions[0] == 'Practica la acentuación española'
        assert result.detailed_analysis['weighted_score'] > 85

    def test_supplied_classification_skips_validator(self):
        validator = Mock()
        analyzer = PronunciationAnalyzer(semantic_validator=validator, logger=create_silent_logger())
        analyzer.assess("hablo", "hablo", classification=SemanticClassification(SemanticType.EXACT_MATCH, 100))

        validator.validate_conjugation.assert_not_called()

    def test_different_verb_classification_without_message(self, analyzer):
        result = analyzer.assess("hablo", "como", classification={
            'type': 'different_verb',
            'pedagogicalScore': 10,
        })

        assert result.accuracy == 10
        assert result.is_correct_for_srs is False
        assert 'verbo diferente' in result.feedback

    def test_fractional_pedagogical_score(self, analyzer):
        result = analyzer.assess("hablo", "hablo", classification={
            'type': 'minor_pronunciation',
            'pedagogicalScore': 89.6,
        })

        assert result.accuracy == 89.6
        assert result.is_correct_for_srs is False
        assert result.to_dict()['accuracy'] == 89.6


class TestErrorHandling:
    """기술 오류 처리 테스트."""

    def test_validator_exception(self):
        validator = Mock()
        validator.validate_conjugation.side_effect = RuntimeError("dataset unavailable")
        logger = Mock(spec=logging.Logger)
        analyzer = PronunciationAnalyzer(semantic_validator=validator, logger=logger)

        result = analyzer.assess("hablo", "hablo")

        assert result.accuracy == 0
        assert result.is_correct_for_srs is False
        assert result.feedback == TECHNICAL_ERROR_FEEDBACK
        assert result.suggestions == [TECHNICAL_ERROR_SUGGESTION]
        assert result.regime == "error"
        logger.exception.assert_called_once()

    def test_invalid_classification(self, analyzer):
        result = analyzer.assess("hablo", "hablo", classification={'type': 'bogus', 'pedagogicalScore': 50})
        assert result.regime == "error"


class TestEntryPoints:
    """assess_request / analyze_pronunciation 테스트."""

    def test_idempotent(self, analyzer):
        first = analyzer.assess("hablo", "hiblo", {'confidence': 0.7, 'timing_ms': 4000})
        second = analyzer.assess("hablo", "hiblo", {'confidence': 0.7, 'timing_ms': 4000})
        assert first == second

    def test_assess_request(self, analyzer):
        request = AssessmentRequest(target="hablo", recognized="hablo")
        assert analyzer.assess_request(request).accuracy == 100

    def test_analyze_pronunciation_dict(self, analyzer):
        data = analyzer.analyze_pronunciation("hablo", "hablo")

        assert data['accuracy'] == 100
        assert data['isCorrectForSRS'] is True
        assert data['suggestions'] == [ENCOURAGEMENT]

    @pytest.mark.parametrize("target", ["hablo", "comí", "¿Vivimos?", "niño"])
    def test_exact_match_floor(self, analyzer, target):
        result = analyzer.assess(target, target.upper())
        assert result.accuracy >= 95
        assert result.is_correct_for_srs is True
