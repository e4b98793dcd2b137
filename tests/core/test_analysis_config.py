"""analysis_config 모듈 단위 테스트."""

import pytest

from pronunciation_coach.core.analysis_config import AnalysisConfig, ScoreWeights, Thresholds


class TestThresholds:
    """Thresholds 값 객체 테스트."""

    def test_defaults(self):
        thresholds = Thresholds()
        assert thresholds.perfect == 100
        assert thresholds.excellent == 95
        assert thresholds.good == 85
        assert thresholds.fair == 75
        assert thresholds.poor == 60
        assert thresholds.passing == 90

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            Thresholds(passing=101)

    def test_not_monotone(self):
        with pytest.raises(ValueError):
            Thresholds(good=96)

    def test_frozen(self):
        thresholds = Thresholds()
        with pytest.raises(AttributeError):
            thresholds.passing = 50

    def test_from_dict_round_trip(self):
        thresholds = Thresholds.from_dict({'passing': '80'})
        assert thresholds.passing == 80
        assert Thresholds.from_dict(thresholds.to_dict()) == thresholds


class TestScoreWeights:
    """ScoreWeights 값 객체 테스트."""

    def test_defaults_sum_to_one(self):
        weights = ScoreWeights()
        assert weights.text_similarity == 0.4
        assert weights.phonetic == 0.3
        assert weights.stress == 0.2
        assert weights.fluency == 0.1

    def test_invalid_sum(self):
        with pytest.raises(ValueError):
            ScoreWeights(text_similarity=0.9)

    def test_negative(self):
        with pytest.raises(ValueError):
            ScoreWeights(text_similarity=-0.1, phonetic=0.8)


class TestAnalysisConfig:
    """AnalysisConfig 클래스 테스트."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.max_suggestions == 4
        assert config.strict_exact_match is True
        assert config.default_confidence == 0.8
        assert config.default_timing_ms == 1000.0
        assert config.language == 'es'

    def test_unsupported_language(self):
        with pytest.raises(ValueError):
            AnalysisConfig(language='en')

    def test_invalid_confidence(self):
        with pytest.raises(ValueError):
            AnalysisConfig(default_confidence=1.5)

    def test_from_dict_with_nested_mappings(self):
        config = AnalysisConfig.from_dict({
            'thresholds': {'passing': 85},
            'weights': {'text_similarity': 0.5, 'phonetic': 0.2, 'stress': 0.2, 'fluency': 0.1},
            'max_suggestions': 3,
        })

        assert isinstance(config.thresholds, Thresholds)
        assert config.thresholds.passing == 85
        assert config.weights.text_similarity == 0.5
        assert config.max_suggestions == 3

    def test_to_dict(self):
        data = AnalysisConfig().to_dict()
        assert data['thresholds']['passing'] == 90
        assert data['weights']['fluency'] == 0.1
        assert data['language'] == 'es'

    def test_update(self):
        config = AnalysisConfig()
        config.update(max_suggestions=2, strict_exact_match=False)

        assert config.max_suggestions == 2
        assert config.strict_exact_match is False

    def test_update_unknown_key(self):
        config = AnalysisConfig()
        with pytest.raises(ValueError):
            config.update(use_gpu=True)

    def test_update_invalid_value_keeps_previous(self):
        config = AnalysisConfig()
        with pytest.raises(ValueError):
            config.update(max_suggestions=0)
        assert config.max_suggestions == 4

    def test_from_env(self):
        config = AnalysisConfig.from_env({
            'PRONUNCIATION_COACH_PASSING_THRESHOLD': '85',
            'PRONUNCIATION_COACH_MAX_SUGGESTIONS': '3',
            'PRONUNCIATION_COACH_STRICT_EXACT_MATCH': 'false',
            'PRONUNCIATION_COACH_DEFAULT_CONFIDENCE': '0.7',
            'PRONUNCIATION_COACH_DEFAULT_TIMING_MS': '2000',
        })

        assert config.thresholds.passing == 85
        assert config.max_suggestions == 3
        assert config.strict_exact_match is False
        assert config.default_confidence == 0.7
        assert config.default_timing_ms == 2000.0

    def test_from_env_empty(self):
        assert AnalysisConfig.from_env({}).to_dict() == AnalysisConfig().to_dict()
