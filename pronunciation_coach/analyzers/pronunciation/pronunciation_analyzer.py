"""
발음 평가 모듈 - 텍스트 유사도, 음성 특징, 강세, 유창성을 종합한 정확도 평가.

이 모듈은 PronunciationAnalyzer 클래스를 통해 평가 엔진의 진입점을 제공합니다.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Union

from ...core.analysis_config import AnalysisConfig
from ...models.assessment import AssessmentContext, AssessmentRequest, AssessmentResult
from ...utils.text_processing import TextNormalizer
from ..hesitation.fluency_scorer import FluencyScorer
from ..semantic.semantic_validator import ISemanticValidator
from .assessment_types import SemanticClassification
from .breakdown import PhoneticsBreakdownBuilder
from .feedback import FeedbackGenerator
from .phonetic_analyzer import PhoneticAnalyzer
from .scoring import CompositeScorer, select_strategy
from .stress_analyzer import StressAnalyzer
from .text_similarity import analyze_text_similarity

ContextInput = Union[AssessmentContext, Mapping[str, Any], None]
ClassificationInput = Union[SemanticClassification, Mapping[str, Any], None]


class PronunciationAnalyzer:
    """
    스페인어 동사 활용형 발음 평가 파사드.

    모든 협력 객체는 생성 시점에 만들어지며 호출 사이에 상태가 바뀌지 않으므로,
    같은 입력에는 항상 같은 결과를 반환합니다.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None,
                 semantic_validator: Optional[ISemanticValidator] = None,
                 logger: Optional[logging.Logger] = None):
        """
        PronunciationAnalyzer 초기화.

        Args:
            config: 분석 설정 (기본값: AnalysisConfig())
            semantic_validator: 의미 검증기 (없으면 가중 합산 방식)
            logger: 진단 로그용 로거 (기본값: 모듈 로거)
        """
        # 생성 시점의 설정을 복사해 고정. 이후 config.update() 는 평가에 반영되지 않음
        self.config = replace(config) if config is not None else AnalysisConfig()
        self._weights = self.config.weights
        self._strict_exact_match = self.config.strict_exact_match
        self._default_confidence = self.config.default_confidence
        self._default_timing_ms = self.config.default_timing_ms
        self.logger = logger or logging.getLogger(__name__)

        if semantic_validator is not None and not isinstance(semantic_validator, ISemanticValidator):
            raise TypeError("semantic_validator는 validate_conjugation()을 구현해야 합니다")
        self.semantic_validator = semantic_validator

        self.normalizer = TextNormalizer()
        self.phonetic_analyzer = PhoneticAnalyzer()
        self.stress_analyzer = StressAnalyzer()
        self.fluency_scorer = FluencyScorer()
        self.scorer = CompositeScorer(self.config.thresholds, self._weights)
        self.feedback_generator = FeedbackGenerator(
            thresholds=self.config.thresholds,
            max_suggestions=self.config.max_suggestions,
        )
        self.breakdown_builder = PhoneticsBreakdownBuilder(self.normalizer)

    def assess(self, target: str, recognized: str, context: ContextInput = None,
               classification: ClassificationInput = None) -> AssessmentResult:
        """
        발음 평가 수행.

        내부 오류는 모두 로그로 남기고 기술 오류 결과로 변환합니다.

        Args:
            target: 목표 활용형
            recognized: 음성 인식 결과
            context: 평가 컨텍스트 (AssessmentContext, 딕셔너리 또는 None)
            classification: 이미 계산된 의미 검증 결과 (선택)

        Returns:
            AssessmentResult
        """
        try:
            return self._assess(target, recognized, context, classification)
        except Exception:
            self.logger.exception(f"발음 평가 중 오류 발생: target='{target}', recognized='{recognized}'")
            return AssessmentResult.error()

    def assess_request(self, request: AssessmentRequest,
                       classification: ClassificationInput = None) -> AssessmentResult:
        """AssessmentRequest 로 평가 수행."""
        return self.assess(request.target, request.recognized, request.context, classification)

    def analyze_pronunciation(self, target: str, recognized: str, context: ContextInput = None,
                              classification: ClassificationInput = None) -> Dict[str, Any]:
        """평가 결과를 camelCase 키의 딕셔너리로 반환."""
        return self.assess(target, recognized, context, classification).to_dict()

    def _assess(self, target: str, recognized: str, context: ContextInput,
                classification: ClassificationInput) -> AssessmentResult:
        context = self._coerce_context(context)
        pair = self.normalizer.normalize_pair(target, recognized)
        self.logger.info(f"🎯 발음 평가: '{pair.target_original}' / '{pair.recognized_original}'")

        classification = self._resolve_classification(target, recognized, context, classification)

        similarity = analyze_text_similarity(pair.target, pair.recognized)
        phonetic = self.phonetic_analyzer.analyze(pair)
        stress = self.stress_analyzer.analyze(pair)
        fluency = self.fluency_scorer.estimate(context)

        strategy = select_strategy(
            classification,
            weights=self._weights,
            strict_exact_match=self._strict_exact_match,
        )
        score = self.scorer.score(strategy, similarity, phonetic, stress, fluency)

        feedback = self.feedback_generator.generate_feedback(score, similarity)
        suggestions = self.feedback_generator.generate_suggestions(
            classification, phonetic.common_errors, fluency, phonetic
        )
        breakdown = self.breakdown_builder.build(target)

        semantic_validation = classification.to_dict() if classification is not None else None
        result = AssessmentResult(
            accuracy=score.accuracy,
            is_correct_for_srs=score.is_correct_for_srs,
            feedback=feedback,
            suggestions=suggestions,
            detailed_analysis={
                'semanticValidation': semantic_validation,
                'textSimilarity': similarity.to_dict(),
                'phoneticAnalysis': phonetic.to_dict(),
                'stressAnalysis': stress.to_dict(),
                'fluentAnalysis': fluency.to_dict(),
                'weighted_score': score.weighted_score,
                'regime': score.regime,
            },
            phonetics_breakdown=breakdown.to_dict(),
            semantic_validation=semantic_validation,
            regime=score.regime,
        )

        self.logger.info(
            f"🎯 평가 결과: {result.accuracy}점 ({result.regime}), "
            f"정답 판정 {result.is_correct_for_srs}"
        )
        return result

    def _coerce_context(self, context: ContextInput) -> AssessmentContext:
        if isinstance(context, AssessmentContext):
            return context
        return AssessmentContext.from_dict(
            context,
            default_confidence=self._default_confidence,
            default_timing_ms=self._default_timing_ms,
        )

    def _resolve_classification(self, target: str, recognized: str, context: AssessmentContext,
                                classification: ClassificationInput) -> Optional[SemanticClassification]:
        """전달된 분류를 사용하고, 없으면 설정된 의미 검증기에 문의."""
        if isinstance(classification, SemanticClassification):
            return classification
        if classification is not None:
            return SemanticClassification.from_dict(classification)
        if self.semantic_validator is None:
            return None

        result = self.semantic_validator.validate_conjugation(target, recognized, context)
        self.logger.debug(f"의미 검증 결과: {result.type.value} ({result.pedagogical_score})")
        return result
