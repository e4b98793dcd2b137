"""
종합 점수 계산 모듈.

두 가지 점수 산정 방식을 하나의 태그 유니온(ScoringStrategy)으로 표현합니다.

- WeightedStrategy: 텍스트 유사도, 음성 특징, 강세, 명료도의 가중 합산
- SemanticAnchoredStrategy: 외부 의미 검증기의 pedagogical_score 를 그대로 사용

어느 방식이든 간격 반복 학습 정답 판정은 같은 passing 임계값을 사용합니다.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Union

import numpy as np

from ...core.analysis_config import ScoreWeights, Thresholds
from ..hesitation.fluency_scorer import FluencyEstimate
from .assessment_types import (
    PhoneticScores,
    SemanticClassification,
    StressAnalysis,
    TextSimilarity,
)

logger = logging.getLogger(__name__)

STRICT_EXACT_MATCH_SCORE = 100
LEGACY_EXACT_MATCH_SCORE = 95


@dataclass(frozen=True)
class WeightedStrategy:
    """가중 합산 점수 방식."""
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    exact_match_score: int = STRICT_EXACT_MATCH_SCORE

    regime: ClassVar[str] = "weighted"


@dataclass(frozen=True)
class SemanticAnchoredStrategy:
    """의미 검증 결과에 고정된 점수 방식."""
    classification: SemanticClassification

    regime: ClassVar[str] = "semantic"


ScoringStrategy = Union[WeightedStrategy, SemanticAnchoredStrategy]


def select_strategy(classification: Optional[SemanticClassification] = None,
                    weights: Optional[ScoreWeights] = None,
                    strict_exact_match: bool = True) -> ScoringStrategy:
    """분류 결과가 있으면 의미 고정 방식, 없으면 가중 합산 방식을 선택."""
    if classification is not None:
        return SemanticAnchoredStrategy(classification=classification)

    return WeightedStrategy(
        weights=weights or ScoreWeights(),
        exact_match_score=STRICT_EXACT_MATCH_SCORE if strict_exact_match else LEGACY_EXACT_MATCH_SCORE,
    )


@dataclass(frozen=True)
class CompositeScore:
    """종합 점수 결과."""
    accuracy: float  # 최종 정확도 (0-100), 의미 고정 방식은 소수 허용
    is_correct_for_srs: bool
    regime: str  # "semantic" 또는 "weighted"
    governing_score: float  # 정답 판정에 사용된 점수
    weighted_score: int  # 가중 합산 점수 (참고용, 항상 계산)
    classification: Optional[SemanticClassification] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'accuracy': self.accuracy,
            'is_correct_for_srs': self.is_correct_for_srs,
            'regime': self.regime,
            'governing_score': self.governing_score,
            'weighted_score': self.weighted_score,
        }


def _clamp_score(value: float) -> int:
    return int(round(float(np.clip(value, 0, 100))))


def _clip_score(value: float) -> float:
    """0-100 범위로 제한만 하고 반올림하지 않음 (정수 값은 int 로 유지)."""
    clipped = float(np.clip(value, 0, 100))
    return int(clipped) if clipped.is_integer() else clipped


class CompositeScorer:
    """하위 분석 결과를 종합 점수와 정답 판정으로 결합하는 클래스."""

    def __init__(self, thresholds: Optional[Thresholds] = None,
                 weights: Optional[ScoreWeights] = None):
        """
        CompositeScorer 초기화.

        Args:
            thresholds: 점수 임계값 (기본값: Thresholds())
            weights: 의미 고정 방식에서 참고용 가중 합산에 쓰는 가중치
        """
        self.thresholds = thresholds or Thresholds()
        self.weights = weights or ScoreWeights()

    def weighted_blend(self, weights: ScoreWeights, similarity: TextSimilarity,
                       phonetic: PhoneticScores, stress: StressAnalysis,
                       fluency: FluencyEstimate) -> int:
        """가중 합산 점수 (0-100 범위로 반올림/제한)."""
        components = np.array([
            similarity.similarity,
            phonetic.overall_score,
            stress.accuracy,
            fluency.clarity_score,
        ], dtype=float)
        factors = np.array([
            weights.text_similarity,
            weights.phonetic,
            weights.stress,
            weights.fluency,
        ])
        return _clamp_score(float(np.dot(components, factors)))

    def score(self, strategy: ScoringStrategy, similarity: TextSimilarity,
              phonetic: PhoneticScores, stress: StressAnalysis,
              fluency: FluencyEstimate) -> CompositeScore:
        """
        선택된 방식으로 종합 점수 계산.

        Args:
            strategy: 점수 산정 방식
            similarity: 편집 거리 비교 결과
            phonetic: 음성 특징 분석 결과
            stress: 강세 분석 결과
            fluency: 유창성 보조 점수

        Returns:
            CompositeScore
        """
        if isinstance(strategy, SemanticAnchoredStrategy):
            weighted_score = self.weighted_blend(self.weights, similarity, phonetic, stress, fluency)
            classification = strategy.classification
            # 보고하는 정확도와 정답 판정 점수는 같은 값
            accuracy = _clip_score(classification.pedagogical_score)
            governing_score = accuracy
        elif isinstance(strategy, WeightedStrategy):
            weighted_score = self.weighted_blend(strategy.weights, similarity, phonetic, stress, fluency)
            classification = None
            # 정규화 후 완전 일치는 가중 합산 결과와 무관하게 고정 점수
            accuracy = strategy.exact_match_score if similarity.exact_match else weighted_score
            governing_score = accuracy
        else:
            raise TypeError(f"지원하지 않는 점수 방식: {type(strategy).__name__}")

        result = CompositeScore(
            accuracy=accuracy,
            is_correct_for_srs=governing_score >= self.thresholds.passing,
            regime=strategy.regime,
            governing_score=governing_score,
            weighted_score=weighted_score,
            classification=classification,
        )
        logger.debug(
            f"종합 점수: {result.accuracy} ({result.regime}), "
            f"가중 합산 {result.weighted_score}, 정답 판정 {result.is_correct_for_srs}"
        )
        return result
