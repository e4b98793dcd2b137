"""유창성 보조 점수 모듈.

인식기 신뢰도와 응답 지연 시간만으로 명료도/타이밍 점수와 망설임 여부를 계산합니다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from ...models.assessment import AssessmentContext


@dataclass(frozen=True)
class FluencyEstimate:
    """유창성 보조 점수 데이터 클래스."""
    confidence_score: int  # 인식기 신뢰도 (0-100)
    clarity_score: int  # 명료도 점수 (0-100)
    timing_score: float  # 응답 시간 점수 (50-100)
    hesitation_detected: bool  # 긴 지연 여부

    def to_dict(self) -> Dict[str, Any]:
        return {
            'confidence_score': self.confidence_score,
            'clarity_score': self.clarity_score,
            'timing_score': self.timing_score,
            'hesitation_detected': self.hesitation_detected,
        }


class FluencyScorer:
    """신뢰도와 응답 시간으로 유창성 보조 점수를 계산하는 클래스."""

    def __init__(self, clear_confidence: float = 0.8, fast_response_ms: float = 3000,
                 hesitation_ms: float = 5000, min_timing_score: float = 50):
        """
        FluencyScorer 초기화.

        Args:
            clear_confidence: 이 값을 넘는 신뢰도는 명료도 100점
            fast_response_ms: 이 시간 미만의 응답은 타이밍 100점
            hesitation_ms: 이 시간을 넘으면 망설임으로 판단
            min_timing_score: 타이밍 점수 하한
        """
        self.clear_confidence = clear_confidence
        self.fast_response_ms = fast_response_ms
        self.hesitation_ms = hesitation_ms
        self.min_timing_score = min_timing_score
        self.logger = logging.getLogger(__name__)

    def estimate(self, context: AssessmentContext) -> FluencyEstimate:
        """
        유창성 보조 점수 계산.

        Args:
            context: 평가 컨텍스트 (confidence, timing_ms 사용)

        Returns:
            FluencyEstimate
        """
        confidence = float(np.clip(context.confidence, 0.0, 1.0))
        timing_ms = max(0.0, float(context.timing_ms))

        confidence_score = int(round(confidence * 100))
        clarity_score = 100 if confidence > self.clear_confidence else confidence_score

        if timing_ms < self.fast_response_ms:
            timing_score = 100.0
        else:
            timing_score = max(self.min_timing_score, 100 - (timing_ms - self.fast_response_ms) / 100)

        hesitation_detected = timing_ms > self.hesitation_ms
        if hesitation_detected:
            self.logger.debug(f"망설임 감지: 응답 시간 {timing_ms:.0f}ms")

        return FluencyEstimate(
            confidence_score=confidence_score,
            clarity_score=clarity_score,
            timing_score=timing_score,
            hesitation_detected=hesitation_detected,
        )
