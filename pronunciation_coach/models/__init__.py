"""데이터 모델 패키지."""

from .assessment import (
    AssessmentContext,
    AssessmentRequest,
    AssessmentResult,
    RecognitionAlternative,
    RecognitionResult,
    DEFAULT_CONFIDENCE,
    DEFAULT_TIMING_MS,
    TECHNICAL_ERROR_FEEDBACK,
    TECHNICAL_ERROR_SUGGESTION,
)

__all__ = [
    'AssessmentContext',
    'AssessmentRequest',
    'AssessmentResult',
    'RecognitionAlternative',
    'RecognitionResult',
    'DEFAULT_CONFIDENCE',
    'DEFAULT_TIMING_MS',
    'TECHNICAL_ERROR_FEEDBACK',
    'TECHNICAL_ERROR_SUGGESTION',
]
