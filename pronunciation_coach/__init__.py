"""
스페인어 동사 활용형 발음 평가 엔진.

목표 활용형과 음성 인식 결과를 비교하여 다차원 점수, 간격 반복 학습용
정답 판정, 교정 제안을 생성합니다.
"""

__version__ = "0.1.0"

from .core.analysis_config import AnalysisConfig, Thresholds, ScoreWeights
from .models.assessment import (
    AssessmentContext,
    AssessmentRequest,
    AssessmentResult,
    RecognitionResult,
    RecognitionAlternative,
)
from .analyzers import PronunciationAnalyzer, ISemanticValidator, FormTableValidator
from .analyzers.pronunciation.assessment_types import SemanticClassification, SemanticType

__all__ = [
    'AnalysisConfig',
    'Thresholds',
    'ScoreWeights',
    'AssessmentContext',
    'AssessmentRequest',
    'AssessmentResult',
    'RecognitionResult',
    'RecognitionAlternative',
    'PronunciationAnalyzer',
    'ISemanticValidator',
    'FormTableValidator',
    'SemanticClassification',
    'SemanticType',
]
