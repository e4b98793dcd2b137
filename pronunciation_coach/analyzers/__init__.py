"""분석기 모듈 패키지."""

from .pronunciation.pronunciation_analyzer import PronunciationAnalyzer
from .pronunciation.phonetic_analyzer import PhoneticAnalyzer
from .pronunciation.stress_analyzer import StressAnalyzer
from .hesitation.fluency_scorer import FluencyScorer
from .semantic.semantic_validator import ISemanticValidator, FormTableValidator

__all__ = [
    'PronunciationAnalyzer',
    'PhoneticAnalyzer',
    'StressAnalyzer',
    'FluencyScorer',
    'ISemanticValidator',
    'FormTableValidator',
]
