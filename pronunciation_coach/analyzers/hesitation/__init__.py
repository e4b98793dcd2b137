"""유창성 보조 점수 모듈."""

from .fluency_scorer import FluencyScorer, FluencyEstimate

__all__ = [
    'FluencyScorer',
    'FluencyEstimate',
]
