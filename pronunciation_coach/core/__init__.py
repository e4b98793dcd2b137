"""Core 모듈 - 설정 관리."""

from .analysis_config import AnalysisConfig, Thresholds, ScoreWeights

__all__ = [
    'AnalysisConfig',
    'Thresholds',
    'ScoreWeights',
]
