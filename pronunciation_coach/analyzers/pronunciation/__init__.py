"""
발음 평가 모듈.

이 패키지는 스페인어 동사 활용형 발음 평가를 위한 컴포넌트를 제공합니다:

주요 컴포넌트:
- PronunciationAnalyzer: 발음 평가 서비스 파사드
- PhoneticAnalyzer: 모음/자음/이중모음 대응 및 오류 패턴 분석
- StressAnalyzer: 음절 수와 강세 유형 분석
- CompositeScorer: 가중 합산/의미 고정 점수 결합
- FeedbackGenerator: 피드백 문구와 교정 제안 생성
- PhoneticsBreakdownBuilder: 목표 단어의 교육용 분해

공용 타입:
- ErrorFinding, ErrorKind, Severity: 오류 발견 항목
- TextSimilarity, PhoneticScores, StressAnalysis: 하위 분석 결과
- SemanticClassification, SemanticType: 외부 의미 검증 결과
"""

from .assessment_types import (
    ErrorKind,
    Severity,
    StressType,
    SemanticType,
    ErrorFinding,
    TextSimilarity,
    PhoneticScores,
    StressAnalysis,
    SemanticClassification,
    PhoneticsBreakdown,
)
from .text_similarity import analyze_text_similarity
from .phonetic_analyzer import (
    PhoneticAnalyzer,
    consonant_error_severity,
    detect_accent_errors,
)
from .stress_analyzer import StressAnalyzer, count_syllables, stress_type, is_diphthong
from .scoring import (
    CompositeScorer,
    CompositeScore,
    WeightedStrategy,
    SemanticAnchoredStrategy,
    ScoringStrategy,
    select_strategy,
    LEGACY_EXACT_MATCH_SCORE,
)
from .feedback import FeedbackGenerator, ENCOURAGEMENT
from .breakdown import PhoneticsBreakdownBuilder
from .pronunciation_analyzer import PronunciationAnalyzer

__all__ = [
    # 주요 클래스
    'PronunciationAnalyzer',
    'PhoneticAnalyzer',
    'StressAnalyzer',
    'CompositeScorer',
    'FeedbackGenerator',
    'PhoneticsBreakdownBuilder',

    # 점수 방식
    'CompositeScore',
    'WeightedStrategy',
    'SemanticAnchoredStrategy',
    'ScoringStrategy',
    'select_strategy',
    'LEGACY_EXACT_MATCH_SCORE',

    # 열거형
    'ErrorKind',
    'Severity',
    'StressType',
    'SemanticType',

    # 결과 타입
    'ErrorFinding',
    'TextSimilarity',
    'PhoneticScores',
    'StressAnalysis',
    'SemanticClassification',
    'PhoneticsBreakdown',

    # 함수
    'analyze_text_similarity',
    'consonant_error_severity',
    'detect_accent_errors',
    'count_syllables',
    'stress_type',
    'is_diphthong',
    'ENCOURAGEMENT',
]
