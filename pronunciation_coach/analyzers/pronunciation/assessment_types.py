"""
발음 평가를 위한 공용 타입 정의.

이 모듈은 분석기, 점수 계산기, 피드백 생성기가 공유하는
표준 데이터 타입을 정의합니다.

주요 구성요소:
- ErrorKind / Severity: 오류 유형과 심각도 열거형
- ErrorFinding: 음성학적 오류 발견 항목
- TextSimilarity: 편집 거리 비교 결과
- PhoneticScores: 모음/자음/이중모음 하위 점수
- StressType / StressAnalysis: 강세 분류와 음절 분석 결과
- SemanticType / SemanticClassification: 외부 의미 검증기의 분류 결과
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class ErrorKind(Enum):
    """음성학적 오류 유형."""
    VOWEL_CONFUSION = "vowel_confusion"
    CONSONANT_CONFUSION = "consonant_confusion"
    SILENT_LETTER_ERROR = "silent_letter_error"
    ACCENT_POSITION_ERROR = "accent_position_error"
    ACCENT_COUNT_ERROR = "accent_count_error"


class Severity(Enum):
    """오류 심각도."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StressType(Enum):
    """스페인어 강세 분류."""
    AGUDA = "aguda"            # 마지막 음절 강세
    LLANA = "llana"            # 끝에서 두 번째 음절 강세
    ESDRUJULA = "esdrújula"    # 표기 강세가 있는 단어
    MONOSILABA = "monosílaba"


class SemanticType(Enum):
    """외부 의미 검증기의 분류 유형."""
    EXACT_MATCH = "exact_match"
    VALID_CONJUGATION = "valid_conjugation"
    ACCENT_ERROR = "accent_error"
    DIFFERENT_VERB = "different_verb"
    WRONG_CONTEXT = "wrong_context"
    MINOR_PRONUNCIATION = "minor_pronunciation"
    INCORRECT_WORD = "incorrect_word"


@dataclass(frozen=True)
class ErrorFinding:
    """
    음성학적 오류 발견 항목.

    Attributes:
        kind: 오류 유형
        description: 학습자에게 보여줄 설명
        suggestion: 교정 제안
        severity: 심각도
        pair: (목표 음, 인식된 음) 쌍 (해당하는 경우)
        position: 목표 문자열에서의 단위 위치 (해당하는 경우)
    """
    kind: ErrorKind
    description: str
    suggestion: str
    severity: Severity = Severity.LOW
    pair: Optional[Tuple[str, str]] = None
    position: Optional[int] = None

    @property
    def dedupe_key(self) -> Tuple[ErrorKind, Optional[frozenset]]:
        """(유형, 순서 없는 음 쌍) 중복 제거 키."""
        return self.kind, frozenset(self.pair) if self.pair else None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'type': self.kind.value,
            'description': self.description,
            'suggestion': self.suggestion,
            'severity': self.severity.value,
        }
        if self.pair is not None:
            data['pair'] = list(self.pair)
        if self.position is not None:
            data['position'] = self.position
        return data


@dataclass(frozen=True)
class TextSimilarity:
    """편집 거리 비교 결과."""
    similarity: int
    distance: int
    exact_match: bool
    target_length: int
    recognized_length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'similarity': self.similarity,
            'distance': self.distance,
            'exact_match': self.exact_match,
            'character_errors': self.distance,
            'target_length': self.target_length,
            'recognized_length': self.recognized_length,
        }


@dataclass(frozen=True)
class PhoneticScores:
    """음성 특징 분석 결과."""
    vowel_accuracy: int
    consonant_accuracy: int
    diphthong_accuracy: int
    overall_score: int
    common_errors: Tuple[ErrorFinding, ...] = ()

    @classmethod
    def perfect(cls) -> 'PhoneticScores':
        """완전 일치 입력에 대한 만점 결과."""
        return cls(
            vowel_accuracy=100,
            consonant_accuracy=100,
            diphthong_accuracy=100,
            overall_score=100,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vowel_accuracy': self.vowel_accuracy,
            'consonant_accuracy': self.consonant_accuracy,
            'diphthong_accuracy': self.diphthong_accuracy,
            'overall_score': self.overall_score,
            'common_errors': [error.to_dict() for error in self.common_errors],
        }


@dataclass(frozen=True)
class StressAnalysis:
    """음절/강세 분석 결과."""
    syllable_count: int
    stress_type: StressType
    accuracy: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'syllable_count': self.syllable_count,
            'stress_type': self.stress_type.value,
            'accuracy': self.accuracy,
        }


@dataclass(frozen=True)
class SemanticClassification:
    """
    외부 의미 검증기의 분류 결과.

    이 엔진이 소유하지 않는 값이며, 평가 시점에는 이미 계산되어 전달됩니다.
    """
    type: SemanticType
    pedagogical_score: float
    message: Optional[str] = None
    suggestion: Optional[str] = None
    is_valid: Optional[bool] = None
    confidence: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.type, SemanticType):
            object.__setattr__(self, 'type', SemanticType(self.type))
        if not 0 <= self.pedagogical_score <= 100:
            raise ValueError(f"pedagogical_score는 0-100 범위여야 합니다: {self.pedagogical_score}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SemanticClassification':
        """camelCase/snake_case 딕셔너리에서 생성."""
        score = data.get('pedagogical_score', data.get('pedagogicalScore'))
        if score is None:
            raise ValueError("pedagogical_score가 필요합니다")
        return cls(
            type=SemanticType(data['type']),
            pedagogical_score=float(score),
            message=data.get('message'),
            suggestion=data.get('suggestion'),
            is_valid=data.get('is_valid', data.get('isValid')),
            confidence=data.get('confidence'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'pedagogicalScore': self.pedagogical_score,
            'message': self.message,
            'suggestion': self.suggestion,
            'isValid': self.is_valid,
            'confidence': self.confidence,
        }


@dataclass(frozen=True)
class PhoneticsBreakdown:
    """교육용 단어 분해 결과."""
    word: str
    syllables: int
    vowels: str
    consonants: str
    stress_pattern: StressType
    difficulty_elements: Tuple[Dict[str, Any], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'syllables': self.syllables,
            'vowels': self.vowels,
            'consonants': self.consonants,
            'stress_pattern': self.stress_pattern.value,
            'difficulty_elements': [dict(element) for element in self.difficulty_elements],
        }
