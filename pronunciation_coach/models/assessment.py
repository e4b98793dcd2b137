"""발음 평가 요청/결과 데이터 모델들."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

DEFAULT_CONFIDENCE = 0.8
DEFAULT_TIMING_MS = 1000.0

TECHNICAL_ERROR_FEEDBACK = 'Error en el análisis de pronunciación'
TECHNICAL_ERROR_SUGGESTION = 'Inténtalo de nuevo - error técnico'


@dataclass(frozen=True)
class AssessmentContext:
    """평가 컨텍스트 (동사 정보와 인식기 메타데이터)."""
    lemma: Optional[str] = None  # 동사 원형
    mood: Optional[str] = None  # 서법
    tense: Optional[str] = None  # 시제
    person: Optional[str] = None  # 인칭
    confidence: float = DEFAULT_CONFIDENCE  # 인식기 신뢰도 (0-1)
    timing_ms: float = DEFAULT_TIMING_MS  # 응답 지연 시간 (ms)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]],
                  default_confidence: float = DEFAULT_CONFIDENCE,
                  default_timing_ms: float = DEFAULT_TIMING_MS) -> 'AssessmentContext':
        """
        딕셔너리에서 컨텍스트 생성.

        camelCase 키(timingMs, timing)와 verb 별칭을 허용하며,
        누락되었거나 None인 수치 필드는 기본값을 사용합니다.
        """
        data = data or {}

        confidence = data.get('confidence')
        timing = data.get('timing_ms', data.get('timingMs', data.get('timing')))

        return cls(
            lemma=data.get('lemma') or data.get('verb'),
            mood=data.get('mood'),
            tense=data.get('tense'),
            person=data.get('person'),
            confidence=default_confidence if confidence is None else float(confidence),
            timing_ms=default_timing_ms if timing is None else float(timing),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'lemma': self.lemma,
            'mood': self.mood,
            'tense': self.tense,
            'person': self.person,
            'confidence': self.confidence,
            'timing_ms': self.timing_ms,
        }


@dataclass(frozen=True)
class RecognitionAlternative:
    """인식기 대안 결과."""
    transcript: str
    confidence: float = 0.0


@dataclass(frozen=True)
class RecognitionResult:
    """
    음성 인식 수집기가 콜백으로 전달하는 결과 레코드.

    엔진은 is_final 이 True 인 레코드의 transcript 만 사용합니다.
    """
    transcript: str
    confidence: float = 0.0
    alternatives: Tuple[RecognitionAlternative, ...] = ()
    is_final: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'RecognitionResult':
        """isFinal 등 camelCase 키를 허용하는 생성자."""
        alternatives = tuple(
            RecognitionAlternative(
                transcript=alt.get('transcript', ''),
                confidence=float(alt.get('confidence') or 0.0),
            )
            for alt in data.get('alternatives') or []
        )
        return cls(
            transcript=data.get('transcript', ''),
            confidence=float(data.get('confidence') or 0.0),
            alternatives=alternatives,
            is_final=bool(data.get('is_final', data.get('isFinal', False))),
        )


@dataclass(frozen=True)
class AssessmentRequest:
    """평가 요청 (매 시도마다 새로 생성되는 불변 입력)."""
    target: str
    recognized: str
    context: AssessmentContext = field(default_factory=AssessmentContext)

    @classmethod
    def from_recognition(cls, target: str, recognition: RecognitionResult,
                         context: Optional[AssessmentContext] = None,
                         timing_ms: Optional[float] = None) -> 'AssessmentRequest':
        """
        최종 인식 결과로부터 요청 생성.

        Raises:
            ValueError: 중간(is_final=False) 결과인 경우
        """
        if not recognition.is_final:
            raise ValueError("최종 인식 결과(is_final=True)만 평가할 수 있습니다")

        base = context or AssessmentContext()
        merged = AssessmentContext(
            lemma=base.lemma,
            mood=base.mood,
            tense=base.tense,
            person=base.person,
            confidence=recognition.confidence,
            timing_ms=base.timing_ms if timing_ms is None else timing_ms,
        )
        return cls(target=target, recognized=recognition.transcript, context=merged)


@dataclass
class AssessmentResult:
    """
    발음 평가 결과.

    호출마다 새로 만들어지며 호출 간에 상태를 공유하지 않습니다.

    Attributes:
        accuracy: 최종 정확도 (0-100)
        is_correct_for_srs: 간격 반복 학습에서 정답으로 인정되는지 여부
        feedback: 피드백 문구
        suggestions: 중복 제거된 교정 제안 목록
        detailed_analysis: 하위 분석 결과
        phonetics_breakdown: 목표 단어의 교육용 분해
        semantic_validation: 의미 검증 결과 (있는 경우)
        regime: 점수 산정 방식 ("semantic", "weighted", "error")
    """
    accuracy: float
    is_correct_for_srs: bool
    feedback: str
    suggestions: List[str] = field(default_factory=list)
    detailed_analysis: Dict[str, Any] = field(default_factory=dict)
    phonetics_breakdown: Dict[str, Any] = field(default_factory=dict)
    semantic_validation: Optional[Dict[str, Any]] = None
    regime: str = "weighted"

    @property
    def pedagogical_score(self) -> int:
        return self.accuracy

    @classmethod
    def error(cls) -> 'AssessmentResult':
        """기술적 오류 발생 시 반환하는 일반 결과."""
        return cls(
            accuracy=0,
            is_correct_for_srs=False,
            feedback=TECHNICAL_ERROR_FEEDBACK,
            suggestions=[TECHNICAL_ERROR_SUGGESTION],
            regime="error",
        )

    def to_dict(self) -> Dict[str, Any]:
        """원래 계약의 camelCase 키로 변환."""
        return {
            'accuracy': self.accuracy,
            'pedagogicalScore': self.pedagogical_score,
            'isCorrectForSRS': self.is_correct_for_srs,
            'feedback': self.feedback,
            'suggestions': list(self.suggestions),
            'detailedAnalysis': self.detailed_analysis,
            'phoneticsBreakdown': self.phonetics_breakdown,
            'semanticValidation': self.semantic_validation,
            'regime': self.regime,
        }
