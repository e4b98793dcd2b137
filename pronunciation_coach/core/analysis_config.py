"""분석 설정 통합 관리 모듈."""

import os
from dataclasses import dataclass, field, fields, asdict, replace
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = 'PRONUNCIATION_COACH_'


@dataclass(frozen=True)
class Thresholds:
    """
    점수 구간 임계값 (불변 값 객체).

    passing 은 간격 반복 학습에서 정답으로 인정하는 최소 점수입니다.
    """
    perfect: int = 100
    excellent: int = 95
    good: int = 85
    fair: int = 75
    poor: int = 60
    passing: int = 90

    def __post_init__(self):
        for name in ('perfect', 'excellent', 'good', 'fair', 'poor', 'passing'):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"임계값 {name}은 0-100 범위여야 합니다: {value}")

        if not self.perfect >= self.excellent >= self.good >= self.fair >= self.poor:
            raise ValueError(
                "임계값은 perfect >= excellent >= good >= fair >= poor 순서여야 합니다"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Thresholds':
        return cls(**{key: int(value) for key, value in data.items()})

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ScoreWeights:
    """가중 합산 방식의 구성 요소별 가중치."""
    text_similarity: float = 0.4
    phonetic: float = 0.3
    stress: float = 0.2
    fluency: float = 0.1

    def __post_init__(self):
        values = [self.text_similarity, self.phonetic, self.stress, self.fluency]
        if any(value < 0 for value in values):
            raise ValueError("가중치는 음수일 수 없습니다")
        if abs(sum(values) - 1.0) > 1e-6:
            raise ValueError(f"가중치 합은 1이어야 합니다: {sum(values)}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ScoreWeights':
        return cls(**{key: float(value) for key, value in data.items()})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class AnalysisConfig:
    """발음 평가 엔진 설정을 통합 관리하는 클래스."""

    # 점수 설정
    thresholds: Thresholds = field(default_factory=Thresholds)
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    strict_exact_match: bool = True  # False면 완전 일치를 95점으로 처리 (레거시)

    # 피드백 설정
    max_suggestions: int = 4

    # 컨텍스트 기본값
    default_confidence: float = 0.8
    default_timing_ms: float = 1000.0

    # 언어 설정 (스페인어만 지원)
    language: str = 'es'

    def __post_init__(self):
        """초기화 후 처리."""
        if isinstance(self.thresholds, Mapping):
            self.thresholds = Thresholds.from_dict(self.thresholds)
        if isinstance(self.weights, Mapping):
            self.weights = ScoreWeights.from_dict(self.weights)

        if self.language != 'es':
            raise ValueError(f"지원하지 않는 언어: {self.language}. 지원 언어: ['es']")

        if self.max_suggestions < 1:
            raise ValueError(f"max_suggestions는 1 이상이어야 합니다: {self.max_suggestions}")

        if not 0.0 <= self.default_confidence <= 1.0:
            raise ValueError(f"default_confidence는 0-1 범위여야 합니다: {self.default_confidence}")

        if self.default_timing_ms < 0:
            raise ValueError(f"default_timing_ms는 음수일 수 없습니다: {self.default_timing_ms}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'AnalysisConfig':
        """딕셔너리에서 설정 생성."""
        return cls(**config_dict)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AnalysisConfig':
        """
        환경변수에서 설정 생성.

        PRONUNCIATION_COACH_PASSING_THRESHOLD, PRONUNCIATION_COACH_MAX_SUGGESTIONS,
        PRONUNCIATION_COACH_STRICT_EXACT_MATCH, PRONUNCIATION_COACH_DEFAULT_CONFIDENCE,
        PRONUNCIATION_COACH_DEFAULT_TIMING_MS 를 읽습니다.
        """
        environ = os.environ if environ is None else environ
        config = cls()

        passing = environ.get(f'{ENV_PREFIX}PASSING_THRESHOLD')
        if passing is not None:
            thresholds = config.thresholds.to_dict()
            thresholds['passing'] = int(passing)
            config.thresholds = Thresholds.from_dict(thresholds)

        max_suggestions = environ.get(f'{ENV_PREFIX}MAX_SUGGESTIONS')
        if max_suggestions is not None:
            config.update(max_suggestions=int(max_suggestions))

        strict = environ.get(f'{ENV_PREFIX}STRICT_EXACT_MATCH')
        if strict is not None:
            config.update(strict_exact_match=strict.strip().lower() in ('1', 'true', 'yes', 'on'))

        confidence = environ.get(f'{ENV_PREFIX}DEFAULT_CONFIDENCE')
        if confidence is not None:
            config.update(default_confidence=float(confidence))

        timing = environ.get(f'{ENV_PREFIX}DEFAULT_TIMING_MS')
        if timing is not None:
            config.update(default_timing_ms=float(timing))

        return config

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환."""
        return {
            'thresholds': self.thresholds.to_dict(),
            'weights': self.weights.to_dict(),
            'strict_exact_match': self.strict_exact_match,
            'max_suggestions': self.max_suggestions,
            'default_confidence': self.default_confidence,
            'default_timing_ms': self.default_timing_ms,
            'language': self.language,
        }

    def update(self, **kwargs) -> None:
        """설정 업데이트 (값 검증 포함)."""
        known = {f.name for f in fields(self)}
        for key in kwargs:
            if key not in known:
                raise ValueError(f"알 수 없는 설정 키: {key}")

        # 검증을 통과한 경우에만 반영
        candidate = replace(self, **kwargs)
        for key in kwargs:
            setattr(self, key, getattr(candidate, key))
