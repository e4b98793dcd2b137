"""
피드백 문구와 교정 제안 생성 모듈.

학습자에게 보여주는 문구는 스페인어로 작성됩니다.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Sequence

from ...core.analysis_config import Thresholds
from ..hesitation.fluency_scorer import FluencyEstimate
from .assessment_types import (
    ErrorFinding,
    ErrorKind,
    PhoneticScores,
    SemanticClassification,
    SemanticType,
    Severity,
    TextSimilarity,
)
from .scoring import CompositeScore

logger = logging.getLogger(__name__)

ENCOURAGEMENT = '¡Sigue practicando!'

# 의미 분류 유형별 고정 피드백
SEMANTIC_FEEDBACK = MappingProxyType({
    SemanticType.EXACT_MATCH: '¡Perfecto! Pronunciación y conjugación exactas.',
    SemanticType.VALID_CONJUGATION: '¡Excelente! Conjugación correcta con buena pronunciación.',
    SemanticType.ACCENT_ERROR: 'Conjugación correcta, pero presta atención a la acentuación.',
})

# 검증기가 message 없이 분류만 준 경우의 기본 문구
SEMANTIC_FALLBACK_FEEDBACK = MappingProxyType({
    SemanticType.WRONG_CONTEXT: 'Es el verbo correcto, pero no la forma que se pide',
    SemanticType.DIFFERENT_VERB: 'Esa es la conjugación de un verbo diferente',
    SemanticType.MINOR_PRONUNCIATION: 'Conjugación correcta pero con un error menor de pronunciación',
    SemanticType.INCORRECT_WORD: 'Esa no es la conjugación correcta',
})

# 점수 구간별 피드백 (완전 일치, excellent, good, fair, poor, 그 이하)
EXACT_MATCH_FEEDBACK = '¡Perfecto! Pronunciación exacta y clara.'
EXCELLENT_FEEDBACK = '¡Excelente pronunciación!'
GOOD_FEEDBACK = '¡Muy bien! Pronunciación clara y correcta.'
FAIR_FEEDBACK = 'Buena pronunciación, pero puede mejorar.'
POOR_FEEDBACK = 'Bien, pero necesita más precisión en la pronunciación.'
RETRY_FEEDBACK = 'Necesita más práctica. Inténtalo de nuevo.'

# 의미 분류 유형별 학습 팁
SEMANTIC_STUDY_TIPS = MappingProxyType({
    SemanticType.WRONG_CONTEXT: (
        'Revisa el tiempo verbal (presente, pasado, futuro) y la persona (yo, tú, él/ella)',
        'Repasa las terminaciones de este verbo en el tiempo correcto',
    ),
    SemanticType.DIFFERENT_VERB: (
        'Estás pronunciando un verbo diferente. Concéntrate en el verbo que aparece en pantalla',
        'Escucha el audio de ejemplo para escuchar la pronunciación correcta',
    ),
    SemanticType.ACCENT_ERROR: (
        'La conjugación está bien, pero falta poner el acento en la sílaba correcta',
        'Recuerda: si termina en vocal, el acento va en la penúltima sílaba',
    ),
    SemanticType.MINOR_PRONUNCIATION: (
        'Habla más lentamente y pronuncia cada letra con claridad',
        'Repite las vocales básicas en voz alta: a, e, i, o, u para fijar el sonido',
    ),
    SemanticType.INCORRECT_WORD: (
        'La palabra que pronunciaste no es la conjugación correcta',
        'Escucha el ejemplo y trata de repetir exactamente lo que oyes',
    ),
})

VOWEL_DRILL = 'Practica las 5 vocales españolas: "a" como en "casa", "e" como en "mesa"'
CONSONANT_DRILL = 'Enfócate en consonantes españolas distintivas'
ACCENT_DRILL = 'Repasa las reglas: agudas (-án), llanas (ca-SA), esdrújulas (MÉ-di-co)'
SILENT_H_REMINDER = 'Recuerda: la "h" es siempre muda en español'
PURE_VOWELS_DRILL = 'Las vocales españolas son puras: /a/ /e/ /i/ /o/ /u/'
DISTINCTIVE_CONSONANTS_DRILL = 'Practica especialmente: rr (vibrante), ñ (palatal), j (fricativa)'
HESITATION_TIP = 'Intenta responder con más fluidez, sin pausas largas'
LOW_CONFIDENCE_TIP = 'Habla con más confianza y volumen adecuado'

ACCENT_KINDS = (ErrorKind.ACCENT_POSITION_ERROR, ErrorKind.ACCENT_COUNT_ERROR)


class FeedbackGenerator:
    """종합 점수와 오류 목록으로 피드백/제안을 생성하는 클래스."""

    def __init__(self, thresholds: Optional[Thresholds] = None, max_suggestions: int = 4,
                 vowel_drill_below: int = 80, consonant_drill_below: int = 70,
                 low_confidence_below: int = 70):
        """
        FeedbackGenerator 초기화.

        Args:
            thresholds: 점수 임계값
            max_suggestions: 최대 제안 개수
            vowel_drill_below: 모음 정확도가 이보다 낮으면 모음 연습 제안
            consonant_drill_below: 자음 정확도가 이보다 낮으면 자음 연습 제안
            low_confidence_below: 인식 신뢰도 점수가 이보다 낮으면 발성 제안
        """
        self.thresholds = thresholds or Thresholds()
        self.max_suggestions = max_suggestions
        self.vowel_drill_below = vowel_drill_below
        self.consonant_drill_below = consonant_drill_below
        self.low_confidence_below = low_confidence_below

    def generate_feedback(self, score: CompositeScore, similarity: TextSimilarity) -> str:
        """
        피드백 문구 생성.

        의미 고정 방식이면 분류 유형에 따른 문구를, 그 외에는
        점수 구간별 문구를 반환합니다.
        """
        if score.regime == "semantic" and score.classification is not None:
            message = self._semantic_feedback(score.classification)
            if message:
                return message

        return self._ladder_feedback(score.accuracy, similarity.exact_match)

    def _semantic_feedback(self, classification: SemanticClassification) -> Optional[str]:
        semantic_type = classification.type
        if semantic_type in SEMANTIC_FEEDBACK:
            return SEMANTIC_FEEDBACK[semantic_type]

        message = classification.message
        suggestion = classification.suggestion
        if not message:
            fallback = SEMANTIC_FALLBACK_FEEDBACK.get(semantic_type)
            return _join_sentences(fallback, suggestion) if fallback else None

        if semantic_type in (SemanticType.WRONG_CONTEXT, SemanticType.DIFFERENT_VERB):
            return _join_sentences(message, suggestion)
        if semantic_type is SemanticType.MINOR_PRONUNCIATION:
            return _join_sentences(f'Conjugación correcta pero {message}', suggestion)
        if semantic_type is SemanticType.INCORRECT_WORD:
            return _join_sentences(f'"{message}"', suggestion)
        return None

    def _ladder_feedback(self, accuracy: float, exact_match: bool) -> str:
        if exact_match:
            return EXACT_MATCH_FEEDBACK
        if accuracy >= self.thresholds.excellent:
            return EXCELLENT_FEEDBACK
        if accuracy >= self.thresholds.good:
            return GOOD_FEEDBACK
        if accuracy >= self.thresholds.fair:
            return FAIR_FEEDBACK
        if accuracy >= self.thresholds.poor:
            return POOR_FEEDBACK
        return RETRY_FEEDBACK

    def generate_suggestions(self, classification: Optional[SemanticClassification],
                             findings: Sequence[ErrorFinding],
                             fluency: Optional[FluencyEstimate] = None,
                             phonetic: Optional[PhoneticScores] = None) -> List[str]:
        """
        교정 제안 목록 생성.

        순서: 분류 결과의 제안, 오류 유형별 연습, 정확도 기반 연습,
        유창성 제안, 분류 유형별 학습 팁. 중복을 제거하고 max_suggestions 개로
        자르며, 오류가 없으면 격려 문구를 항상 포함합니다.

        Args:
            classification: 의미 검증 결과 (없을 수 있음)
            findings: 음성학적 오류 목록
            fluency: 유창성 보조 점수
            phonetic: 음성 특징 점수

        Returns:
            비어 있지 않은 제안 목록
        """
        suggestions: List[str] = []

        if classification is not None and classification.suggestion:
            suggestions.append(classification.suggestion)

        suggestions.extend(self._finding_suggestions(findings))

        if phonetic is not None:
            if phonetic.vowel_accuracy < self.vowel_drill_below:
                suggestions.append(PURE_VOWELS_DRILL)
            if phonetic.consonant_accuracy < self.consonant_drill_below:
                suggestions.append(DISTINCTIVE_CONSONANTS_DRILL)

        if fluency is not None:
            if fluency.hesitation_detected:
                suggestions.append(HESITATION_TIP)
            if fluency.confidence_score < self.low_confidence_below:
                suggestions.append(LOW_CONFIDENCE_TIP)

        if classification is not None:
            suggestions.extend(SEMANTIC_STUDY_TIPS.get(classification.type, ()))

        unique = _dedupe(suggestions)
        if not findings:
            # 격려 문구 자리를 남겨 둔다
            unique = [s for s in unique if s != ENCOURAGEMENT][:self.max_suggestions - 1]
            unique.append(ENCOURAGEMENT)
            return unique

        return unique[:self.max_suggestions]

    @staticmethod
    def _finding_suggestions(findings: Sequence[ErrorFinding]) -> List[str]:
        """오류 유형마다 하나의 연습 제안 (처음 나타난 순서대로)."""
        by_kind: Dict[ErrorKind, List[ErrorFinding]] = {}
        for finding in findings:
            kind = ErrorKind.ACCENT_POSITION_ERROR if finding.kind in ACCENT_KINDS else finding.kind
            by_kind.setdefault(kind, []).append(finding)

        suggestions = []
        for kind, group in by_kind.items():
            if kind is ErrorKind.VOWEL_CONFUSION:
                suggestions.append(VOWEL_DRILL)
            elif kind is ErrorKind.CONSONANT_CONFUSION:
                high = [f for f in group if f.severity is Severity.HIGH]
                if high:
                    suggestions.append(f'Errores críticos: {high[0].suggestion}. {CONSONANT_DRILL}')
                else:
                    suggestions.append(f'{CONSONANT_DRILL}: {group[0].suggestion}')
            elif kind is ErrorKind.ACCENT_POSITION_ERROR:
                suggestions.append(ACCENT_DRILL)
            elif kind is ErrorKind.SILENT_LETTER_ERROR:
                silent_h = [f for f in group if f.pair and f.pair[0] == 'h']
                suggestions.append(SILENT_H_REMINDER if silent_h else group[0].suggestion)
        return suggestions


def _join_sentences(first: str, second: Optional[str]) -> str:
    return f'{first}. {second}' if second else first


def _dedupe(items: Sequence[str]) -> List[str]:
    seen = set()
    unique = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique
