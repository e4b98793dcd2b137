"""
동사 활용 의미 검증 모듈.

인식된 단어가 발음만 비슷한 것이 아니라 목표 동사/시제/인칭에 맞는
활용형인지를 판정합니다. 평가 엔진은 ISemanticValidator 프로토콜만 알고 있으며,
FormTableValidator 는 외부에서 주입한 활용표를 사용하는 참조 구현입니다.
"""

import re
import logging
from types import MappingProxyType
from typing import (
    Any, Dict, Iterable, Mapping, Optional, Protocol, Set, Tuple, runtime_checkable
)

from ...models.assessment import AssessmentContext
from ...utils.edit_distance import levenshtein_distance
from ...utils.text_processing import TextNormalizer, remove_accents
from ..pronunciation.assessment_types import SemanticClassification, SemanticType

logger = logging.getLogger(__name__)

# (mood, tense, person)
FormKey = Tuple[Optional[str], Optional[str], Optional[str]]
FormTable = Mapping[str, Mapping[FormKey, Iterable[str]]]

MOOD_LABELS = MappingProxyType({
    'indicative': 'Indicativo',
    'subjunctive': 'Subjuntivo',
    'imperative': 'Imperativo',
    'conditional': 'Condicional',
    'nonfinite': 'Formas no conjugadas',
    'indicativo': 'Indicativo',
    'subjuntivo': 'Subjuntivo',
    'imperativo': 'Imperativo',
    'condicional': 'Condicional',
})

TENSE_LABELS = MappingProxyType({
    'pres': 'Presente',
    'pretPerf': 'Pretérito perfecto',
    'pretIndef': 'Pretérito indefinido',
    'impf': 'Imperfecto',
    'plusc': 'Pluscuamperfecto',
    'fut': 'Futuro',
    'futPerf': 'Futuro perfecto',
    'subjPres': 'Presente',
    'subjImpf': 'Imperfecto',
    'subjPerf': 'Perfecto',
    'subjPlusc': 'Pluscuamperfecto',
    'impAff': 'Afirmativo',
    'impNeg': 'Negativo',
    'cond': 'Condicional',
    'condPerf': 'Condicional perfecto',
    'ger': 'Gerundio',
    'part': 'Participio',
})

PERSON_LABELS = MappingProxyType({
    '1s': 'yo',
    '2s_tu': 'tú',
    '2s_vos': 'vos',
    '3s': 'él/ella',
    '1p': 'nosotros',
    '2p_vosotros': 'vosotros',
    '3p': 'ellos',
})

SUBJUNCTIVE_MOODS = frozenset({'subjunctive', 'subjuntivo'})
IMPERATIVE_MOODS = frozenset({'imperative', 'imperativo'})

# 경미한 발음 차이 패턴 (목표 패턴, 치환, 설명, 제안)
MINOR_PRONUNCIATION_PATTERNS = (
    (re.compile(r"b"), 'v', 'confusión b/v', 'En español, b y v suenan igual'),
    (re.compile(r"h"), '', 'h muda no pronunciada', 'La h en español es muda'),
    (re.compile(r"c([ei])"), r'z\1', 'ceceo/seseo', 'ce/ci vs ze/zi según la región'),
    (re.compile(r"ll"), 'y', 'yeísmo', 'll suena como y en muchas regiones'),
)
DEFAULT_MINOR_DESCRIPTION = 'diferencia menor de pronunciación'
DEFAULT_MINOR_SUGGESTION = 'Articula más claramente cada sonido'

MAX_MINOR_DISTANCE = 2
MAX_MINOR_LENGTH_DIFFERENCE = 2


@runtime_checkable
class ISemanticValidator(Protocol):
    """
    의미 검증기 인터페이스.

    구현체는 목표/인식 문자열과 컨텍스트를 받아 SemanticClassification 을
    반환해야 합니다. 예외를 던지면 평가 엔진은 기술 오류 결과를 반환합니다.
    """

    def validate_conjugation(self, target: str, recognized: str,
                             context: AssessmentContext) -> SemanticClassification:
        ...


def format_context(mood: Optional[str], tense: Optional[str], person: Optional[str]) -> str:
    """서법/시제/인칭을 학습자용 스페인어 문구로 변환."""
    tense_label = TENSE_LABELS.get(tense, tense)
    person_label = PERSON_LABELS.get(person, person)

    if mood in SUBJUNCTIVE_MOODS:
        return f'{tense_label} de subjuntivo con {person_label}'
    if mood in IMPERATIVE_MOODS:
        return f'imperativo con {person_label}'
    return f'{tense_label} con {person_label}'


def identify_minor_pronunciation_error(target: str, recognized: str) -> Tuple[str, str]:
    """경미한 발음 차이의 (설명, 제안). 알려진 패턴이 없으면 일반 문구."""
    for pattern, replacement, description, suggestion in MINOR_PRONUNCIATION_PATTERNS:
        if pattern.sub(replacement, target) == recognized:
            return description, suggestion
    return DEFAULT_MINOR_DESCRIPTION, DEFAULT_MINOR_SUGGESTION


class FormTableValidator:
    """
    활용표 기반 의미 검증기.

    Args:
        forms: {원형: {(서법, 시제, 인칭): {활용형, ...}}} 형태의 활용표
    """

    def __init__(self, forms: FormTable, normalizer: Optional[TextNormalizer] = None):
        self.normalizer = normalizer or TextNormalizer()
        self.forms: Dict[str, Dict[FormKey, Set[str]]] = {
            lemma: {
                tuple(key): {self.normalizer.clean(value) for value in values}
                for key, values in table.items()
            }
            for lemma, table in forms.items()
        }
        logger.info(f"🔍 활용표 검증기 초기화: 동사 {len(self.forms)}개")

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> 'FormTableValidator':
        """
        {lemma, mood, tense, person, value} 레코드 목록에서 활용표 생성.

        lemma 또는 value 가 없는 레코드는 건너뜁니다.
        """
        forms: Dict[str, Dict[FormKey, Set[str]]] = {}
        skipped = 0
        for record in records:
            lemma = record.get('lemma') or record.get('verb')
            value = record.get('value')
            if not lemma or not value:
                skipped += 1
                continue
            key = (record.get('mood'), record.get('tense'), record.get('person'))
            forms.setdefault(lemma, {}).setdefault(key, set()).add(value)

        if skipped:
            logger.warning(f"활용표 레코드 {skipped}개를 건너뜀 (lemma/value 누락)")
        return cls(forms)

    def validate_conjugation(self, target: str, recognized: str,
                             context: Optional[AssessmentContext] = None) -> SemanticClassification:
        """
        인식된 단어의 활용 정확성 분류.

        판정 순서: 완전 일치, 맞는 활용형, 같은 동사의 다른 시제/인칭,
        다른 동사의 활용형, 강세만 다름, 경미한 발음 차이, 틀린 단어.
        """
        context = context or AssessmentContext()
        target = self.normalizer.clean(target)
        recognized = self.normalizer.clean(recognized)
        verb = context.lemma

        if target == recognized:
            return SemanticClassification(
                type=SemanticType.EXACT_MATCH,
                pedagogical_score=100,
                message='Conjugación exacta y correcta',
                is_valid=True,
                confidence=100,
            )

        if verb and verb in self.forms:
            classification = self._classify_against_table(target, recognized, verb, context)
            if classification is not None:
                return classification

        if remove_accents(target) == remove_accents(recognized):
            return SemanticClassification(
                type=SemanticType.ACCENT_ERROR,
                pedagogical_score=85,
                message='Conjugación correcta, pero falta la acentuación apropiada',
                suggestion='Practica la acentuación española',
                is_valid=True,
                confidence=85,
            )

        if (abs(len(target) - len(recognized)) <= MAX_MINOR_LENGTH_DIFFERENCE
                and levenshtein_distance(target, recognized) <= MAX_MINOR_DISTANCE):
            description, suggestion = identify_minor_pronunciation_error(target, recognized)
            return SemanticClassification(
                type=SemanticType.MINOR_PRONUNCIATION,
                pedagogical_score=60,
                message=f'Error menor de pronunciación: {description}',
                suggestion=suggestion,
                is_valid=False,
                confidence=70,
            )

        return SemanticClassification(
            type=SemanticType.INCORRECT_WORD,
            pedagogical_score=0,
            message=f'"{recognized}" no es la conjugación correcta',
            suggestion=f'La conjugación correcta es "{target}"',
            is_valid=False,
            confidence=20,
        )

    def _classify_against_table(self, target: str, recognized: str, verb: str,
                                context: AssessmentContext) -> Optional[SemanticClassification]:
        verb_forms = self.forms[verb]
        expected_key = (context.mood, context.tense, context.person)

        if recognized in verb_forms.get(expected_key, ()):
            return SemanticClassification(
                type=SemanticType.VALID_CONJUGATION,
                pedagogical_score=95,
                message='Conjugación correcta para este contexto',
                is_valid=True,
                confidence=95,
            )

        for key, values in verb_forms.items():
            if key != expected_key and recognized in values:
                wrong_context = format_context(*key)
                correct_context = format_context(*expected_key)
                return SemanticClassification(
                    type=SemanticType.WRONG_CONTEXT,
                    pedagogical_score=20,
                    message=f'Es una conjugación válida de "{verb}" pero para {wrong_context}',
                    suggestion=f'Para {correct_context} debe ser "{target}"',
                    is_valid=False,
                    confidence=60,
                )

        other_verb = self._find_other_verb(recognized)
        if other_verb is not None:
            return SemanticClassification(
                type=SemanticType.DIFFERENT_VERB,
                pedagogical_score=10,
                message=f'"{recognized}" es conjugación de "{other_verb}", no de "{verb}"',
                suggestion=f'Pronuncia la conjugación correcta de "{verb}": "{target}"',
                is_valid=False,
                confidence=40,
            )

        return None

    def _find_other_verb(self, recognized: str) -> Optional[str]:
        for lemma, verb_forms in self.forms.items():
            if any(recognized in values for values in verb_forms.values()):
                return lemma
        return None
