"""
음성 특징 분석 모듈 - 모음, 자음, 이중모음 대응 및 오류 패턴 탐지.

인식기가 전사한 텍스트만을 대상으로 하며, 음향 신호는 다루지 않습니다.
"""

import re
import logging
from collections import Counter
from types import MappingProxyType
from typing import List, Optional, Sequence

from ...utils.edit_distance import align_sequences, levenshtein_distance
from ...utils.text_processing import (
    NormalizedPair,
    ACCENTED_VOWELS,
    count_accents,
    extract_vowels,
    remove_accents,
    strip_vowels,
)
from .assessment_types import ErrorFinding, ErrorKind, PhoneticScores, Severity

logger = logging.getLogger(__name__)

# 한 단위로 취급하는 이중자
DIGRAPHS = ('rr', 'll', 'ch')

DIPHTHONG_PATTERN = re.compile(r"[aeiou]{2}")

# 학습자가 흔히 혼동하는 대체 음 (목표 음 -> 인식된 음 후보)
COMMON_SPANISH_ERRORS = MappingProxyType({
    'vowel_errors': MappingProxyType({
        'e': ('i', 'a'),
        'i': ('e', 'a'),
        'o': ('u', 'a'),
        'u': ('o', 'i'),
        'a': ('e', 'i', 'o'),
    }),
    'consonant_errors': MappingProxyType({
        'b': ('v', 'p'),      # 베타시즘, 유무성
        'v': ('b', 'f'),
        'd': ('t',),
        'g': ('k', 'c'),
        'r': ('rr', 'l'),
        'rr': ('r',),
        'ñ': ('n', 'ny'),
        'n': ('ñ',),
        'j': ('h', 'y'),
        'll': ('y', 'ly'),
        'y': ('ll',),
        'c': ('s', 'z'),      # ceceo/seseo
        's': ('c', 'z'),
        'z': ('s', 'c'),
    }),
    'silent_letters': ('h',),
})

# 출현 횟수를 비교하는 혼동 쌍 (오류 유형, 음 A, 음 B)
CONFUSABLE_PATTERNS = (
    (ErrorKind.VOWEL_CONFUSION, 'a', 'e'),
    (ErrorKind.VOWEL_CONFUSION, 'e', 'i'),
    (ErrorKind.VOWEL_CONFUSION, 'o', 'u'),
    (ErrorKind.CONSONANT_CONFUSION, 'r', 'rr'),
    (ErrorKind.CONSONANT_CONFUSION, 'j', 'h'),
    (ErrorKind.CONSONANT_CONFUSION, 'ñ', 'n'),
    (ErrorKind.CONSONANT_CONFUSION, 'b', 'v'),
)

HIGH_SEVERITY_PAIRS = frozenset({
    ('r', 'rr'), ('rr', 'r'),
    ('ñ', 'n'), ('n', 'ñ'),
    ('ll', 'y'), ('y', 'll'),
})

MEDIUM_SEVERITY_PAIRS = frozenset({
    ('b', 'v'), ('v', 'b'),
    ('c', 's'), ('s', 'c'),
    ('z', 's'), ('s', 'z'),
})

CONSONANT_SUGGESTIONS = MappingProxyType({
    ('r', 'rr'): 'Practica la diferencia entre r simple y rr múltiple',
    ('rr', 'r'): 'La "rr" requiere vibración múltiple de la lengua',
    ('ñ', 'n'): 'La "ñ" se pronuncia con la lengua en el paladar',
    ('n', 'ñ'): 'La "n" es diferente de "ñ" - sin palatalización',
    ('ll', 'y'): 'En muchas regiones "ll" suena como "y"',
    ('y', 'll'): 'Dependiendo de la región, "y" y "ll" pueden sonar igual',
    ('b', 'v'): 'En español "b" y "v" suenan igual',
    ('v', 'b'): 'No hay diferencia de pronunciación entre "v" y "b"',
    ('c', 's'): 'En algunas regiones "ce/ci" suena como "se/si"',
    ('s', 'c'): 'Distingue entre "s" y "c" según tu región',
    ('j', 'h'): 'La "j" es un sonido fricativo, la "h" es muda',
    ('h', 'j'): 'La "h" es muda, la "j" es un sonido fricativo',
})

# 인식 결과에서 사라진 이중자/묵음 글자에 대한 안내 (글자, 설명, 제안)
SILENT_LETTER_CHECKS = (
    ('h', 'La "h" es muda en español', 'Recuerda que la "h" no se pronuncia'),
    ('ll', 'El dígrafo "ll" no se reconoció', 'Pronuncia la "ll" como una sola consonante palatal'),
    ('j', 'La "j" no se reconoció', 'La "j" suena fuerte, desde la garganta'),
)


def split_phonetic_units(text: str) -> List[str]:
    """문자열을 음 단위로 분할 (rr, ll, ch 는 하나의 단위, 공백은 제외)."""
    units = []
    index = 0
    while index < len(text):
        pair = text[index:index + 2]
        if pair in DIGRAPHS:
            units.append(pair)
            index += 2
            continue
        if not text[index].isspace():
            units.append(text[index])
        index += 1
    return units


def consonant_error_severity(target: str, recognized: str) -> Severity:
    """자음 혼동 쌍의 심각도 (r/rr, ñ/n = 높음, b/v, c/s = 중간, 그 외 낮음)."""
    if (target, recognized) in HIGH_SEVERITY_PAIRS:
        return Severity.HIGH
    if (target, recognized) in MEDIUM_SEVERITY_PAIRS:
        return Severity.MEDIUM
    return Severity.LOW


def consonant_error_suggestion(target: str, recognized: str) -> str:
    """자음 혼동 쌍에 대한 구체적인 교정 제안."""
    return CONSONANT_SUGGESTIONS.get(
        (target, recognized),
        f'Practica la diferencia entre "{target}" y "{recognized}"'
    )


def detect_accent_errors(target: str, recognized: str) -> List[ErrorFinding]:
    """
    표기 강세 오류 탐지.

    강세를 제거한 문자열이 같지만 원문이 다를 때만 검사합니다.

    Args:
        target: 강세를 보존한 목표 문자열
        recognized: 강세를 보존한 인식 문자열

    Returns:
        accent_count_error 또는 accent_position_error 목록
    """
    if remove_accents(target) != remove_accents(recognized) or target == recognized:
        return []

    if count_accents(target) != count_accents(recognized):
        return [ErrorFinding(
            kind=ErrorKind.ACCENT_COUNT_ERROR,
            description='Número incorrecto de acentos',
            suggestion='Revisa las reglas de acentuación española',
            severity=Severity.MEDIUM,
        )]

    target_positions = [i for i, char in enumerate(target) if char in ACCENTED_VOWELS]
    recognized_positions = [i for i, char in enumerate(recognized) if char in ACCENTED_VOWELS]
    if target_positions != recognized_positions:
        return [ErrorFinding(
            kind=ErrorKind.ACCENT_POSITION_ERROR,
            description='Acento en posición incorrecta',
            suggestion='Practica la acentuación de palabras agudas, llanas y esdrújulas',
            severity=Severity.MEDIUM,
        )]

    return []


class PhoneticAnalyzer:
    """모음/자음/이중모음 대응과 오류 패턴을 분석하는 클래스."""

    def __init__(self, finding_penalty: int = 10):
        """
        PhoneticAnalyzer 초기화.

        Args:
            finding_penalty: 오류 1건당 감점 (기본값: 10)
        """
        self.finding_penalty = finding_penalty
        self.weights = MappingProxyType({
            'vowels': 0.3,
            'consonants': 0.4,
            'diphthongs': 0.2,
            'findings': 0.1,
        })

    def analyze(self, pair: NormalizedPair) -> PhoneticScores:
        """
        정규화된 문자열 쌍의 음성 특징 분석.

        비교용 문자열이 같으면 모든 점수는 100이며, 이때는
        표기 강세 차이만 오류 목록에 보고합니다 (점수에는 반영하지 않음).
        """
        if pair.is_exact_match:
            accent_errors = detect_accent_errors(pair.target_original, pair.recognized_original)
            if not accent_errors:
                return PhoneticScores.perfect()
            return PhoneticScores(
                vowel_accuracy=100,
                consonant_accuracy=100,
                diphthong_accuracy=100,
                overall_score=100,
                common_errors=tuple(accent_errors),
            )

        vowel_accuracy = self.analyze_vowels(pair.target, pair.recognized)
        consonant_accuracy = self.analyze_consonants(pair.target, pair.recognized)
        diphthong_accuracy = self.analyze_diphthongs(pair.target, pair.recognized)
        errors = self.detect_common_errors(pair.target_original, pair.recognized_original)

        scores = PhoneticScores(
            vowel_accuracy=vowel_accuracy,
            consonant_accuracy=consonant_accuracy,
            diphthong_accuracy=diphthong_accuracy,
            overall_score=self._overall_score(
                vowel_accuracy, consonant_accuracy, diphthong_accuracy, len(errors)
            ),
            common_errors=tuple(errors),
        )
        logger.debug(
            f"음성 분석: 모음 {vowel_accuracy}, 자음 {consonant_accuracy}, "
            f"이중모음 {diphthong_accuracy}, 오류 {len(errors)}건"
        )
        return scores

    def _overall_score(self, vowels: int, consonants: int, diphthongs: int, finding_count: int) -> int:
        findings_term = max(0, 100 - finding_count * self.finding_penalty)
        return int(round(
            vowels * self.weights['vowels']
            + consonants * self.weights['consonants']
            + diphthongs * self.weights['diphthongs']
            + findings_term * self.weights['findings']
        ))

    def analyze_vowels(self, target: str, recognized: str) -> int:
        """모음 시퀀스 위치별 일치율 (0-100)."""
        target_vowels = extract_vowels(target)
        recognized_vowels = extract_vowels(recognized)
        return self._positional_accuracy(target_vowels, recognized_vowels)

    def analyze_consonants(self, target: str, recognized: str) -> int:
        """자음 골격의 편집 거리 기반 정확도 (0-100)."""
        target_consonants = strip_vowels(target)
        recognized_consonants = strip_vowels(recognized)

        if not target_consonants:
            return 100

        distance = levenshtein_distance(target_consonants, recognized_consonants)
        accuracy = (len(target_consonants) - distance) / len(target_consonants) * 100
        return max(0, int(round(accuracy)))

    def analyze_diphthongs(self, target: str, recognized: str) -> int:
        """연속 모음 쌍의 위치별 일치율 (0-100)."""
        target_diphthongs = DIPHTHONG_PATTERN.findall(target)
        recognized_diphthongs = DIPHTHONG_PATTERN.findall(recognized)
        return self._positional_accuracy(target_diphthongs, recognized_diphthongs)

    @staticmethod
    def _positional_accuracy(target_items: Sequence[str], recognized_items: Sequence[str]) -> int:
        if not target_items:
            return 100

        correct = sum(
            1 for target_item, recognized_item in zip(target_items, recognized_items)
            if target_item == recognized_item
        )
        return int(round(correct / len(target_items) * 100))

    def detect_common_errors(self, target: str, recognized: str) -> List[ErrorFinding]:
        """
        학습자에게 흔한 발음 오류 패턴 탐지.

        Args:
            target: 강세를 보존한 목표 문자열 (소문자)
            recognized: 강세를 보존한 인식 문자열 (소문자)

        Returns:
            (유형, 음 쌍) 기준으로 중복 제거된 ErrorFinding 목록
        """
        target_units = split_phonetic_units(remove_accents(target))
        recognized_units = split_phonetic_units(remove_accents(recognized))

        candidates: List[ErrorFinding] = []
        candidates.extend(self._detect_substitutions(target_units, recognized_units))
        candidates.extend(self._detect_count_patterns(target_units, recognized_units))
        candidates.extend(self._detect_silent_letters(target_units, recognized_units))
        candidates.extend(detect_accent_errors(target, recognized))

        findings: List[ErrorFinding] = []
        seen = set()
        for finding in candidates:
            if finding.dedupe_key in seen:
                continue
            seen.add(finding.dedupe_key)
            findings.append(finding)
        return findings

    def _detect_substitutions(self, target_units: List[str], recognized_units: List[str]) -> List[ErrorFinding]:
        """정렬된 치환 위치에서 알려진 혼동 쌍 탐지."""
        findings = []
        vowel_errors = COMMON_SPANISH_ERRORS['vowel_errors']
        consonant_errors = COMMON_SPANISH_ERRORS['consonant_errors']

        for op, ref_index, hyp_index in align_sequences(target_units, recognized_units):
            if op != 'sub':
                continue
            target_unit = target_units[ref_index]
            recognized_unit = recognized_units[hyp_index]

            if recognized_unit in vowel_errors.get(target_unit, ()):
                findings.append(self._vowel_finding(target_unit, recognized_unit, ref_index))
            elif recognized_unit in consonant_errors.get(target_unit, ()):
                findings.append(self._consonant_finding(target_unit, recognized_unit, ref_index))

        return findings

    def _detect_count_patterns(self, target_units: List[str], recognized_units: List[str]) -> List[ErrorFinding]:
        """혼동 쌍 양쪽의 출현 횟수가 반대 방향으로 바뀐 경우 탐지."""
        findings = []
        target_counts = Counter(target_units)
        recognized_counts = Counter(recognized_units)

        for kind, first, second in CONFUSABLE_PATTERNS:
            first_delta = target_counts[first] - recognized_counts[first]
            second_delta = target_counts[second] - recognized_counts[second]
            if first_delta * second_delta >= 0:
                continue

            # 목표에서 줄어든 쪽이 목표 음
            target_unit, recognized_unit = (first, second) if first_delta > 0 else (second, first)
            if kind is ErrorKind.VOWEL_CONFUSION:
                findings.append(self._vowel_finding(target_unit, recognized_unit))
            else:
                findings.append(self._consonant_finding(target_unit, recognized_unit))

        return findings

    def _detect_silent_letters(self, target_units: List[str], recognized_units: List[str]) -> List[ErrorFinding]:
        findings = []
        for letter, description, suggestion in SILENT_LETTER_CHECKS:
            if letter in target_units and letter not in recognized_units:
                findings.append(ErrorFinding(
                    kind=ErrorKind.SILENT_LETTER_ERROR,
                    description=description,
                    suggestion=suggestion,
                    severity=Severity.LOW,
                    pair=(letter, ''),
                ))
        return findings

    @staticmethod
    def _vowel_finding(target_unit: str, recognized_unit: str,
                       position: Optional[int] = None) -> ErrorFinding:
        return ErrorFinding(
            kind=ErrorKind.VOWEL_CONFUSION,
            description=f'Confusión {target_unit}/{recognized_unit}',
            suggestion=f'Practica la diferencia entre "{target_unit}" y "{recognized_unit}"',
            severity=Severity.MEDIUM,
            pair=(target_unit, recognized_unit),
            position=position,
        )

    @staticmethod
    def _consonant_finding(target_unit: str, recognized_unit: str,
                           position: Optional[int] = None) -> ErrorFinding:
        return ErrorFinding(
            kind=ErrorKind.CONSONANT_CONFUSION,
            description=f'Confusión {target_unit}/{recognized_unit}',
            suggestion=consonant_error_suggestion(target_unit, recognized_unit),
            severity=consonant_error_severity(target_unit, recognized_unit),
            pair=(target_unit, recognized_unit),
            position=position,
        )
