"""음절 수와 강세 유형 분석 모듈."""

import logging

from ...utils.text_processing import NormalizedPair, ACCENTED_VOWELS, remove_accents
from .assessment_types import StressAnalysis, StressType

logger = logging.getLogger(__name__)

SYLLABLE_VOWELS = frozenset('aeiouáéíóúü')
STRONG_VOWELS = frozenset('aeoáéó')
WEAK_VOWELS = frozenset('iuíúü')
ACCENTED_WEAK_VOWELS = frozenset('íú')

# 항상 이중모음이 되는 조합 (강세 부호 제거 후)
DIPHTHONG_PAIRS = frozenset({
    'ai', 'au', 'ei', 'eu', 'oi', 'ou',        # 강모음 + 약모음
    'ia', 'ie', 'io', 'ua', 'ue', 'ui', 'uo',  # 약모음 + 강모음
    'iu',
})

# 단어 끝이 이 글자면 끝에서 두 번째 음절에 강세
LLANA_ENDINGS = frozenset('aeiouns')

# 표기 강세가 없을 때 비교가 확정적이지 않은 경우의 고정 점수
HEURISTIC_STRESS_ACCURACY = 75


def is_diphthong(first: str, second: str) -> bool:
    """
    두 모음이 한 음절(이중모음)을 이루는지 판단.

    강모음 둘은 항상 모음 분리(hiato)이며, 강세 부호가 있는 약모음은
    인접한 강모음과 이중모음을 이루지 않습니다.
    """
    if first in ACCENTED_WEAK_VOWELS and second in STRONG_VOWELS:
        return False
    if second in ACCENTED_WEAK_VOWELS and first in STRONG_VOWELS:
        return False
    if first in STRONG_VOWELS and second in STRONG_VOWELS:
        return False

    pair = remove_accents(first + second)
    if first in WEAK_VOWELS or second in WEAK_VOWELS:
        return pair in DIPHTHONG_PAIRS
    return False


def _extra_syllables(vowel_group: str) -> int:
    """연속 모음 묶음 안의 모음 분리 개수."""
    extra = 0
    index = 0
    while index < len(vowel_group) - 1:
        if is_diphthong(vowel_group[index], vowel_group[index + 1]):
            index += 2
        else:
            extra += 1
            index += 1
    return extra


def count_syllables(word: str) -> int:
    """
    스페인어 단어의 음절 수 추정.

    강세를 보존한 단어에서 연속 모음 묶음을 세고, 묶음 안에서
    이중모음이 아닌 인접 모음마다 음절을 하나씩 더합니다.

    Args:
        word: 대상 단어 (강세 보존)

    Returns:
        음절 수 (비어 있지 않은 단어는 최소 1)
    """
    text = (word or "").lower()
    if not text.strip():
        return 0

    syllables = 0
    group = ""
    for char in text + " ":
        if char in SYLLABLE_VOWELS:
            group += char
            continue
        if group:
            syllables += 1 + _extra_syllables(group)
            group = ""

    return max(1, syllables)


def stress_type(word: str) -> StressType:
    """
    강세 유형 분류.

    표기 강세가 있으면 esdrújula, 단음절이면 monosílaba,
    모음/n/s 로 끝나면 llana, 그 외에는 aguda 입니다.
    """
    text = (word or "").lower().strip()
    if any(char in ACCENTED_VOWELS for char in text):
        return StressType.ESDRUJULA
    if count_syllables(text) <= 1:
        return StressType.MONOSILABA
    if text and text[-1] in LLANA_ENDINGS:
        return StressType.LLANA
    return StressType.AGUDA


class StressAnalyzer:
    """목표 단어의 음절/강세를 분석하는 클래스."""

    def analyze(self, pair: NormalizedPair) -> StressAnalysis:
        """목표 단어 기준 음절 수, 강세 유형, 강세 정확도."""
        syllable_count = count_syllables(pair.target_original)
        stress = stress_type(pair.target_original)

        # TODO: 강세 위치 이동을 실제로 비교하는 방식이 정해지면 고정 점수를 대체
        accuracy = 100 if pair.is_exact_match else HEURISTIC_STRESS_ACCURACY

        return StressAnalysis(
            syllable_count=syllable_count,
            stress_type=stress,
            accuracy=accuracy,
        )
