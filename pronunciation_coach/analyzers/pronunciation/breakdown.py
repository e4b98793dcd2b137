"""목표 단어의 교육용 음성 분해."""

from types import MappingProxyType
from typing import Any, Dict, List, Optional

from ...utils.text_processing import TextNormalizer, extract_vowels, strip_vowels
from .assessment_types import PhoneticsBreakdown
from .stress_analyzer import count_syllables, stress_type

# 학습자가 어려워하는 소리 (유형, 팁)
DIFFICULTY_ELEMENTS = MappingProxyType({
    'rr': ('vibrante múltiple', 'Vibra la lengua contra el paladar'),
    'ñ': ('nasal palatal', 'Coloca la lengua en el paladar'),
    'j': ('fricativa velar', 'Sonido suave desde la garganta'),
})


class PhoneticsBreakdownBuilder:
    """목표 단어를 음절/모음/자음/난이도 요소로 분해하는 클래스. 점수에는 영향이 없습니다."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None):
        self.normalizer = normalizer or TextNormalizer()

    def build(self, target: str) -> PhoneticsBreakdown:
        word = self.normalizer.clean(target)
        folded = self.normalizer.fold_accents(word)

        return PhoneticsBreakdown(
            word=word,
            syllables=count_syllables(word),
            vowels='-'.join(extract_vowels(folded)),
            consonants='-'.join(strip_vowels(folded)),
            stress_pattern=stress_type(word),
            difficulty_elements=tuple(self._difficulty_elements(word)),
        )

    @staticmethod
    def _difficulty_elements(word: str) -> List[Dict[str, Any]]:
        """rr, ñ, j 의 출현 위치마다 하나씩 (위치 순)."""
        elements = []
        for element, (element_type, tip) in DIFFICULTY_ELEMENTS.items():
            start = word.find(element)
            while start != -1:
                elements.append({
                    'element': element,
                    'type': element_type,
                    'tip': tip,
                    'position': start,
                })
                start = word.find(element, start + len(element))
        elements.sort(key=lambda item: item['position'])
        return elements
