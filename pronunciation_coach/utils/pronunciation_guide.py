"""연습 카드에 함께 표시되는 발음 안내 문자열 생성 유틸리티."""

import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

# 하나의 소리를 내는 두 글자 조합
DIGRAPH_GUIDE = MappingProxyType({
    'rr': 'RR',
    'll': 'LY',
    'ch': 'CH',
})

SINGLE_LETTER_GUIDE = MappingProxyType({
    'h': '',    # 묵음
    'j': 'H',
    'ñ': 'NY',
})

# (포함 여부를 검사할 문자열, 안내 문구)
PRONUNCIATION_TIPS = (
    ('h', 'La "h" es muda'),
    ('rr', 'Vibra la "rr" con la lengua'),
    ('ñ', 'Sonido "ny" con la lengua en el paladar'),
    ('j', '"J" suave desde la garganta'),
    ('ll', '"Ll" como "y" en la mayoría de regiones'),
)

DEFAULT_TIP = 'Pronuncia cada sílaba claramente'


def generate_pronunciation_guide(word: str) -> str:
    """
    시각적 발음 안내 문자열 생성.

    rr→RR, ll→LY, ch→CH, j→H, ñ→NY 로 바꾸고 묵음 h는 제거하며
    나머지 글자는 대문자로 변환합니다.

    Args:
        word: 대상 단어 (대소문자 무관)

    Returns:
        대문자 발음 안내 문자열 (예: "llave" -> "LYAVE")
    """
    if not word:
        return ""

    result = []
    index = 0
    while index < len(word):
        digraph = word[index:index + 2].lower()
        if digraph in DIGRAPH_GUIDE:
            result.append(DIGRAPH_GUIDE[digraph])
            index += 2
            continue

        char = word[index]
        lower_char = char.lower()
        if lower_char in SINGLE_LETTER_GUIDE:
            result.append(SINGLE_LETTER_GUIDE[lower_char])
        else:
            result.append(char.upper())
        index += 1

    return "".join(result)


def generate_ipa(word: str) -> str:
    """단순화된 IPA 근사 표기 (h 제거, qu→k, ce/ci→θe/θi)."""
    text = (word or "").replace('h', '')
    text = text.replace('qu', 'k')
    text = re.sub(r'c([ei])', r'θ\1', text)
    return f"/{text}/"


def generate_pronunciation_tip(word: str) -> str:
    """단어에 포함된 어려운 소리에 대한 안내 문구."""
    word = word or ""
    tips = [tip for pattern, tip in PRONUNCIATION_TIPS if pattern in word]
    return '. '.join(tips) if tips else DEFAULT_TIP


def build_pronunciation_item(item: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    연습 항목을 발음 카드 데이터로 변환.

    Args:
        item: lemma, value(또는 form.value / expectedValue), mood, tense, person 을 가진 항목

    Returns:
        발음 카드 딕셔너리. 항목이 없으면 None
    """
    if not item:
        return None

    form_info = item.get('form') or {}
    form = (
        item.get('value')
        or (form_info.get('value') if isinstance(form_info, Mapping) else None)
        or item.get('expectedValue')
        or ''
    )
    verb = item.get('lemma') or ''

    return {
        'verb': verb,
        'form': form,
        'person': item.get('person') or '',
        'mood': item.get('mood') or '',
        'tense': item.get('tense') or '',
        'ipa': generate_ipa(form),
        'pronunciation': generate_pronunciation_guide(form),
        'tip': generate_pronunciation_tip(form),
        'audio_key': f"{verb}_{item.get('tense')}_{item.get('person')}",
    }
