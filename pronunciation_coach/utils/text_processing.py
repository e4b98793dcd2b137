"""스페인어 텍스트 정규화 유틸리티."""

import re
import logging
import unicodedata
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

# 비교용으로 제거하는 구두점 (스페인어 역물음표/역느낌표 포함)
STRIP_PUNCTUATION_PATTERN = re.compile(r"[¿¡.,;:!?]")
WHITESPACE_PATTERN = re.compile(r"\s+")

# NFD 분해 후 제거할 결합 부호. n 뒤의 물결표(ñ)는 별개의 자음이므로 유지
COMBINING_MARK_PATTERN = re.compile(r"(?<![nN])\u0303|[\u0300-\u0302\u0304-\u036f]")

VOWELS = frozenset('aeiou')
ACCENTED_VOWELS = frozenset('áéíóú')
VOWEL_PATTERN = re.compile(r"[aeiou]")
NON_CONSONANT_PATTERN = re.compile(r"[aeiou\s]")


def safe_lower(text: Optional[str]) -> str:
    """안전한 소문자 변환."""
    if text is None:
        return ""
    return str(text).lower()


def safe_strip(text: Optional[str]) -> str:
    """안전한 공백 제거."""
    if text is None:
        return ""
    return str(text).strip()


def remove_accents(text: str) -> str:
    """강세 부호(á, é, í, ó, ú, ü)를 기본 모음으로 변환. 분해형 입력도 처리."""
    if not text:
        return ""
    decomposed = unicodedata.normalize('NFD', text)
    return unicodedata.normalize('NFC', COMBINING_MARK_PATTERN.sub("", decomposed))


def extract_vowels(text: str) -> List[str]:
    """접힌 문자열에서 모음 시퀀스를 순서대로 추출."""
    return VOWEL_PATTERN.findall(text or "")


def strip_vowels(text: str) -> str:
    """모음과 공백을 제거한 자음 골격 반환."""
    return NON_CONSONANT_PATTERN.sub("", text or "")


def count_accents(text: str) -> int:
    """표기된 강세 부호 개수."""
    return sum(1 for char in text or "" if char in ACCENTED_VOWELS)


@dataclass(frozen=True)
class NormalizedPair:
    """
    한 번의 평가 동안만 사용되는 정규화된 문자열 쌍.

    Attributes:
        target: 비교용 목표 문자열 (소문자, 구두점 제거, 강세 접힘)
        recognized: 비교용 인식 문자열
        target_original: 강세를 보존한 목표 문자열
        recognized_original: 강세를 보존한 인식 문자열
    """
    target: str
    recognized: str
    target_original: str
    recognized_original: str

    @property
    def is_exact_match(self) -> bool:
        """정규화 후 완전 일치 여부."""
        return self.target == self.recognized


class TextNormalizer:
    """비교 전 원문 문자열을 정규화하는 클래스."""

    def clean(self, text: Optional[str]) -> str:
        """
        소문자 변환, 구두점 제거, 공백 정리 (강세는 보존).

        Args:
            text: 원문 문자열 (None 허용)

        Returns:
            정리된 문자열
        """
        if not text:
            return ""

        text = unicodedata.normalize('NFC', safe_lower(text))
        text = STRIP_PUNCTUATION_PATTERN.sub("", text)
        text = WHITESPACE_PATTERN.sub(" ", text)

        return text.strip()

    def fold_accents(self, text: str) -> str:
        """강세 부호를 접어 비교용 문자열을 만든다."""
        return remove_accents(text)

    def normalize(self, text: Optional[str]) -> str:
        """비교용 정규화 (clean + 강세 접기)."""
        return self.fold_accents(self.clean(text))

    def normalize_pair(self, target: Optional[str], recognized: Optional[str]) -> NormalizedPair:
        """목표/인식 문자열 쌍을 정규화."""
        target_original = self.clean(target)
        recognized_original = self.clean(recognized)

        pair = NormalizedPair(
            target=self.fold_accents(target_original),
            recognized=self.fold_accents(recognized_original),
            target_original=target_original,
            recognized_original=recognized_original,
        )
        logger.debug(f"정규화 완료: '{pair.target}' / '{pair.recognized}'")
        return pair


def create_text_normalizer() -> TextNormalizer:
    """TextNormalizer 인스턴스 생성."""
    return TextNormalizer()
