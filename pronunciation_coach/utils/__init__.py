"""유틸리티 모듈."""

from .text_processing import (
    TextNormalizer,
    NormalizedPair,
    create_text_normalizer,
    safe_lower,
    safe_strip,
    remove_accents,
    extract_vowels,
    strip_vowels,
    count_accents,
)
from .edit_distance import levenshtein_distance, similarity_percentage, align_sequences
from .pronunciation_guide import (
    generate_pronunciation_guide,
    generate_ipa,
    generate_pronunciation_tip,
    build_pronunciation_item,
)
from .logging_config import configure_logging, create_silent_logger

__all__ = [
    # 텍스트 처리
    'TextNormalizer',
    'NormalizedPair',
    'create_text_normalizer',
    'safe_lower',
    'safe_strip',
    'remove_accents',
    'extract_vowels',
    'strip_vowels',
    'count_accents',
    # 편집 거리
    'levenshtein_distance',
    'similarity_percentage',
    'align_sequences',
    # 발음 안내
    'generate_pronunciation_guide',
    'generate_ipa',
    'generate_pronunciation_tip',
    'build_pronunciation_item',
    # 로깅
    'configure_logging',
    'create_silent_logger',
]
