"""정규화된 문자열 쌍의 편집 거리 비교."""

from ...utils.edit_distance import levenshtein_distance, similarity_percentage
from .assessment_types import TextSimilarity


def analyze_text_similarity(target: str, recognized: str) -> TextSimilarity:
    """
    비교용(정규화된) 문자열 쌍의 유사도 계산.

    exact_match 는 거리와 무관하게 정규화 후 동일 여부이며,
    완전 일치이면 유사도는 항상 100입니다.
    """
    exact_match = target == recognized
    distance = levenshtein_distance(target, recognized)
    similarity = 100 if exact_match else similarity_percentage(target, recognized)

    return TextSimilarity(
        similarity=similarity,
        distance=distance,
        exact_match=exact_match,
        target_length=len(target),
        recognized_length=len(recognized),
    )
