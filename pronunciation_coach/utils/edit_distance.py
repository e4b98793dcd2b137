"""편집 거리(Levenshtein) 계산 및 시퀀스 정렬."""

from typing import List, Optional, Sequence, Tuple

import Levenshtein
import numpy as np


def levenshtein_distance(source: Sequence, target: Sequence) -> int:
    """
    Levenshtein 거리 계산.

    삽입, 삭제, 치환 비용은 모두 1입니다.

    Args:
        source: 첫 번째 문자열 또는 토큰 시퀀스
        target: 두 번째 문자열 또는 토큰 시퀀스

    Returns:
        편집 거리
    """
    return Levenshtein.distance(source, target)


def similarity_percentage(source: Sequence, target: Sequence) -> int:
    """편집 거리 기반 유사도 (0-100). 둘 다 비어 있으면 100."""
    max_length = max(len(source), len(target))
    if max_length == 0:
        return 100

    distance = levenshtein_distance(source, target)
    return int(round((max_length - distance) / max_length * 100))


def align_sequences(
    ref: Sequence[str], hyp: Sequence[str]
) -> List[Tuple[str, Optional[int], Optional[int]]]:
    """
    편집 거리 정렬 경로를 반환.

    Returns:
        (op, ref_index, hyp_index) 튜플 리스트.
        op는 "match", "sub", "del", "ins" 중 하나입니다.
    """
    n, m = len(ref), len(hyp)
    dp = np.zeros((n + 1, m + 1), dtype=np.int32)
    back: List[List[Tuple[str, Optional[int], Optional[int]]]] = [
        [("start", None, None)] * (m + 1) for _ in range(n + 1)
    ]

    for i in range(1, n + 1):
        dp[i, 0] = i
        back[i][0] = ("del", i - 1, None)
    for j in range(1, m + 1):
        dp[0, j] = j
        back[0][j] = ("ins", None, j - 1)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if ref[i - 1] == hyp[j - 1] else 1
            # 동점이면 치환/일치를 우선
            candidates = [
                (dp[i - 1, j - 1] + cost_sub, ("match" if cost_sub == 0 else "sub", i - 1, j - 1)),
                (dp[i - 1, j] + 1, ("del", i - 1, None)),
                (dp[i, j - 1] + 1, ("ins", None, j - 1)),
            ]
            best_cost, best_step = min(candidates, key=lambda x: x[0])
            dp[i, j] = best_cost
            back[i][j] = best_step

    ops: List[Tuple[str, Optional[int], Optional[int]]] = []
    i, j = n, m
    while not (i == 0 and j == 0):
        op, ri, hj = back[i][j]
        ops.append((op, ri, hj))
        if op in ("match", "sub"):
            i -= 1
            j -= 1
        elif op == "del":
            i -= 1
        elif op == "ins":
            j -= 1
        else:
            break
    ops.reverse()
    return ops
