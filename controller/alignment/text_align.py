import unicodedata
from typing import List, Sequence

from schemas.alignment import AlignmentSummary, MatchType, WordMatchResult


def tokenize(text: str) -> List[str]:
    if not text:
        return []
    return [token for token in text.split() if token]


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def _strip_boundary_punctuation(token: str) -> str:
    start, end = 0, len(token)
    while start < end and _is_punctuation(token[start]):
        start += 1
    while end > start and _is_punctuation(token[end - 1]):
        end -= 1
    return token[start:end]


def normalize_token(token: str) -> str:
    # Only boundary punctuation goes; "don't" keeps its apostrophe.
    return _strip_boundary_punctuation(token).lower()


def display_token(token: str) -> str:
    # Original casing for display; a bare dash or ellipsis is shown as written.
    return _strip_boundary_punctuation(token) or token


def edit_distance_table(expected: Sequence[str], actual: Sequence[str]) -> List[List[int]]:
    """Levenshtein table over normalized tokens.

    ``dp[i][j]`` is the minimum number of substitutions, insertions and
    deletions needed to turn the first ``i`` expected tokens into the first
    ``j`` actual tokens.
    """
    rows = len(expected) + 1
    cols = len(actual) + 1
    dp = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        dp[i][0] = i
    for j in range(cols):
        dp[0][j] = j

    expected_keys = [normalize_token(t) for t in expected]
    actual_keys = [normalize_token(t) for t in actual]
    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if expected_keys[i - 1] == actual_keys[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )
    return dp


def align_words(expected: Sequence[str], actual: Sequence[str]) -> List[WordMatchResult]:
    """Align spoken tokens against script tokens.

    The backtrace walks from the bottom-right corner and, at every cell,
    tries in fixed order: match, substitution, missing (deletion), extra
    (insertion). Several alignments can share the minimum cost; this order
    picks one of them and must not change, otherwise identical inputs would
    render different diffs.
    """
    n, m = len(expected), len(actual)
    if n == 0 and m == 0:
        return []
    if n == 0:
        return [WordMatchResult.extra(display_token(word)) for word in actual]
    if m == 0:
        return [WordMatchResult.missing(display_token(word)) for word in expected]

    dp = edit_distance_table(expected, actual)

    i, j = n, m
    results: List[WordMatchResult] = []
    while i > 0 or j > 0:
        if i > 0 and j > 0 and normalize_token(expected[i - 1]) == normalize_token(actual[j - 1]):
            results.append(WordMatchResult.correct(display_token(expected[i - 1])))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            results.append(WordMatchResult.substitution(display_token(expected[i - 1]), display_token(actual[j - 1])))
            i -= 1
            j -= 1
        elif i > 0 and (j == 0 or dp[i][j] == dp[i - 1][j] + 1):
            results.append(WordMatchResult.missing(display_token(expected[i - 1])))
            i -= 1
        else:
            results.append(WordMatchResult.extra(display_token(actual[j - 1])))
            j -= 1

    results.reverse()
    return results


def match_words(expected_text: str, actual_text: str) -> List[WordMatchResult]:
    return align_words(tokenize(expected_text), tokenize(actual_text))


def alignment_cost(results: Sequence[WordMatchResult]) -> int:
    return sum(1 for r in results if r.type != MatchType.correct)


def summarize_alignment(results: Sequence[WordMatchResult]) -> AlignmentSummary:
    counts = {match_type: 0 for match_type in MatchType}
    for result in results:
        counts[result.type] += 1
    correct = counts[MatchType.correct]
    return AlignmentSummary(
        correct=correct,
        substitutions=counts[MatchType.substitution],
        missing=counts[MatchType.missing],
        extra=counts[MatchType.extra],
        edit_distance=alignment_cost(results),
        accuracy=correct / len(results) if results else 0.0,
    )
