"""
Fuzzy subsequence matching with match positions.

The query must appear in the text as an ordered, not necessarily
contiguous, subsequence. Among all such alignments the best scoring one
is chosen:

- every matched character scores ``SCORE_MATCH``
- characters at a word boundary, a camelCase hump or a digit run get a bonus,
  doubled for the first query character
- consecutive characters get at least ``BONUS_CONSECUTIVE``
- a gap costs ``SCORE_GAP_START`` plus ``SCORE_GAP_EXTENSION`` per extra character
"""
from typing import List, Optional, Sequence, Tuple


SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

CHAR_NON_WORD, CHAR_LOWER, CHAR_UPPER, CHAR_NUMBER = range(4)

_UNREACHABLE = -(1 << 30)


def char_class(char: str) -> int:
    if char.isupper():
        return CHAR_UPPER
    if char.isdigit():
        return CHAR_NUMBER
    if char.isalpha():
        return CHAR_LOWER
    return CHAR_NON_WORD


def position_bonus(previous: int, current: int) -> int:
    """Bonus for matching a character of class ``current`` after ``previous``"""
    if previous == CHAR_NON_WORD and current != CHAR_NON_WORD:
        return BONUS_BOUNDARY
    if previous == CHAR_LOWER and current == CHAR_UPPER:
        return BONUS_CAMEL
    if previous != CHAR_NUMBER and current == CHAR_NUMBER:
        return BONUS_CAMEL
    if current == CHAR_NON_WORD:
        return BONUS_NON_WORD
    return 0


def _fold(char: str) -> str:
    # keep one character per position so indices stay valid
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


class FuzzyMatcher:
    """
    Scores a pattern against a choice and reports the matched positions
    """

    def __init__(self, case_sensitive: bool = False):
        self.case_sensitive = case_sensitive

    def fuzzy_match(self, choice: str, pattern: str) -> Optional[int]:
        """Score of the best alignment, or None when ``pattern`` does not match"""
        result = self.fuzzy_indices(choice, pattern)
        return None if result is None else result[0]

    def fuzzy_indices(self, choice: str, pattern: str) -> Optional[Tuple[int, List[int]]]:
        """
        Find the best alignment of ``pattern`` in ``choice``

        Args:
            choice: Text to search in
            pattern: Query typed by the user

        Returns:
            (score, ascending indices into ``choice``), or None if
            ``pattern`` is not a subsequence of ``choice``. An empty
            pattern matches with score 0 and no indices.
        """
        if not pattern:
            return 0, []

        text = self._normalize(choice)
        query = self._normalize(pattern)
        if not self._is_subsequence(text, query):
            return None

        return self._align(choice, text, query)

    def _normalize(self, value: str) -> List[str]:
        if self.case_sensitive:
            return list(value)
        return [_fold(char) for char in value]

    @staticmethod
    def _is_subsequence(text: Sequence[str], query: Sequence[str]) -> bool:
        position = 0
        for char in text:
            if char == query[position]:
                position += 1
                if position == len(query):
                    return True
        return False

    @staticmethod
    def _bonuses(choice: str) -> List[int]:
        bonuses = []
        previous = CHAR_NON_WORD
        for char in choice:
            current = char_class(char)
            bonuses.append(position_bonus(previous, current))
            previous = current
        return bonuses

    def _align(self, choice: str, text: List[str], query: List[str]) -> Tuple[int, List[int]]:
        n, m = len(text), len(query)
        bonuses = self._bonuses(choice)

        # score[i][j]: best score with query[i] matched at text[j]
        score = [[_UNREACHABLE] * n for _ in range(m)]
        came_from = [[-1] * n for _ in range(m)]

        for j in range(n):
            if text[j] == query[0]:
                score[0][j] = SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER

        for i in range(1, m):
            previous_row = score[i - 1]
            # best way to reach j through a gap of at least one character
            gap_score, gap_from = _UNREACHABLE, -1
            for j in range(1, n):
                if j >= 2:
                    extended = gap_score + SCORE_GAP_EXTENSION if gap_score > _UNREACHABLE else _UNREACHABLE
                    started = previous_row[j - 2] + SCORE_GAP_START if previous_row[j - 2] > _UNREACHABLE else _UNREACHABLE
                    if started >= extended:
                        gap_score, gap_from = started, j - 2
                    else:
                        gap_score = extended

                if text[j] != query[i]:
                    continue

                best, best_from = _UNREACHABLE, -1
                if previous_row[j - 1] > _UNREACHABLE:
                    best = previous_row[j - 1] + SCORE_MATCH + max(bonuses[j], BONUS_CONSECUTIVE)
                    best_from = j - 1
                if gap_score > _UNREACHABLE:
                    gapped = gap_score + SCORE_MATCH + bonuses[j]
                    if gapped > best:
                        best, best_from = gapped, gap_from

                score[i][j] = best
                came_from[i][j] = best_from

        last_row = score[m - 1]
        end = max(range(n), key=lambda j: (last_row[j], -j))

        indices = [0] * m
        j = end
        for i in range(m - 1, -1, -1):
            indices[i] = j
            j = came_from[i][j]

        return last_row[end], indices
