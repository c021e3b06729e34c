"""Levenshtein edit distance over token and character sequences."""

from collections.abc import Hashable, Sequence

import numpy as np

from .logging_utils import get_logger
from .models import EditCounts

logger = get_logger(__name__)


def _encode(
    reference: Sequence[Hashable], hypothesis: Sequence[Hashable]
) -> tuple[np.ndarray, np.ndarray]:
    """Map both sequences onto a shared integer vocabulary."""
    vocabulary: dict[Hashable, int] = {}
    ref_codes = np.array(
        [vocabulary.setdefault(item, len(vocabulary)) for item in reference],
        dtype=np.int64,
    )
    hyp_codes = np.array(
        [vocabulary.setdefault(item, len(vocabulary)) for item in hypothesis],
        dtype=np.int64,
    )
    return ref_codes, hyp_codes


def distance_table(
    reference: Sequence[Hashable], hypothesis: Sequence[Hashable]
) -> np.ndarray:
    """
    Build the full (m+1) x (n+1) Levenshtein table.

    Cell [i, j] holds the minimum number of unit-cost insertions, deletions and
    substitutions turning reference[:i] into hypothesis[:j]. Rows are filled
    whole: deletion and substitution candidates come from the previous row,
    and the insertion chain dp[i][j-1] + 1 is resolved with a running minimum
    of (row[k] - k), shifted back by j.

    Args:
        reference: Reference sequence (tokens or characters)
        hypothesis: Hypothesis sequence (tokens or characters)

    Returns:
        Integer numpy array of shape (len(reference) + 1, len(hypothesis) + 1)
    """
    m, n = len(reference), len(hypothesis)
    table = np.zeros((m + 1, n + 1), dtype=np.int64)
    table[0, :] = np.arange(n + 1)
    table[:, 0] = np.arange(m + 1)
    if m == 0 or n == 0:
        return table

    ref_codes, hyp_codes = _encode(reference, hypothesis)
    columns = np.arange(n + 1)

    for i in range(1, m + 1):
        previous = table[i - 1]
        substitution_cost = (hyp_codes != ref_codes[i - 1]).astype(np.int64)

        row = np.empty(n + 1, dtype=np.int64)
        row[0] = i
        row[1:] = np.minimum(previous[1:] + 1, previous[:-1] + substitution_cost)

        table[i] = np.minimum.accumulate(row - columns) + columns

    return table


def edit_distance(reference: Sequence[Hashable], hypothesis: Sequence[Hashable]) -> int:
    """
    Compute the Levenshtein distance between two sequences.

    Works on token lists and on strings alike; a Python string is a sequence of
    code points, so multi-byte characters count as one element.

    Args:
        reference: Reference sequence
        hypothesis: Hypothesis sequence

    Returns:
        Minimum number of insertions, deletions and substitutions
    """
    table = distance_table(reference, hypothesis)
    distance = int(table[-1, -1])
    logger.trace(  # type: ignore[attr-defined]
        f"Edit distance {distance} over {table.shape[0]}x{table.shape[1]} table"
    )
    return distance


def edit_operations(
    reference: Sequence[Hashable], hypothesis: Sequence[Hashable]
) -> EditCounts:
    """
    Split the edit distance into substitutions, deletions and insertions.

    Backtracks one optimal path through the table, preferring a diagonal step
    (match or substitution), then a deletion, then an insertion.

    Args:
        reference: Reference sequence
        hypothesis: Hypothesis sequence

    Returns:
        EditCounts whose total equals edit_distance(reference, hypothesis)
    """
    table = distance_table(reference, hypothesis)
    substitutions = deletions = insertions = 0
    i, j = len(reference), len(hypothesis)

    while i > 0 or j > 0:
        if i > 0 and j > 0:
            mismatch = int(reference[i - 1] != hypothesis[j - 1])
            if table[i, j] == table[i - 1, j - 1] + mismatch:
                substitutions += mismatch
                i -= 1
                j -= 1
                continue
        if i > 0 and table[i, j] == table[i - 1, j] + 1:
            deletions += 1
            i -= 1
        else:
            insertions += 1
            j -= 1

    return EditCounts(
        substitutions=substitutions, deletions=deletions, insertions=insertions
    )
