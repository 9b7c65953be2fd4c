"""Maximum number of base pairs in an RNA fold without pseudo-knots.

The score of an inclusive interval [i, j] is the best of: leaving the first
base unpaired, leaving the last base unpaired, pairing the two ends around
the inner interval, or splitting the interval at k into [i, k] and
[k + 1, j] that fold independently. The split is what keeps pairs from
different loops from crossing.
"""

import logging

from omegaconf import DictConfig

from scoring.constants import RNA_ALPHABET

from scoring.limits import check_max_length, depth_guarded
from scoring.pairing import can_pair
from scoring.tables import IntervalScoreTable
from scoring.validation import check_alphabet, check_sequence, resolve_policy

logger = logging.getLogger(__name__)


def _prepare(seq, policy: str | None, cfg: DictConfig) -> str:
    policy = resolve_policy(policy, cfg)
    check_sequence(seq, "seq")
    check_alphabet(seq, RNA_ALPHABET, "seq", policy)
    return seq.upper()


def _fold_naive(seq: str, i: int, j: int) -> int:
    # Empty and single-base intervals cannot pair
    if i >= j:
        return 0

    result = max(_fold_naive(seq, i + 1, j), _fold_naive(seq, i, j - 1))

    if can_pair(seq[i], seq[j]):
        result = max(result, 1 + _fold_naive(seq, i + 1, j - 1))

    for k in range(i, j - 1):
        result = max(result, _fold_naive(seq, i, k) + _fold_naive(seq, k + 1, j))

    return result


def _fold_memo(table: IntervalScoreTable, seq: str, i: int, j: int) -> int:
    if i >= j:
        return 0

    known = table.get(i, j)
    if known is not None:
        return known

    result = max(_fold_memo(table, seq, i + 1, j), _fold_memo(table, seq, i, j - 1))

    if can_pair(seq[i], seq[j]):
        result = max(result, 1 + _fold_memo(table, seq, i + 1, j - 1))

    # Split points with k + 1 < j
    for k in range(i, j - 1):
        result = max(
            result, _fold_memo(table, seq, i, k) + _fold_memo(table, seq, k + 1, j)
        )

    table.put(i, j, result)
    return result


@depth_guarded
def max_pairings_naive(
    seq: str,
    *,
    policy: str | None = None,
    max_length: int | None = None,
    cfg: DictConfig = None,
) -> int:
    """Maximum number of non-crossing Watson-Crick pairs in a folded strand.

    Plain recursion with exponential running time, only practical for
    strands of about 15 bases or fewer.

    Args:
        seq: RNA strand over A, U, C, G (any case).
        policy: "strict" or "permissive" alphabet checking.
                Defaults to ``cfg.alphabet_policy``, then
                ``config.ALPHABET_POLICY``.
        max_length: Refuse strands longer than this.
                    Defaults to ``cfg.naive_max_length``, then
                    ``config.NAIVE_MAX_LENGTH`` (0 = no limit).
        cfg: Settings from :func:`scoring.config.load_config`.

    Returns:
        Pair count, between 0 and len(seq) // 2.

    Raises:
        InvalidArgumentError: If seq is None or not a str.
        InvalidAlphabetError: If seq has a foreign base (strict policy).
        SequenceTooLongError: If seq is longer than max_length.
        RecursionDepthError: If seq is too long for the stack.
    """
    seq = _prepare(seq, policy, cfg)
    check_max_length(max_length, cfg, seq=seq)
    return _fold_naive(seq, 0, len(seq) - 1)


@depth_guarded
def max_pairings(
    seq: str, *, policy: str | None = None, cfg: DictConfig = None
) -> int:
    """Maximum number of non-crossing Watson-Crick pairs in a folded strand.

    Same result as :func:`max_pairings_naive` in O(n^3) time and O(n^2)
    space, memoized in a call-scoped :class:`IntervalScoreTable`.

    Args:
        seq: RNA strand over A, U, C, G (any case).
        policy: "strict" or "permissive" alphabet checking.
                Defaults to ``cfg.alphabet_policy``, then
                ``config.ALPHABET_POLICY``.
        cfg: Settings from :func:`scoring.config.load_config`.

    Returns:
        Pair count, between 0 and len(seq) // 2.

    Raises:
        InvalidArgumentError: If seq is None or not a str.
        InvalidAlphabetError: If seq has a foreign base (strict policy).
        RecursionDepthError: If seq is too long for the stack.
    """
    seq = _prepare(seq, policy, cfg)

    table = IntervalScoreTable(len(seq))
    score = _fold_memo(table, seq, 0, len(seq) - 1)
    logger.debug(
        "Fold of %d bases: %d pairs (%d intervals filled)",
        len(seq),
        score,
        table.filled,
    )
    return score
