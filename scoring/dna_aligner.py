"""Global alignment score of two DNA strands as the length of their
longest common subsequence (LCS).

Subproblems are addressed by the inclusive end indices (i, j) of a prefix
of each strand; no substrings are ever built. Strands are compared
case-sensitively.
"""

import logging

from omegaconf import DictConfig

from scoring.constants import DNA_ALPHABET

from scoring.limits import check_max_length, depth_guarded
from scoring.tables import PairwiseScoreTable
from scoring.validation import check_alphabet, check_sequence, resolve_policy

logger = logging.getLogger(__name__)

# Bases that may match; foreign characters let through by the permissive
# policy never extend a common subsequence
_MATCHABLE = DNA_ALPHABET | {base.lower() for base in DNA_ALPHABET}


def _prepare(seq1, seq2, policy: str | None, cfg: DictConfig) -> None:
    policy = resolve_policy(policy, cfg)
    check_sequence(seq1, "seq1")
    check_sequence(seq2, "seq2")
    check_alphabet(seq1, DNA_ALPHABET, "seq1", policy)
    check_alphabet(seq2, DNA_ALPHABET, "seq2", policy)


def _lcs_naive(seq1: str, seq2: str, i: int, j: int) -> int:
    if i < 0 or j < 0:
        return 0

    # Drop the last base of either prefix
    result = max(_lcs_naive(seq1, seq2, i - 1, j), _lcs_naive(seq1, seq2, i, j - 1))

    # Matching last bases extend the common subsequence
    if seq1[i] == seq2[j] and seq1[i] in _MATCHABLE:
        result = max(result, 1 + _lcs_naive(seq1, seq2, i - 1, j - 1))

    return result


def _lcs_memo(table: PairwiseScoreTable, seq1: str, seq2: str, i: int, j: int) -> int:
    if i < 0 or j < 0:
        return 0

    known = table.get(i, j)
    if known is not None:
        return known

    result = max(
        _lcs_memo(table, seq1, seq2, i - 1, j),
        _lcs_memo(table, seq1, seq2, i, j - 1),
    )
    if seq1[i] == seq2[j] and seq1[i] in _MATCHABLE:
        result = max(result, 1 + _lcs_memo(table, seq1, seq2, i - 1, j - 1))

    table.put(i, j, result)
    return result


@depth_guarded
def lcs_length_naive(
    seq1: str,
    seq2: str,
    *,
    policy: str | None = None,
    max_length: int | None = None,
    cfg: DictConfig = None,
) -> int:
    """Length of the longest common subsequence of two DNA strands.

    Plain recursion with exponential running time; kept as the reference
    the memoized version is checked against.

    Args:
        seq1: DNA strand over A, T, C, G.
        seq2: Another DNA strand over A, T, C, G.
        policy: "strict" or "permissive" alphabet checking.
                Defaults to ``cfg.alphabet_policy``, then
                ``config.ALPHABET_POLICY``.
        max_length: Refuse strands longer than this.
                    Defaults to ``cfg.naive_max_length``, then
                    ``config.NAIVE_MAX_LENGTH`` (0 = no limit).
        cfg: Settings from :func:`scoring.config.load_config`.

    Returns:
        LCS length, >= 0.

    Raises:
        InvalidArgumentError: If a strand is None or not a str.
        InvalidAlphabetError: If a strand has a foreign base (strict policy).
        SequenceTooLongError: If a strand is longer than max_length.
        RecursionDepthError: If the strands are too long for the stack.
    """
    _prepare(seq1, seq2, policy, cfg)
    check_max_length(max_length, cfg, seq1=seq1, seq2=seq2)
    return _lcs_naive(seq1, seq2, len(seq1) - 1, len(seq2) - 1)


@depth_guarded
def lcs_length(
    seq1: str,
    seq2: str,
    *,
    policy: str | None = None,
    cfg: DictConfig = None,
) -> int:
    """Length of the longest common subsequence of two DNA strands.

    Same result as :func:`lcs_length_naive`, in O(n*m) time and space
    through a call-scoped :class:`PairwiseScoreTable`.

    Args:
        seq1: DNA strand over A, T, C, G.
        seq2: Another DNA strand over A, T, C, G.
        policy: "strict" or "permissive" alphabet checking.
                Defaults to ``cfg.alphabet_policy``, then
                ``config.ALPHABET_POLICY``.
        cfg: Settings from :func:`scoring.config.load_config`.

    Returns:
        LCS length, >= 0.

    Raises:
        InvalidArgumentError: If a strand is None or not a str.
        InvalidAlphabetError: If a strand has a foreign base (strict policy).
        RecursionDepthError: If the strands are too long for the stack.
    """
    _prepare(seq1, seq2, policy, cfg)

    table = PairwiseScoreTable(len(seq1), len(seq2))
    score = _lcs_memo(table, seq1, seq2, len(seq1) - 1, len(seq2) - 1)
    logger.debug(
        "LCS of %d x %d bases: %d (%d table cells filled)",
        len(seq1),
        len(seq2),
        score,
        table.filled,
    )
    return score
