"""
Sequence Scoring Module

Longest-common-subsequence alignment of DNA strands and maximum
non-crossing base pairing of folded RNA strands, each with a naive
reference implementation and a memoized one.
"""

from scoring.dna_aligner import lcs_length, lcs_length_naive
from scoring.exceptions import (
    InvalidAlphabetError,
    InvalidArgumentError,
    RecursionDepthError,
    ScoringError,
    SequenceTooLongError,
)
from scoring.pairing import can_pair
from scoring.rna_folder import max_pairings, max_pairings_naive
from scoring.tables import IntervalScoreTable, PairwiseScoreTable

__all__ = [
    "lcs_length",
    "lcs_length_naive",
    "max_pairings",
    "max_pairings_naive",
    "can_pair",
    "IntervalScoreTable",
    "PairwiseScoreTable",
    "InvalidAlphabetError",
    "InvalidArgumentError",
    "RecursionDepthError",
    "ScoringError",
    "SequenceTooLongError",
]
