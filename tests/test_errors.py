import sys

import pytest

from scoring import (
    InvalidAlphabetError,
    InvalidArgumentError,
    RecursionDepthError,
    ScoringError,
    SequenceTooLongError,
    config,
    lcs_length,
    lcs_length_naive,
    max_pairings,
    max_pairings_naive,
)


@pytest.fixture
def low_recursion_limit():
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(600)
    yield
    sys.setrecursionlimit(limit)


def test_error_hierarchy():
    assert issubclass(InvalidArgumentError, ScoringError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(InvalidAlphabetError, InvalidArgumentError)
    assert issubclass(SequenceTooLongError, InvalidArgumentError)
    assert issubclass(RecursionDepthError, ScoringError)


def test_alphabet_error_message():
    error = InvalidAlphabetError("X", 4, "seq1")

    assert "'X'" in str(error)
    assert "position 4" in str(error)
    assert "seq1" in str(error)


@pytest.mark.parametrize("bad", [None, 42, b"ATCG", ["A", "T"]])
def test_dna_rejects_non_string(bad):
    with pytest.raises(InvalidArgumentError):
        lcs_length(bad, "ATCG")
    with pytest.raises(InvalidArgumentError):
        lcs_length_naive("ATCG", bad)


@pytest.mark.parametrize("bad", [None, 42, b"AUCG"])
def test_rna_rejects_non_string(bad):
    with pytest.raises(InvalidArgumentError):
        max_pairings(bad)
    with pytest.raises(InvalidArgumentError):
        max_pairings_naive(bad)


def test_unknown_policy():
    with pytest.raises(InvalidArgumentError):
        lcs_length("A", "A", policy="lenient")
    with pytest.raises(InvalidArgumentError):
        max_pairings("AU", policy="")


def test_default_policy_comes_from_config(monkeypatch):
    with pytest.raises(InvalidAlphabetError):
        max_pairings("AXU")

    monkeypatch.setattr(config, "ALPHABET_POLICY", "permissive")
    assert max_pairings("AXU") == 1


def test_naive_length_guard():
    with pytest.raises(SequenceTooLongError):
        lcs_length_naive("ATCGATCG", "ATC", max_length=5)
    with pytest.raises(SequenceTooLongError):
        max_pairings_naive("ACCCCGU", max_length=6)

    assert max_pairings_naive("ACCCCGU", max_length=7) == 2


def test_naive_length_guard_from_config(monkeypatch):
    monkeypatch.setattr(config, "NAIVE_MAX_LENGTH", 4)

    with pytest.raises(SequenceTooLongError):
        max_pairings_naive("ACCCCGU")
    assert max_pairings_naive("ACCCCGU", max_length=0) == 2


def test_negative_length_guard():
    with pytest.raises(InvalidArgumentError):
        lcs_length_naive("A", "A", max_length=-1)


def test_memoized_scorers_have_no_length_guard(monkeypatch):
    monkeypatch.setattr(config, "NAIVE_MAX_LENGTH", 2)

    assert lcs_length("ATCTGAT", "TGCATA") == 4
    assert max_pairings("ACCCCGU") == 2


def test_dna_stack_exhaustion(low_recursion_limit):
    with pytest.raises(RecursionDepthError) as exc_info:
        lcs_length("A" * 1500, "A")

    assert isinstance(exc_info.value.__cause__, RecursionError)


def test_rna_stack_exhaustion(low_recursion_limit):
    with pytest.raises(RecursionDepthError):
        max_pairings("AC" * 750)


@pytest.mark.parametrize(
    "scorer", [lcs_length, lcs_length_naive, max_pairings, max_pairings_naive]
)
def test_scorers_document_their_errors(scorer):
    assert "Raises:" in scorer.__doc__
    assert "InvalidAlphabetError" in scorer.__doc__
    assert "RecursionDepthError" in scorer.__doc__


@pytest.mark.parametrize("scorer", [lcs_length_naive, max_pairings_naive])
def test_naive_scorers_document_length_guard(scorer):
    assert "SequenceTooLongError" in scorer.__doc__
