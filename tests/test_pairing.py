import itertools

import pytest

from scoring import can_pair

PAIRS = {("A", "U"), ("U", "A"), ("G", "C"), ("C", "G")}


@pytest.mark.parametrize("b1, b2", sorted(PAIRS))
def test_watson_crick_pairs(b1, b2):
    assert can_pair(b1, b2)


@pytest.mark.parametrize(
    "b1, b2",
    [p for p in itertools.product("AUCG", repeat=2) if p not in PAIRS],
)
def test_other_combinations_do_not_pair(b1, b2):
    assert not can_pair(b1, b2)


def test_wobble_pair_is_excluded():
    assert not can_pair("G", "U")
    assert not can_pair("U", "G")


def test_thymine_and_unknown_bases_do_not_pair():
    assert not can_pair("A", "T")
    assert not can_pair("N", "N")
