"""Base-pair check for RNA folding."""

from scoring.constants import COMPLEMENTARY_BASES


def can_pair(b1: str, b2: str) -> bool:
    """Return True if b1 and b2 form a Watson-Crick pair (A-U or G-C).

    G-U wobble pairs are not accepted. Bases are expected in upper case.
    """
    return COMPLEMENTARY_BASES.get(b1) == b2
