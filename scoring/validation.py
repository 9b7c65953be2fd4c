"""Argument and alphabet checks run before any recursion starts."""

import logging

from omegaconf import DictConfig

from scoring import config
from scoring.constants import ALPHABET_POLICIES, STRICT
from scoring.exceptions import InvalidAlphabetError, InvalidArgumentError

logger = logging.getLogger(__name__)


def resolve_policy(policy: str | None, cfg: DictConfig = None) -> str:
    """Return the alphabet policy to apply.

    An explicit policy wins, then ``cfg.alphabet_policy``, then
    ``config.ALPHABET_POLICY``.
    """
    if policy is None and cfg is not None:
        policy = cfg.alphabet_policy
    if policy is None:
        policy = config.ALPHABET_POLICY
    if policy not in ALPHABET_POLICIES:
        raise InvalidArgumentError(
            f"Unknown alphabet policy {policy!r}, expected one of {ALPHABET_POLICIES}"
        )
    return policy


def check_sequence(seq, name: str) -> None:
    """Reject absent or non-string sequences instead of coercing them.

    Args:
        seq: Value passed by the caller as a sequence.
        name: Label used in the error message (e.g. "seq1").

    Raises:
        InvalidArgumentError: If seq is None or not a str.
    """
    if seq is None:
        raise InvalidArgumentError(f"{name} is required, got None")
    if not isinstance(seq, str):
        raise InvalidArgumentError(
            f"{name} must be a str, got {type(seq).__name__}"
        )


def check_alphabet(seq: str, alphabet: frozenset, name: str, policy: str) -> None:
    """Check every character of seq against an upper-case alphabet.

    Membership is case-insensitive. Under the permissive policy nothing is
    raised; foreign characters simply never match during scoring.

    Raises:
        InvalidAlphabetError: On the first foreign character, strict policy only.
    """
    for position, character in enumerate(seq):
        if character.upper() in alphabet:
            continue
        if policy == STRICT:
            raise InvalidAlphabetError(character, position, name)
        logger.debug(
            "Permissive policy: %s has foreign character %r at %d",
            name,
            character,
            position,
        )
        return
