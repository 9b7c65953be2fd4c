"""
Custom exceptions for sequence scoring.
Every failure is a permanent input rejection or an operational limit;
nothing raised here is worth retrying.
"""


class ScoringError(Exception):
    """Base exception for sequence scoring errors."""
    pass


class InvalidArgumentError(ScoringError, ValueError):
    """A sequence or option violates the caller contract."""
    pass


class InvalidAlphabetError(InvalidArgumentError):
    """A sequence holds a character outside its nucleotide alphabet."""

    def __init__(self, character: str, position: int, sequence_name: str):
        self.character = character
        self.position = position
        self.sequence_name = sequence_name
        super().__init__(
            f"Invalid character {character!r} at position {position} "
            f"of {sequence_name}"
        )


class SequenceTooLongError(InvalidArgumentError):
    """A sequence exceeds the length accepted by a naive scorer."""
    pass


class RecursionDepthError(ScoringError):
    """The interpreter stack ran out while scoring a long sequence."""
    pass


__all__ = [
    'ScoringError',
    'InvalidArgumentError',
    'InvalidAlphabetError',
    'SequenceTooLongError',
    'RecursionDepthError',
]
