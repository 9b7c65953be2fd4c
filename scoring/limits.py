"""Operational limits of the recursive scorers."""

import functools
import logging

from omegaconf import DictConfig

from scoring import config
from scoring.exceptions import (
    InvalidArgumentError,
    RecursionDepthError,
    SequenceTooLongError,
)

logger = logging.getLogger(__name__)


def check_max_length(
    max_length: int | None, cfg: DictConfig = None, **sequences: str
) -> None:
    """Refuse inputs the exponential scorers cannot finish in reasonable time.

    Args:
        max_length: Longest accepted sequence; 0 disables the check.
                    None falls back to ``cfg.naive_max_length``, then to
                    ``config.NAIVE_MAX_LENGTH``.
        cfg: Settings from :func:`scoring.config.load_config`.
        **sequences: Sequences to check, keyed by their argument name.

    Raises:
        InvalidArgumentError: If max_length is negative.
        SequenceTooLongError: If any sequence is longer than max_length.
    """
    if max_length is None and cfg is not None:
        max_length = cfg.naive_max_length
    if max_length is None:
        max_length = config.NAIVE_MAX_LENGTH
    if max_length < 0:
        raise InvalidArgumentError(f"max_length must be >= 0, got {max_length}")
    if max_length == 0:
        return

    for name, seq in sequences.items():
        if len(seq) > max_length:
            raise SequenceTooLongError(
                f"{name} has {len(seq)} bases, naive scoring accepts at most "
                f"{max_length}"
            )


def depth_guarded(func):
    """Re-raise interpreter stack exhaustion as RecursionDepthError.

    Recursion depth grows with sequence length, so very long inputs hit
    the interpreter's recursion limit.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RecursionError as e:
            lengths = [len(a) for a in args if isinstance(a, str)]
            logger.error(
                "%s exhausted the stack on inputs of length %s", func.__name__, lengths
            )
            raise RecursionDepthError(
                f"{func.__name__} ran out of stack for sequence lengths {lengths}"
            ) from e

    return wrapper
