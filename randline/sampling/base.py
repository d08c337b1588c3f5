"""Stream sampling interfaces."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from randline.errors import InvalidSampleSizeError


def validate_sample_size(k: Any) -> int:
    """Return *k* as an ``int`` if it is a usable sample size, else raise.

    Any integer type is accepted, including numpy integers; ``bool`` is not.

    Raises:
        InvalidSampleSizeError: If *k* is not an integer or is negative.
    """
    if isinstance(k, bool):
        raise InvalidSampleSizeError(f"Sample size must be an integer, got {k!r}")
    try:
        k = operator.index(k)
    except TypeError:
        raise InvalidSampleSizeError(f"Sample size must be an integer, got {k!r}") from None
    if k < 0:
        raise InvalidSampleSizeError(f"Sample size must be non-negative, got {k}")
    return k


class StreamSampler(ABC):
    """Base interface for single-pass uniform samplers."""

    @abstractmethod
    def sample(self, items: Iterable[Any], k: int) -> list[Any]:
        """Return ``min(k, len(items))`` items drawn uniformly from *items*."""
