"""Priority-key reservoir sampling.

Every item gets an i.i.d. uniform key in ``[0, 1)`` when it arrives, and the
reservoir keeps the ``k`` items with the smallest keys seen so far. An item
survives the pass exactly when its key ranks among the ``k`` smallest of all
``N`` keys, which happens with probability ``k / N`` regardless of ``N`` or of
where the item sits in the stream.

The reservoir is a :mod:`heapq` min-heap of ``(-key, -sequence, item)``
entries, i.e. a max-heap on ``(key, sequence)``. ``sequence`` is the item's
arrival index; it is unique within a call, so ties on ``key`` are broken by
arrival (the later item ranks higher) and the item itself is never compared.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from itertools import islice
from typing import Any

import numpy as np

from randline.sampling.base import StreamSampler, validate_sample_size

logger = logging.getLogger(__name__)


class SamplerState(Enum):
    """Progress of a single :meth:`PriorityReservoirSampler.sample` call."""

    EMPTY = "empty"
    FILLING = "filling"
    PARTIAL_COMPLETE = "partial_complete"
    FULL = "full"
    REPLACING = "replacing"
    SAMPLE_READY = "sample_ready"


class PriorityReservoirSampler(StreamSampler):
    """Uniform single-pass sampler with O(k) memory.

    Attributes:
        key_block_size: Number of priority keys drawn from the generator per
            call to ``rng.random``.
        state: State reached by the most recent :meth:`sample` call.
        items_seen: Number of source items consumed by the most recent call,
            including a call that failed partway through the source.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        key_block_size: int = 256,
    ) -> None:
        """Initialize the sampler.

        Args:
            seed: Random seed, used only when *rng* is not given.
            rng: Generator to draw priority keys from. Each sampler should own
                its generator; sharing one across threads correlates keys.
            key_block_size: Keys drawn per generator call.
        """
        if key_block_size < 1:
            raise ValueError(f"key_block_size must be positive, got {key_block_size}")
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.key_block_size = key_block_size
        self.state = SamplerState.EMPTY
        self.items_seen = 0

    def _keys(self) -> Iterator[float]:
        """Yield an endless stream of uniform ``[0, 1)`` priority keys."""
        while True:
            yield from self._rng.random(self.key_block_size).tolist()

    def sample(self, items: Iterable[Any], k: int) -> list[Any]:
        """Draw a uniform sample of ``min(k, N)`` items from *items*.

        The source is consumed once, in order, to exhaustion. When ``k`` is
        zero nothing is consumed. Exceptions raised by the source propagate
        unchanged and the partial reservoir is dropped.

        Returns:
            The sampled items. If the source holds at most ``k`` items they
            are all returned in arrival order; otherwise the order is
            unspecified.

        Raises:
            InvalidSampleSizeError: If *k* is negative or not an integer.
        """
        k = validate_sample_size(k)
        self.state = SamplerState.EMPTY
        self.items_seen = 0
        if k == 0:
            self.state = SamplerState.SAMPLE_READY
            return []

        source = iter(items)
        keys = self._keys()

        self.state = SamplerState.FILLING
        reservoir: list[tuple[float, int, Any]] = []
        for seq, item in enumerate(islice(source, k)):
            self.items_seen = seq + 1
            reservoir.append((-next(keys), -seq, item))
        if len(reservoir) < k:
            self.state = SamplerState.PARTIAL_COMPLETE
            logger.debug("Source exhausted after %d items during fill (k=%d)", len(reservoir), k)
            return [item for _, _, item in reservoir]

        heapq.heapify(reservoir)
        self.state = SamplerState.FULL
        logger.debug("Reservoir full with %d items", k)

        self.state = SamplerState.REPLACING
        n_replaced = 0
        for seq, item in enumerate(source, start=k):
            self.items_seen = seq + 1
            entry = (-next(keys), -seq, item)
            # The root holds the current maximum (key, sequence).
            if entry[:2] < reservoir[0][:2]:
                continue
            heapq.heapreplace(reservoir, entry)
            n_replaced += 1

        self.state = SamplerState.SAMPLE_READY
        logger.debug(
            "Sampled %d of %d items (%d replacements)", k, self.items_seen, n_replaced
        )
        return [item for _, _, item in reservoir]


def reservoir_sample(
    items: Iterable[Any],
    k: int,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> list[Any]:
    """Sample ``min(k, N)`` items uniformly from a single-pass iterable.

    Thin wrapper around :class:`PriorityReservoirSampler` for one-off calls.

    Args:
        items: Source of items; may be unbounded when ``k`` is zero.
        k: Requested sample size.
        seed: Random seed, used only when *rng* is not given.
        rng: Generator to draw priority keys from.

    Returns:
        List of sampled items in unspecified order.
    """
    return PriorityReservoirSampler(seed=seed, rng=rng).sample(items, k)
