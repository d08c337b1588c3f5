"""Index-replacement reservoir sampler."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any

import numpy as np

from randline.sampling.base import StreamSampler, validate_sample_size

logger = logging.getLogger(__name__)


class IndexReservoirSampler(StreamSampler):
    """Classic fill-then-replace sampler.

    After the first ``k`` items, the item at zero-based position ``i`` draws a
    slot ``j`` uniformly from ``[0, i]`` and overwrites ``reservoir[j]`` when
    ``j < k``. Produces the same selection distribution as
    :class:`~randline.sampling.reservoir.PriorityReservoirSampler` without
    needing a priority structure.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        block_size: int = 256,
    ) -> None:
        """Initialize the sampler.

        Args:
            seed: Random seed, used only when *rng* is not given.
            rng: Generator to draw replacement slots from.
            block_size: Slots drawn per generator call.
        """
        if block_size < 1:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.block_size = block_size

    def _slots(self, start: int) -> Iterator[int]:
        """Yield a uniform slot in ``[0, i]`` for ``i = start, start + 1, ...``."""
        i = start
        while True:
            highs = np.arange(i + 1, i + 1 + self.block_size)
            yield from self._rng.integers(0, highs).tolist()
            i += self.block_size

    def sample(self, items: Iterable[Any], k: int) -> list[Any]:
        """Draw a uniform sample of ``min(k, N)`` items from *items*."""
        k = validate_sample_size(k)
        if k == 0:
            return []

        source = iter(items)
        reservoir = list(islice(source, k))
        if len(reservoir) < k:
            return reservoir

        n_seen = k
        for item, j in zip(source, self._slots(k)):
            n_seen += 1
            if j < k:
                reservoir[j] = item

        logger.debug("Sampled %d of %d items", k, n_seen)
        return reservoir
