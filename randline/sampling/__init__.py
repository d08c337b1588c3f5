"""Single-pass stream samplers."""

from randline.sampling.base import StreamSampler, validate_sample_size
from randline.sampling.index_reservoir import IndexReservoirSampler
from randline.sampling.reservoir import PriorityReservoirSampler, SamplerState, reservoir_sample

__all__ = [
    "StreamSampler",
    "PriorityReservoirSampler",
    "IndexReservoirSampler",
    "SamplerState",
    "reservoir_sample",
    "validate_sample_size",
]
