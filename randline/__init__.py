"""randline — uniform single-pass sampling of unbounded streams.

Public API
----------
The usable surface is importable directly from ``randline``::

    from randline import reservoir_sample, PriorityReservoirSampler
    from randline import SampleConfig, load_config, read_lines
"""

from __future__ import annotations

# Configuration
from randline.config import SampleConfig, load_config

# Errors
from randline.errors import InvalidSampleSizeError, RandlineError, SourceReadError

# Samplers — primary class and functional API
from randline.sampling import (
    IndexReservoirSampler,
    PriorityReservoirSampler,
    SamplerState,
    StreamSampler,
    reservoir_sample,
)

# Sources
from randline.sources import read_lines

__version__ = "0.1.0"

__all__ = [
    # Samplers
    "StreamSampler",
    "PriorityReservoirSampler",
    "IndexReservoirSampler",
    "SamplerState",
    "reservoir_sample",
    # Configuration
    "SampleConfig",
    "load_config",
    # Sources
    "read_lines",
    # Errors
    "RandlineError",
    "InvalidSampleSizeError",
    "SourceReadError",
    "__version__",
]
