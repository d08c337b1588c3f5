"""Exception types raised by randline."""

from __future__ import annotations


class RandlineError(Exception):
    """Base class for all randline errors."""


class InvalidSampleSizeError(RandlineError, ValueError):
    """Raised when the requested sample size is negative or not an integer.

    A sample size of zero is valid and produces an empty sample.
    """


class SourceReadError(RandlineError):
    """Raised when an item source fails to produce its next item.

    Samplers never recover from this: skipping the bad item or truncating
    the stream would bias the sample, so the whole pass is abandoned.
    """


class InvalidConfigError(RandlineError, ValueError):
    """Raised when a sampling config holds an out-of-range value."""
