"""Sampling configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from omegaconf import OmegaConf

from randline.errors import InvalidConfigError


@dataclass
class SampleConfig:
    """Settings for one sampling run.

    Attributes:
        k: Number of items to sample.
        seed: Random seed; ``None`` draws fresh OS entropy.
        key_block_size: Priority keys drawn per generator call.
    """

    k: int = 1
    seed: Optional[int] = None
    key_block_size: int = 256


def load_config(path: str | Path | None = None, **overrides: Any) -> SampleConfig:
    """Build a :class:`SampleConfig` from defaults, a YAML file, and overrides.

    Later sources win: dataclass defaults, then the YAML file at *path*, then
    any keyword override that is not ``None``.

    Raises:
        FileNotFoundError: If *path* does not exist.
        omegaconf.errors.ValidationError: If a value has the wrong type.
        omegaconf.errors.ConfigKeyError: If the file or overrides name an
            unknown key.
        InvalidConfigError: If ``seed`` is negative or ``key_block_size`` is
            not positive.
    """
    cfg = OmegaConf.structured(SampleConfig)
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Missing config: {path}")
        cfg = OmegaConf.merge(cfg, OmegaConf.load(path))
    set_overrides = {key: value for key, value in overrides.items() if value is not None}
    if set_overrides:
        cfg = OmegaConf.merge(cfg, set_overrides)
    config: SampleConfig = OmegaConf.to_object(cfg)
    if config.seed is not None and config.seed < 0:
        raise InvalidConfigError(f"seed must be non-negative, got {config.seed}")
    if config.key_block_size < 1:
        raise InvalidConfigError(
            f"key_block_size must be positive, got {config.key_block_size}"
        )
    return config
