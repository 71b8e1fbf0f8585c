"""Toolkit configuration.

Holds the settings the command line needs between runs: how many Fermat
rounds to use, an optional seed for reproducible witnesses, and the log
level. Stored as JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from prime_toolkit.core.primality import DEFAULT_ROUNDS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ToolkitConfig:
    """Settings for probabilistic testing and logging."""
    fermat_rounds: int = DEFAULT_ROUNDS
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.fermat_rounds < 1:
            raise ValueError(f"fermat_rounds must be >= 1, got {self.fermat_rounds}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    def make_rng(self) -> np.random.Generator:
        """Random generator for Fermat witnesses, seeded if a seed is set."""
        return np.random.default_rng(self.seed)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ToolkitConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def load(cls, path: Path) -> 'ToolkitConfig':
        """Load a config from a JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))

    def save(self, path: Path) -> None:
        """Write the config as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
