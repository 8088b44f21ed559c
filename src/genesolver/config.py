"""Search configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

ORDERED_ENV = "GENESOLVER_ORDERED"
WORKERS_ENV = "GENESOLVER_WORKERS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class SearchConfig:
    """Tuning knobs for the combination search.

    Attributes:
        ordered: Walk every ordered 4-tuple of the pool (``|pool| ** 4``)
            instead of each unordered combination once. Both report the
            same result; the ordered walk only repeats work.
        workers: Number of worker processes. ``1`` searches in-process.
    """

    ordered: bool = False
    workers: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.workers, bool) or not isinstance(self.workers, int):
            raise ConfigurationError(f"workers must be an integer, got {self.workers!r}")
        if self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1, got {self.workers}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchConfig":
        env = os.environ if environ is None else environ
        raw_ordered = env.get(ORDERED_ENV, "").strip().lower()
        if raw_ordered in _TRUE_VALUES:
            ordered = True
        elif raw_ordered in _FALSE_VALUES:
            ordered = False
        else:
            raise ConfigurationError(f"{ORDERED_ENV} must be a boolean, got {raw_ordered!r}")

        raw_workers = env.get(WORKERS_ENV, "1").strip()
        try:
            workers = int(raw_workers)
        except ValueError as exc:
            raise ConfigurationError(f"{WORKERS_ENV} must be an integer, got {raw_workers!r}") from exc
        return cls(ordered=ordered, workers=workers)
