"""One-call entry point from raw input to a text report."""

from __future__ import annotations

from typing import Optional

from .config import SearchConfig
from .errors import InputError
from .parsing import parse_pool, parse_profile
from .search import find_best_combination
from .serialization import format_report


def solve(g: int, y: int, h: int, w: int, x: int, plant_text: str, config: Optional[SearchConfig] = None) -> str:
    """Return the breeding report, or the input error message if the input is invalid."""

    try:
        profile = parse_profile(g, y, h, w, x)
        pool = parse_pool(plant_text)
    except InputError as exc:
        return str(exc)
    return format_report(find_best_combination(profile, pool, config))
