"""Serialization helpers for API and UI clients."""

from __future__ import annotations

from typing import Optional

from .search import BreedResult

NO_SOLUTION_MESSAGE = "Unable to solve"


def result_to_dict(result: BreedResult) -> dict[str, object]:
    return {
        "parents": [str(parent) for parent in result.parents],
        "child": str(result.child),
        "outcomes": result.outcomes,
        "probability": result.probability,
        "percent": round(result.percent, 2),
    }


def format_report(result: Optional[BreedResult]) -> str:
    """Render the parents, the goal child and its odds as plain text.

    ::

          GGGGYY
          GGGGYY
          GGGGYY
          GGGGYY
        = GGGGYY 100.00%
    """

    if result is None:
        return NO_SOLUTION_MESSAGE
    lines = [f"  {parent}" for parent in result.parents]
    lines.append(f"= {result.child} {result.percent:.2f}%")
    return "\n".join(lines)
