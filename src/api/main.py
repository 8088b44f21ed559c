"""FastAPI app exposing the breeding solver to the web UI."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from genesolver import (
    Allele,
    InputError,
    SearchConfig,
    find_best_combination,
    format_report,
    parse_pool,
    parse_profile,
    result_to_dict,
)
from genesolver.locus import dominance_weight
from genesolver.logging_config import configure_logging

configure_logging()
logger = logging.getLogger("genesolver.api")

WEB_DIR = Path(__file__).resolve().parents[2] / "web"

app = FastAPI(title="Gene Solver API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
if WEB_DIR.is_dir():
    app.mount("/web", StaticFiles(directory=WEB_DIR, html=True), name="web")

SEARCH_CONFIG = SearchConfig.from_env()


class SolveRequest(BaseModel):
    g: int = Field(default=0, description="Goal count of G alleles.")
    y: int = Field(default=0, description="Goal count of Y alleles.")
    h: int = Field(default=0, description="Goal count of H alleles.")
    w: int = Field(default=0, description="Goal count of W alleles.")
    x: int = Field(default=0, description="Goal count of X alleles.")
    plants: str = Field(default="", description="Available plants, one six-letter genome per line.")


@app.get("/alleles")
def list_alleles() -> dict[str, object]:
    return {
        "alleles": [
            {
                "symbol": allele.value,
                "recessive": allele.is_recessive,
                "weight": dominance_weight(allele),
            }
            for allele in Allele
        ]
    }


@app.post("/solve")
def solve(request: SolveRequest) -> dict[str, object]:
    try:
        profile = parse_profile(request.g, request.y, request.h, request.w, request.x)
        pool = parse_pool(request.plants)
    except InputError as exc:
        logger.info("Rejected solve request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    result = find_best_combination(profile, pool, SEARCH_CONFIG)
    return {
        "solved": result is not None,
        "report": format_report(result),
        "result": result_to_dict(result) if result else None,
    }
