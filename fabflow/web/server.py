"""
FastAPI web server — recipe listing, layout analysis and flow generation.
"""

from __future__ import annotations

import logging
import math
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from fabflow import __version__
from fabflow.layout import InvalidLayoutError, load_layout, get_layout_stats, stats_to_dict
from fabflow.pipeline.config import PLANNING_RULES
from fabflow.pipeline.formatter import render_flow
from fabflow.pipeline.planner import (
    generate_flow, analyze_layout, flow_to_dict, analysis_to_dict,
)
from fabflow.recipes import (
    RecipeStore, UnknownProcessTypeError, load_recipe_store,
    recipe_to_dict, recipe_summary, RECIPE_DIR_ENV,
)


log = logging.getLogger(__name__)

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="Fab Process Generator", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_store() -> RecipeStore:
    """Recipe table, loaded once per server process."""
    return load_recipe_store()


# ── Models ─────────────────────────────────────────────────────────

class AnalyzeRequest(BaseModel):
    gds_file: str


class GenerateRequest(BaseModel):
    gds_file: str
    process_type: str = PLANNING_RULES.default_process_type
    format: str = "json"


def _load(path: str):
    try:
        return load_layout(path)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidLayoutError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _json_safe(d: dict) -> dict:
    """inf/nan metrics (degenerate layouts) become null; JSON has no such numbers."""
    return {k: (None if isinstance(v, float) and not math.isfinite(v) else v)
            for k, v in d.items()}


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/recipes")
def list_recipes(store: RecipeStore = Depends(get_store)):
    return {"recipes": [recipe_summary(r) for r in store.recipes()]}


@app.get("/api/recipes/{process_type}")
def get_recipe(process_type: str, store: RecipeStore = Depends(get_store)):
    try:
        return recipe_to_dict(store.lookup(process_type))
    except UnknownProcessTypeError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/api/analyze")
def analyze(req: AnalyzeRequest):
    layout = _load(req.gds_file)
    return {
        "layout_file": layout.filename,
        "stats": _json_safe(stats_to_dict(get_layout_stats(layout))),
        "analysis": _json_safe(analysis_to_dict(analyze_layout(layout))),
    }


@app.post("/api/generate")
def generate(req: GenerateRequest, store: RecipeStore = Depends(get_store)):
    layout = _load(req.gds_file)
    try:
        flow = generate_flow(layout, store, req.process_type)
    except UnknownProcessTypeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if req.format == "json":
        return flow_to_dict(flow)
    return {
        "process_type": flow.process_type,
        "format": req.format,
        "content": render_flow(flow, req.format),
    }


def main(host: str = "127.0.0.1", port: int = 8000, recipe_dir: Path | None = None):
    import uvicorn
    if recipe_dir is not None:
        os.environ[RECIPE_DIR_ENV] = str(recipe_dir)
    log.info("Serving on http://%s:%d", host, port)
    uvicorn.run("fabflow.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
