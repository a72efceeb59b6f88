"""Output format dispatch and artifact writing."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from fabflow.pipeline.planner.models import ProcessFlow
from fabflow.pipeline.planner.serialization import flow_to_dict

from .markdown import format_markdown
from .text import format_text


log = logging.getLogger(__name__)

FORMATS = ("text", "markdown", "json")


def format_json(flow: ProcessFlow) -> str:
    return json.dumps(flow_to_dict(flow), indent=2, ensure_ascii=False)


def render_flow(flow: ProcessFlow, fmt: str = "text") -> str:
    """Render *flow* as text, markdown or json; anything else gets text."""
    if fmt == "json":
        return format_json(flow)
    if fmt == "markdown":
        return format_markdown(flow)
    if fmt != "text":
        log.warning("Unsupported output format %r, writing plain text", fmt)
    return format_text(flow)


def write_output(path: str | Path, content: str) -> Path:
    """Write the single output artifact."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    return p
