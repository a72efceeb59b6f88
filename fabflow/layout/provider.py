"""Layout providers — anything with `load(path) -> Layout`.

The GDS-II provider is a stand-in: it checks that the file exists and
returns a fixed five-layer CMOS layout.  A real decoder only has to
satisfy the same protocol.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .models import Layer, Units, BoundingBox, Layout, InvalidLayoutError
from .serialization import parse_layout


log = logging.getLogger(__name__)


class LayoutProvider(Protocol):
    def load(self, path: str | Path) -> Layout:
        ...


def _require_file(path: str | Path, kind: str) -> Path:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"{kind} file not found: {path}")
    return p


def mock_cmos_layout(filename: str) -> Layout:
    """The fixed layout returned for every GDS-II file."""
    return Layout(
        filename=filename,
        layers=(
            Layer(number=1, name="ACTIVE",  feature_count=150),
            Layer(number=2, name="POLY",    feature_count=200),
            Layer(number=3, name="CONTACT", feature_count=300),
            Layer(number=4, name="METAL1",  feature_count=180),
            Layer(number=5, name="VIA1",    feature_count=120),
        ),
        feature_count=950,
        units=Units(database_unit=1e-9, user_unit=1e-6),
        bounding_box=BoundingBox(min_x=0, min_y=0, max_x=1000, max_y=1000),
    )


@dataclass
class MockGDSProvider:
    """Offline stand-in for a GDS-II decoder: file contents are ignored."""

    def load(self, path: str | Path) -> Layout:
        p = _require_file(path, "GDS")
        log.debug("GDS %s (%d bytes): returning mock layout", p, p.stat().st_size)
        return mock_cmos_layout(str(path))


@dataclass
class JSONLayoutProvider:
    """Reads a layout description written by `layout_to_dict`.

    Raises InvalidLayoutError when the file is not valid JSON or lacks
    required fields.
    """

    def load(self, path: str | Path) -> Layout:
        p = _require_file(path, "Layout")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
            data.setdefault("filename", str(path))
            return parse_layout(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as exc:
            raise InvalidLayoutError(path, f"{type(exc).__name__}: {exc}") from exc


def get_layout_provider(path: str | Path) -> LayoutProvider:
    """JSON layout descriptions for *.json, the GDS stand-in otherwise."""
    if Path(path).suffix.lower() == ".json":
        return JSONLayoutProvider()
    return MockGDSProvider()


def load_layout(path: str | Path) -> Layout:
    return get_layout_provider(path).load(path)
