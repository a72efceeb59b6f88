"""Layouts — dataclasses, providers, statistics and serialization.

Submodules:
  models         Layer, Units, BoundingBox, Layout, LayoutStats, InvalidLayoutError.
  provider       LayoutProvider protocol, mock GDS-II and JSON providers.
  stats          extract_layers, get_layout_stats.
  serialization  layout_to_dict, parse_layout, stats_to_dict.
"""

from .models import Layer, Units, BoundingBox, Layout, LayoutStats, InvalidLayoutError
from .serialization import layout_to_dict, parse_layout, stats_to_dict
from .provider import (
    LayoutProvider, MockGDSProvider, JSONLayoutProvider,
    get_layout_provider, load_layout, mock_cmos_layout,
)
from .stats import extract_layers, get_layout_stats

__all__ = [
    # Models
    "Layer", "Units", "BoundingBox", "Layout", "LayoutStats", "InvalidLayoutError",
    # Providers
    "LayoutProvider", "MockGDSProvider", "JSONLayoutProvider",
    "get_layout_provider", "load_layout", "mock_cmos_layout",
    # Stats
    "extract_layers", "get_layout_stats",
    # Serialization
    "layout_to_dict", "parse_layout", "stats_to_dict",
]
