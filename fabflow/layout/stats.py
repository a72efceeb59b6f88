"""Layout statistics."""

from __future__ import annotations

from fabflow.numeric import ieee_div

from .models import Layer, Layout, LayoutStats


def extract_layers(layout: Layout) -> list[Layer]:
    """Number, name and feature count of every layer (datatype dropped)."""
    return [
        Layer(number=l.number, name=l.name, feature_count=l.feature_count)
        for l in layout.layers
    ]


def get_layout_stats(layout: Layout) -> LayoutStats:
    """Layer/feature totals, die area in mm² and feature density per mm².

    Unlike the analysis heuristics, the area here subtracts the
    bounding-box minimums.
    """
    area_mm2 = layout.bounding_box.area / 1e6
    return LayoutStats(
        total_layers=len(layout.layers),
        total_features=layout.feature_count,
        area_mm2=area_mm2,
        density=ieee_div(layout.feature_count, area_mm2),
    )
