"""Layout serialization — Layout ↔ JSON-safe dicts."""

from __future__ import annotations

from .models import Layer, Units, BoundingBox, Layout, LayoutStats


def layout_to_dict(layout: Layout) -> dict:
    return {
        "filename": layout.filename,
        "layers": [
            {
                "number": l.number,
                "name": l.name,
                "datatype": l.datatype,
                "feature_count": l.feature_count,
            }
            for l in layout.layers
        ],
        "feature_count": layout.feature_count,
        "units": {
            "database_unit": layout.units.database_unit,
            "user_unit": layout.units.user_unit,
        },
        "bounding_box": {
            "min_x": layout.bounding_box.min_x,
            "min_y": layout.bounding_box.min_y,
            "max_x": layout.bounding_box.max_x,
            "max_y": layout.bounding_box.max_y,
        },
    }


def parse_layout(data: dict) -> Layout:
    """Parse a raw dict (from JSON) into a Layout.

    `units` is optional and defaults to nm database / µm user units.
    """
    units = data.get("units") or {}
    bb = data["bounding_box"]
    return Layout(
        filename=str(data["filename"]),
        layers=tuple(
            Layer(
                number=int(l["number"]),
                name=str(l["name"]),
                feature_count=int(l.get("feature_count", 0)),
                datatype=int(l.get("datatype", 0)),
            )
            for l in data["layers"]
        ),
        feature_count=int(data["feature_count"]),
        units=Units(
            database_unit=float(units.get("database_unit", 1e-9)),
            user_unit=float(units.get("user_unit", 1e-6)),
        ),
        bounding_box=BoundingBox(
            min_x=bb["min_x"], min_y=bb["min_y"],
            max_x=bb["max_x"], max_y=bb["max_y"],
        ),
    )


def stats_to_dict(stats: LayoutStats) -> dict:
    return {
        "total_layers": stats.total_layers,
        "total_features": stats.total_features,
        "area_mm2": stats.area_mm2,
        "density": stats.density,
    }
