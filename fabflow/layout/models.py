"""Layout dataclasses — what a layout provider hands to the planner."""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import Polygon, box as shapely_box


@dataclass(frozen=True)
class Layer:
    number: int
    name: str                   # case-sensitive as stored
    feature_count: int
    datatype: int = 0


@dataclass(frozen=True)
class Units:
    database_unit: float = 1e-9     # 1 nm
    user_unit: float = 1e-6         # 1 µm


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned layout extent in user units (µm)."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        """Area in µm², mins subtracted."""
        return self.polygon.area

    @property
    def polygon(self) -> Polygon:
        return shapely_box(self.min_x, self.min_y, self.max_x, self.max_y)

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> BoundingBox:
        """Build from a shapely-style (minx, miny, maxx, maxy) tuple."""
        min_x, min_y, max_x, max_y = bounds
        return cls(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)


@dataclass(frozen=True)
class Layout:
    filename: str
    layers: tuple[Layer, ...]
    feature_count: int          # aggregate; need not equal sum of layer counts
    units: Units
    bounding_box: BoundingBox

    @property
    def layer_names(self) -> list[str]:
        return [layer.name for layer in self.layers]


@dataclass(frozen=True)
class LayoutStats:
    total_layers: int
    total_features: int
    area_mm2: float
    density: float              # features per mm²


class InvalidLayoutError(ValueError):
    """A layout file exists but cannot be parsed into a Layout."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid layout file {path}: {reason}")
