"""
Layout types for UtxoPack
Data structures for the packing engine, projector and primitive builder

All types are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Union


@dataclass(frozen=True)
class Utxo:
    """
    Unspent transaction output to be laid out

    Attributes:
        txid: Transaction id holding the output
        vout: Output index within the transaction
        value: Output value in satoshis (must be > 0)
    """
    txid: str
    vout: int
    value: float

    @property
    def outpoint(self) -> str:
        """Outpoint in 'txid:vout' form"""
        return f"{self.txid}:{self.vout}"


@dataclass(frozen=True)
class Viewport:
    """
    Target drawing area in render units (px)

    Attributes:
        width: Viewport width
        height: Viewport height
    """
    width: float
    height: float


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned bounding box of a packing in packing-space coordinates

    Attributes:
        min_x: Leftmost circle edge
        max_x: Rightmost circle edge
        min_y: Lowest circle edge
        max_y: Highest circle edge
    """
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        """Horizontal extent"""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Vertical extent"""
        return self.max_y - self.min_y

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(min_x, max_x, min_y, max_y)"""
        return (self.min_x, self.max_x, self.min_y, self.max_y)


@dataclass(frozen=True)
class PlacedCircle:
    """
    Circle assigned to one UTXO during packing

    Attributes:
        x: Center x coordinate (packing space)
        y: Center y coordinate (packing space)
        radius: sqrt(value), so area is proportional to value
        utxo: Originating UTXO
        distances: Distance from this center to every placed center,
                   indexed by placement order (self-distance is 0)
    """
    x: float
    y: float
    radius: float
    utxo: Utxo
    distances: Tuple[float, ...] = ()

    @property
    def center(self) -> Tuple[float, float]:
        """Center as (x, y)"""
        return (self.x, self.y)


@dataclass
class PackingResult:
    """
    Complete packing solution

    Contains everything needed for projection and rendering.
    This is the output of PackingEngine and input to LayoutProjector
    and PrimitiveBuilder.

    Attributes:
        circles: Placed circles in placement order (descending value)
        bbox: Bounding box of all circles, None when nothing was placed
        n_input: Number of UTXOs received
        n_fallback: Number of circles placed by the origin fallback
    """
    circles: List[PlacedCircle] = field(default_factory=list)
    bbox: Optional[BoundingBox] = None
    n_input: int = 0
    n_fallback: int = 0

    @property
    def n_circles(self) -> int:
        """Number of placed circles"""
        return len(self.circles)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render"""
        return not self.circles

    @property
    def n_truncated(self) -> int:
        """Number of UTXOs dropped by the circle cap"""
        return self.n_input - len(self.circles)


@dataclass(frozen=True)
class Projection:
    """
    Uniform scale + offset mapping packing space into a viewport

    Attributes:
        scale: Render units per packing unit
        offset_x: Horizontal offset (render units)
        offset_y: Vertical offset (render units)
    """
    scale: float
    offset_x: float
    offset_y: float

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        """Map a packing-space point into the viewport"""
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def to_layout(self, sx: float, sy: float) -> Tuple[float, float]:
        """
        Inverse of to_screen

        A zero scale (zero-sized viewport) collapses the whole layout onto the
        offset point, so every screen point maps back to the layout origin.
        """
        if self.scale == 0:
            return (0.0, 0.0)
        return ((sx - self.offset_x) / self.scale, (sy - self.offset_y) / self.scale)


@dataclass(frozen=True)
class CirclePrimitive:
    """
    Filled circle to draw

    Attributes:
        cx: Center x (render units)
        cy: Center y (render units)
        r: Radius (render units, already inset)
        fill_color: Fill color
        data_index: Placement index of the originating circle
        utxo: Originating UTXO, for interaction callbacks
    """
    cx: float
    cy: float
    r: float
    fill_color: str
    data_index: int
    utxo: Utxo


@dataclass(frozen=True)
class LabelPrimitive:
    """
    Centred text label drawn over a circle

    Attributes:
        x: Anchor x (render units)
        y: Anchor y (render units)
        text: Human-readable value
        font_size: Font size (render units)
        color: Text color
        data_index: Placement index of the originating circle
        utxo: Originating UTXO, for interaction callbacks
    """
    x: float
    y: float
    text: str
    font_size: float
    color: str
    data_index: int
    utxo: Utxo


DrawablePrimitive = Union[CirclePrimitive, LabelPrimitive]
