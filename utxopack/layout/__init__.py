"""
Layout Module for UtxoPack
Circle packing, projection and render descriptors for UTXO bubble graphs

Public API:
    - PackingEngine: Packs UTXOs as tangent circles
    - LayoutProjector: Fits a packing into a viewport
    - PrimitiveBuilder: Emits drawable primitives
    - PackingResult: Complete packing solution
    - Projection: Scale + offset transform
"""

from .engine import PackingEngine
from .projector import LayoutProjector
from .primitives import PrimitiveBuilder
from .types import (
    Utxo,
    Viewport,
    BoundingBox,
    PlacedCircle,
    PackingResult,
    Projection,
    CirclePrimitive,
    LabelPrimitive,
    DrawablePrimitive,
)

__all__ = [
    'PackingEngine',
    'LayoutProjector',
    'PrimitiveBuilder',
    'Utxo',
    'Viewport',
    'BoundingBox',
    'PlacedCircle',
    'PackingResult',
    'Projection',
    'CirclePrimitive',
    'LabelPrimitive',
    'DrawablePrimitive',
]
