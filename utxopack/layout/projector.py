"""
Layout projector

Maps packing-space coordinates into a viewport with one uniform scale,
centred and aspect-preserving.
"""
from __future__ import annotations
from typing import Optional
import logging

from ..config import ProjectionConfig
from .types import BoundingBox, Projection, Viewport

logger = logging.getLogger(__name__)


class LayoutProjector:
    """Computes the scale + offset transform for a bounding box and viewport"""

    def __init__(self, config: Optional[ProjectionConfig] = None):
        self.config = config or ProjectionConfig()

    def project(self, bbox: Optional[BoundingBox], viewport: Viewport) -> Projection:
        """
        Fit the bounding box into the viewport

        scale = min(width / bbox_width, height / bbox_height). A zero-sized
        bbox dimension is left out of the minimum; if both are zero the
        configured default scale is used. Zero-sized viewports give scale 0.

        Args:
            bbox: Bounding box of the packing (None for an empty packing)
            viewport: Target area in render units

        Returns:
            Projection centring the scaled bbox in the viewport
        """
        if bbox is None:
            logger.debug("Empty packing, using default projection")
            return Projection(scale=self.config.default_scale, offset_x=0.0, offset_y=0.0)

        width = max(viewport.width, 0.0)
        height = max(viewport.height, 0.0)

        candidates = []
        if bbox.width > 0:
            candidates.append(width / bbox.width)
        if bbox.height > 0:
            candidates.append(height / bbox.height)
        if candidates:
            scale = min(candidates)
        else:
            logger.debug("Degenerate bounding box, using default scale")
            scale = self.config.default_scale

        offset_x = (width - bbox.width * scale) / 2 - bbox.min_x * scale
        offset_y = (height - bbox.height * scale) / 2 - bbox.min_y * scale

        return Projection(scale=scale, offset_x=offset_x, offset_y=offset_y)
