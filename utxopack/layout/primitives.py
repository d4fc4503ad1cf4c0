"""
Render descriptor builder

Turns a packing and a projection into drawable primitives for an external
rendering surface. Visibility rules:

- circles smaller than min_screen_radius on screen are skipped for the frame
- labels are drawn only when their font size exceeds min_label_fontsize
"""
from __future__ import annotations
from typing import List, Optional
import logging

from ..config import ProjectionConfig, RenderConfig
from ..utils import render_sats
from .projector import LayoutProjector
from .types import (
    CirclePrimitive,
    DrawablePrimitive,
    LabelPrimitive,
    PackingResult,
    Projection,
    Viewport,
)

logger = logging.getLogger(__name__)


class PrimitiveBuilder:
    """Builds Circle and Label primitives, one group per placed circle"""

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        projection_config: Optional[ProjectionConfig] = None
    ):
        """
        Initialize primitive builder

        Args:
            config: Render configuration. If None, uses default settings.
            projection_config: Used by build_for_viewport()
        """
        self.config = config or RenderConfig()
        self.projector = LayoutProjector(projection_config)

    def build(self, result: PackingResult, projection: Projection) -> List[DrawablePrimitive]:
        """
        Build primitives in placement order

        Args:
            result: Packing to draw
            projection: Transform into render units

        Returns:
            Circle primitives, each followed by its Label when one is visible
        """
        cfg = self.config
        primitives: List[DrawablePrimitive] = []
        n_hidden = 0

        for index, circle in enumerate(result.circles):
            screen_radius = circle.radius * projection.scale
            if screen_radius < cfg.min_screen_radius:
                n_hidden += 1
                continue

            cx, cy = projection.to_screen(circle.x, circle.y)
            primitives.append(CirclePrimitive(
                cx=cx,
                cy=cy,
                r=screen_radius - cfg.circle_inset,
                fill_color=cfg.fill_color,
                data_index=index,
                utxo=circle.utxo
            ))

            font_size = min(cfg.max_label_fontsize, screen_radius * cfg.label_scale)
            if font_size > cfg.min_label_fontsize:
                primitives.append(LabelPrimitive(
                    x=cx,
                    y=cy,
                    text=render_sats(circle.utxo.value, cfg.network),
                    font_size=font_size,
                    color=cfg.label_color,
                    data_index=index,
                    utxo=circle.utxo
                ))

        if n_hidden:
            logger.debug(f"{n_hidden} of {result.n_circles} circles too small to draw")

        return primitives

    def build_for_viewport(self, result: PackingResult, viewport: Viewport) -> List[DrawablePrimitive]:
        """
        Project and build in one step

        The projection is recomputed on every call so the surface can pass
        whatever size it has at draw time.
        """
        if result.is_empty:
            return []
        return self.build(result, self.projector.project(result.bbox, viewport))
