"""
Bubble visualizer

Draws packed UTXO circles with matplotlib. The figure is the rendering
surface: its pixel size is the viewport, queried at draw time.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.axes import Axes
from matplotlib.figure import Figure
import logging

from .config import PlotConfig
from .layout import (
    PackingEngine,
    PrimitiveBuilder,
    PackingResult,
    CirclePrimitive,
    LabelPrimitive,
    DrawablePrimitive,
    Utxo,
    Viewport,
)

logger = logging.getLogger(__name__)

POINTS_PER_INCH = 72.0


class BubblePlotter:
    """
    Creates UTXO bubble graphs

    Circle area is proportional to UTXO value; the largest UTXOs are packed
    first around the origin.
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize BubblePlotter

        Args:
            config: Plot configuration. If None, uses default settings.

        Example:
            >>> plotter = BubblePlotter()
            >>> plotter = BubblePlotter(PlotConfig.publication())
        """
        self.config: PlotConfig = config or PlotConfig()
        self.engine = PackingEngine(self.config.packing)
        self.builder = PrimitiveBuilder(self.config.render, self.config.projection)

    def viewport_for(self, fig: Figure) -> Viewport:
        """Viewport in pixels for the figure's current size"""
        width_in, height_in = fig.get_size_inches()
        return Viewport(width=width_in * fig.dpi, height=height_in * fig.dpi)

    def draw(self, ax: Axes, result: PackingResult, viewport: Viewport) -> List[DrawablePrimitive]:
        """
        Draw a packing onto axes spanning the viewport

        The axes are set up in pixel coordinates with y pointing down.

        Args:
            ax: Target axes
            result: Packing to draw
            viewport: Viewport in pixels

        Returns:
            The primitives that were drawn
        """
        ax.set_xlim(0, viewport.width)
        ax.set_ylim(viewport.height, 0)
        ax.set_aspect('equal')
        ax.axis('off')

        if result.is_empty:
            ax.text(viewport.width / 2, viewport.height / 2, "No UTXOs",
                    ha='center', va='center', color='grey')
            return []

        primitives = self.builder.build_for_viewport(result, viewport)
        px_to_pt = POINTS_PER_INCH / ax.figure.dpi

        for primitive in primitives:
            if isinstance(primitive, CirclePrimitive):
                ax.add_patch(patches.Circle(
                    (primitive.cx, primitive.cy), primitive.r,
                    facecolor=primitive.fill_color, edgecolor='none',
                    gid=primitive.utxo.outpoint
                ))
            elif isinstance(primitive, LabelPrimitive):
                ax.text(primitive.x, primitive.y, primitive.text,
                        fontsize=primitive.font_size * px_to_pt,
                        color=primitive.color, ha='center', va='center')

        n_circles = sum(isinstance(p, CirclePrimitive) for p in primitives)
        logger.info(f"Drew {n_circles} of {result.n_circles} circles")
        return primitives

    def plot(
        self,
        utxos: Sequence[Utxo],
        output_file: Optional[str] = None,
        figsize: Optional[Tuple[float, float]] = None,
        title: Optional[str] = None,
        show: bool = False
    ) -> Figure:
        """
        Pack and draw UTXOs

        Args:
            utxos: UTXOs to draw (values must be > 0)
            output_file: Where to save the figure, skipped if None
            figsize: Figure size in inches, defaults to config.figure_size
            title: Optional title
            show: Call plt.show() after drawing

        Returns:
            The matplotlib Figure
        """
        result = self.engine.pack(utxos)

        fig = plt.figure(figsize=figsize or self.config.figure_size, dpi=self.config.dpi,
                         facecolor=self.config.background_color)
        ax = fig.add_axes([0, 0, 1, 1])
        self.draw(ax, result, self.viewport_for(fig))

        if title:
            fig.suptitle(title, fontsize=self.config.title_fontsize)

        if output_file:
            fig.savefig(output_file, dpi=self.config.dpi,
                        facecolor=self.config.background_color, edgecolor='none')
            logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()

        return fig
