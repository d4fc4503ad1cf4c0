"""
UtxoPack Configuration
Packing, projection, rendering and figure parameters
"""
from typing import Tuple
from dataclasses import dataclass, field

from .types import Network


@dataclass
class PackingConfig:
    """
    Packing engine parameters
    """

    max_circles: int = 500
    """Only the largest UTXOs up to this count are packed (cost grows superlinearly)"""


@dataclass
class ProjectionConfig:
    """
    Layout projector parameters
    """

    default_scale: float = 1.0
    """Scale used when the bounding box has zero width and zero height"""


@dataclass
class RenderConfig:
    """
    Render descriptor parameters

    All sizes are in render units (px).
    """

    # ============================================================
    # VISIBILITY
    # ============================================================
    min_screen_radius: float = 3.0
    """Circles smaller than this on screen are not drawn"""

    circle_inset: float = 1.0
    """Subtracted from the screen radius so neighbours do not merge"""

    # ============================================================
    # LABELS
    # ============================================================
    label_scale: float = 0.25
    """Label font size as a fraction of the screen radius"""

    max_label_fontsize: float = 36.0
    """Upper bound on label font size"""

    min_label_fontsize: float = 8.0
    """Labels at or below this font size are omitted"""

    network: Network = 'mainnet'
    """Network name, selects the unit prefix of labels"""

    # ============================================================
    # COLORS
    # ============================================================
    fill_color: str = '#5470c6'
    """Circle fill color"""

    label_color: str = '#fff'
    """Label text color"""


@dataclass
class PlotConfig:
    """
    Complete plot configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    packing: PackingConfig = field(default_factory=PackingConfig)
    """Packing configuration"""

    projection: ProjectionConfig = field(default_factory=ProjectionConfig)
    """Projection configuration"""

    render: RenderConfig = field(default_factory=RenderConfig)
    """Render configuration"""

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    figure_size: Tuple[float, float] = (8.0, 4.0)
    """Figure size in inches (width, height)"""

    dpi: int = 100
    """DPI for saved figures, also sets the pixel viewport"""

    background_color: str = 'white'
    """Figure background"""

    title_fontsize: int = 12
    """Font size for the optional title"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def widget(cls) -> 'PlotConfig':
        """
        Small dashboard widget

        - Short, wide figure

        Example:
            >>> config = PlotConfig.widget()
            >>> plotter = BubblePlotter(config)
        """
        config = cls()
        config.figure_size = (4.0, 2.0)
        return config

    @classmethod
    def publication(cls) -> 'PlotConfig':
        """
        High-quality settings for print

        - 300 DPI
        - Square figure
        """
        config = cls()
        config.dpi = 300
        config.figure_size = (8.0, 8.0)
        config.title_fontsize = 14
        return config

    @classmethod
    def compact(cls) -> 'PlotConfig':
        """
        Compact settings for dense wallets

        - Smaller visibility cutoff so more circles survive
        - Thinner inset
        """
        config = cls()
        config.render.min_screen_radius = 2.0
        config.render.circle_inset = 0.5
        return config
