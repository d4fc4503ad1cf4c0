"""UtxoPack: Circle-packed bubble graphs of UTXO sets"""

from .config import PackingConfig, ProjectionConfig, RenderConfig, PlotConfig
from .layout import PackingEngine, LayoutProjector, PrimitiveBuilder, Utxo, Viewport
from .interaction import ActivationEvent, resolve_activation
from . import utils
from .visualizer import BubblePlotter

__version__ = "0.1.0"
__all__ = ["PackingConfig", "ProjectionConfig", "RenderConfig", "PlotConfig",
           "PackingEngine", "LayoutProjector", "PrimitiveBuilder", "Utxo", "Viewport",
           "ActivationEvent", "resolve_activation", "utils", "BubblePlotter"]
