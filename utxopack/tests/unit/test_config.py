"""
Unit tests for configuration presets
"""
import pytest
from utxopack.config import PackingConfig, PlotConfig

pytestmark = pytest.mark.unit

PRESETS = [PlotConfig, PlotConfig.widget, PlotConfig.publication, PlotConfig.compact]


class TestPresets:
    """Presets change presentation, never what gets packed"""

    @pytest.mark.parametrize("preset", PRESETS)
    def test_circle_cap_unchanged(self, preset):
        """Every preset packs the 500 largest UTXOs"""
        assert preset().packing.max_circles == 500

    @pytest.mark.parametrize("preset", PRESETS)
    def test_figure_size_is_pair_of_floats(self, preset):
        """figure_size is (width, height) in inches"""
        width, height = preset().figure_size
        assert width > 0 and height > 0

    def test_widget_is_small_figure(self):
        """Widget preset only shrinks the figure"""
        widget = PlotConfig.widget()
        default = PlotConfig()
        assert widget.figure_size == (4.0, 2.0)
        assert widget.dpi == default.dpi
        assert widget.render == default.render

    def test_presets_do_not_share_state(self):
        """Changing one preset instance leaves fresh ones untouched"""
        config = PlotConfig.widget()
        config.packing.max_circles = 10
        assert PlotConfig.widget().packing.max_circles == 500
        assert PackingConfig().max_circles == 500
