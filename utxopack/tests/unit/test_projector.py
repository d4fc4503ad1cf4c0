"""
Unit tests for LayoutProjector
"""
import pytest
from utxopack.config import ProjectionConfig
from utxopack.layout import LayoutProjector, PackingEngine, Utxo, Viewport
from utxopack.layout.types import BoundingBox

pytestmark = pytest.mark.unit


def make_utxos(values):
    return [Utxo(txid=f"{i:064x}", vout=i, value=v) for i, v in enumerate(values)]


class TestProject:
    """Tests for project"""

    def test_single_circle_is_centred(self):
        """A 16 x 16 bbox fills a square viewport"""
        result = PackingEngine().pack(make_utxos([64]))
        projection = LayoutProjector().project(result.bbox, Viewport(100, 100))

        assert projection.scale == pytest.approx(6.25)
        assert projection.to_screen(0, 0) == pytest.approx((50.0, 50.0))

    def test_wide_bbox_limited_by_width(self):
        """Aspect ratio is preserved and the short axis is centred"""
        result = PackingEngine().pack(make_utxos([100, 100]))
        projection = LayoutProjector().project(result.bbox, Viewport(200, 200))

        assert projection.scale == pytest.approx(5.0)
        assert projection.offset_x == pytest.approx(50.0)
        assert projection.offset_y == pytest.approx(100.0)
        assert projection.to_screen(20, 0) == pytest.approx((150.0, 100.0))

    def test_zero_width_uses_height(self):
        """A degenerate dimension is left out of the scale"""
        bbox = BoundingBox(min_x=5, max_x=5, min_y=0, max_y=10)
        projection = LayoutProjector().project(bbox, Viewport(100, 50))

        assert projection.scale == pytest.approx(5.0)
        assert projection.offset_x == pytest.approx(25.0)
        assert projection.offset_y == pytest.approx(0.0)

    def test_point_bbox_uses_default_scale(self):
        """Both dimensions zero falls back to the configured default"""
        bbox = BoundingBox(0, 0, 0, 0)
        projector = LayoutProjector(ProjectionConfig(default_scale=2.0))
        projection = projector.project(bbox, Viewport(100, 50))

        assert projection.scale == 2.0
        assert (projection.offset_x, projection.offset_y) == (50.0, 25.0)

    def test_zero_viewport_does_not_raise(self):
        """Zero-sized viewport gives a zero scale"""
        bbox = BoundingBox(-8, 8, -8, 8)
        projection = LayoutProjector().project(bbox, Viewport(0, 0))
        assert projection.scale == 0.0

    def test_zero_viewport_inverse_does_not_raise(self):
        """Inverse mapping at zero scale falls back to the layout origin"""
        bbox = BoundingBox(-8, 8, -8, 8)
        projection = LayoutProjector().project(bbox, Viewport(0, 0))
        assert projection.to_layout(0.0, 0.0) == (0.0, 0.0)
        assert projection.to_layout(15.0, -4.0) == (0.0, 0.0)

    def test_empty_packing(self):
        """No bbox gives the default projection"""
        projection = LayoutProjector().project(None, Viewport(300, 200))
        assert projection.scale == ProjectionConfig().default_scale


class TestProjectionProperties:
    """Properties over a realistic packing"""

    @pytest.fixture(scope="class")
    def result(self):
        values = [((i * 31) % 97 + 1) * 1_000 for i in range(40)]
        return PackingEngine().pack(make_utxos(values))

    @pytest.mark.parametrize("viewport", [Viewport(800, 200), Viewport(300, 900), Viewport(500, 500)])
    def test_round_trip(self, result, viewport):
        """to_layout inverts to_screen"""
        projection = LayoutProjector().project(result.bbox, viewport)
        for circle in result.circles:
            sx, sy = projection.to_screen(circle.x, circle.y)
            assert projection.to_layout(sx, sy) == pytest.approx(circle.center)

    @pytest.mark.parametrize("viewport", [Viewport(800, 200), Viewport(300, 900)])
    def test_layout_fits_and_is_centred(self, result, viewport):
        """Projected bbox lies inside the viewport, touches one pair of edges and is centred"""
        projection = LayoutProjector().project(result.bbox, viewport)
        left, top = projection.to_screen(result.bbox.min_x, result.bbox.min_y)
        right, bottom = projection.to_screen(result.bbox.max_x, result.bbox.max_y)

        assert left >= -1e-9 and top >= -1e-9
        assert right <= viewport.width + 1e-9 and bottom <= viewport.height + 1e-9
        assert left == pytest.approx(viewport.width - right)
        assert top == pytest.approx(viewport.height - bottom)
        fills_width = right - left == pytest.approx(viewport.width)
        fills_height = bottom - top == pytest.approx(viewport.height)
        assert fills_width or fills_height
