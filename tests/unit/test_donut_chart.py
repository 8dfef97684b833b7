"""
Unit tests for the DonutChart facade
"""

import pytest

from buildledger.config.settings import ChartConfig
from buildledger.models import CenterLabelMode, DataPoint, PathKind
from buildledger.services.donut_chart import DonutChart
from buildledger.services.exceptions import ChartConfigurationError, InvalidSelectionError, NegativeAmountError


class PressRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, item, index):
        self.calls.append((item, index))


@pytest.fixture
def recorder():
    return PressRecorder()


@pytest.fixture
def chart(two_points, chart_config, recorder) -> DonutChart:
    return DonutChart(two_points, size=240, on_slice_press=recorder, config=chart_config)


class TestDonutChartGeometry:
    def test_radii_from_size(self, chart):
        assert chart.center == 120
        assert chart.outer_radius == 110
        assert chart.inner_radius == pytest.approx(60.5)

    def test_default_size_from_config(self, two_points, chart_config):
        assert DonutChart(two_points, config=chart_config).size == 240

    @pytest.mark.parametrize("size", [0, -10, 20])
    def test_unusable_size_rejected(self, two_points, chart_config, size):
        with pytest.raises(ChartConfigurationError):
            DonutChart(two_points, size=size, config=chart_config)


class TestDonutChartRender:
    def test_idle_render(self, chart):
        render = chart.render()

        assert len(render.slices) == 2
        assert render.selected_index is None
        assert render.center_label.mode == CenterLabelMode.AGGREGATE
        assert [s.opacity for s in render.slices] == [1.0, 1.0]
        assert all(s.path.is_closed for s in render.slices)

    def test_output_counts_match(self, material_points, chart_config):
        render = DonutChart(material_points, size=240, config=chart_config).render()

        assert len(render.paths) == len(render.slices) == len(render.hit_regions) == 5
        assert all(r.size >= chart_config.min_tap_size for r in render.hit_regions)

    def test_selected_render(self, chart, chart_config):
        chart.press(1)
        render = chart.render()

        assert render.selected_index == 1
        assert render.slices[1].is_selected
        assert render.slices[1].path.outer_radius == 118
        assert render.slices[0].path.outer_radius == 110
        assert render.slices[0].opacity == chart_config.dimmed_opacity
        assert render.slices[1].opacity == 1.0
        assert render.center_label.payload.name == "B"

    def test_selection_keeps_angles(self, chart):
        before = [(s.start_angle, s.end_angle) for s in chart.segments]
        chart.press(0)
        after = [(s.start_angle, s.end_angle) for s in chart.segments]
        assert before == after

    def test_empty_data(self, chart_config):
        render = DonutChart([], config=chart_config).render()

        assert render.is_empty
        assert render.hit_regions == ()
        assert render.center_label.mode == CenterLabelMode.AGGREGATE

    def test_all_zero_data(self, chart_config):
        data = [DataPoint(name="A", amount=0), DataPoint(name="B", amount=0)]
        assert DonutChart(data, config=chart_config).render().is_empty

    def test_single_item_draws_ring(self, chart_config):
        data = [{"name": "A", "amount": 0}, {"name": "Steel", "amount": 900}]
        render = DonutChart(data, config=chart_config).render()

        assert render.slices[0].path.kind == PathKind.WEDGE
        assert render.slices[1].path.kind == PathKind.RING

    def test_huge_amounts_render_finite_paths(self, chart_config):
        data = [{"name": "A", "amount": 1e308}, {"name": "B", "amount": 1e308}]
        render = DonutChart(data, size=240, config=chart_config).render()

        assert all("nan" not in path.to_svg() for path in render.paths)
        assert all(path.kind == PathKind.WEDGE for path in render.paths)

    def test_reject_policy_propagates(self, reject_config):
        with pytest.raises(NegativeAmountError):
            DonutChart([{"name": "Refund", "amount": -1}], config=reject_config)


class TestDonutChartInteraction:
    def test_press_selects_and_notifies(self, chart, recorder, two_points):
        assert chart.press(1) == 1
        assert chart.selected_index == 1
        assert recorder.calls == [(two_points[1], 1)]

    def test_press_again_deselects(self, chart, recorder):
        chart.press(1)
        assert chart.press(1) is None
        assert chart.selected_index is None
        assert [index for _, index in recorder.calls] == [1, 1]

    def test_press_out_of_range(self, chart):
        with pytest.raises(InvalidSelectionError):
            chart.press(2)

    def test_failing_callback_does_not_break_toggle(self, two_points, chart_config):
        def explode(item, index):
            raise RuntimeError("host failure")

        chart = DonutChart(two_points, on_slice_press=explode, config=chart_config)
        assert chart.press(0) == 0
        assert chart.selected_index == 0

    def test_select_and_clear(self, chart, recorder):
        chart.select(0)
        assert chart.selected_index == 0
        chart.clear_selection()
        assert chart.selected_index is None
        chart.select(1)
        chart.select(None)
        assert chart.selected_index is None
        assert recorder.calls == []

    def test_initial_selection(self, two_points, chart_config):
        chart = DonutChart(two_points, config=chart_config, selected_index=0)
        assert chart.render().center_label.payload.name == "A"

    def test_initial_selection_out_of_range(self, two_points, chart_config):
        with pytest.raises(InvalidSelectionError):
            DonutChart(two_points, config=chart_config, selected_index=5)

    def test_tap_at_hit_region_centre(self, chart):
        region = chart.hit_regions()[1]
        assert chart.hit_test(region.center_x, region.center_y) == 1
        assert chart.tap_at(region.center_x, region.center_y) == 1
        assert chart.selected_index == 1

    def test_tap_outside_all_regions_misses(self, chart):
        assert chart.tap_at(0, 0) is None
        assert chart.selected_index is None

    def test_new_data_clears_stale_selection(self, chart):
        chart.press(1)
        chart.set_data([{"name": "Only", "amount": 10}])
        assert chart.selected_index is None

    def test_new_data_keeps_valid_selection(self, chart, material_points):
        chart.press(1)
        chart.set_data(material_points)
        assert chart.selected_index == 1


class TestDonutChartConfig:
    def test_custom_emphasis(self, two_points):
        config = ChartConfig(selected_offset=4, dimmed_opacity=0.3)
        chart = DonutChart(two_points, size=200, config=config, selected_index=0)
        render = chart.render()

        assert render.slices[0].path.outer_radius == 94
        assert render.slices[1].opacity == 0.3
