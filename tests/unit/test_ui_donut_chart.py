"""
Unit tests for the Plotly donut chart adapter
"""

import pytest

from buildledger.services.donut_chart import DonutChart
from buildledger.ui import donut_chart as donut_chart_ui
from buildledger.ui.donut_chart import _selected_points, breakdown_frame, build_figure, render_donut_chart, resolve_press


@pytest.fixture
def render(two_points, chart_config):
    return DonutChart(two_points, size=240, config=chart_config).render()


class TestBuildFigure:
    def test_one_path_shape_per_slice_plus_hole(self, render):
        fig = build_figure(render)
        shapes = fig.layout.shapes

        assert len(shapes) == 3
        assert shapes[0].type == "path"
        assert shapes[0].path == render.slices[0].path.to_svg()
        assert shapes[1].fillcolor == "#36A2EB"
        assert shapes[2].type == "circle"

    def test_hit_markers_follow_regions(self, render):
        trace = build_figure(render).data[0]

        assert list(trace.customdata) == [0, 1]
        assert list(trace.marker.size) == [r.size for r in render.hit_regions]
        assert list(trace.x) == pytest.approx([r.center_x for r in render.hit_regions])

    def test_center_annotation(self, render):
        annotation = build_figure(render).layout.annotations[0]
        assert annotation.text == "Total<br>Expenses"
        assert annotation.x == 120

    def test_selected_annotation_and_opacity(self, two_points, chart_config):
        render = DonutChart(two_points, size=240, config=chart_config, selected_index=0).render()
        fig = build_figure(render)

        assert fig.layout.annotations[0].text == "A<br>₹100<br>25.0%"
        assert fig.layout.shapes[1].opacity == chart_config.dimmed_opacity

    def test_surface_axes(self, render):
        fig = build_figure(render)
        assert tuple(fig.layout.yaxis.range) == (240, 0)
        assert fig.layout.width == 240


class TestHelpers:
    def test_breakdown_frame(self, render):
        frame = breakdown_frame(render)
        assert list(frame["Material"]) == ["A", "B"]
        assert list(frame["Amount"]) == ["₹100", "₹300"]
        assert list(frame["Percentage"]) == ["25.0%", "75.0%"]

    def test_selected_points(self):
        event = {"selection": {"points": [{"customdata": 2}, {"customdata": 0}, {"x": 1}]}}
        assert _selected_points(event) == [0, 2]

    @pytest.mark.parametrize("event", [None, {}, {"selection": {}}])
    def test_selected_points_without_selection(self, event):
        assert _selected_points(event) == []


class TestResolvePress:
    def test_new_selection_presses_first_point(self):
        assert resolve_press([1], None, None) == (1, [1])

    def test_repeated_event_is_ignored(self):
        assert resolve_press([1], [1], 1) == (None, [1])

    def test_other_point_replaces_selection(self):
        assert resolve_press([0], [1], 1) == (0, [0])

    def test_cleared_event_deselects(self):
        assert resolve_press([], [1], 1) == (1, None)

    def test_empty_event_while_idle(self):
        assert resolve_press([], None, None) == (None, None)
        assert resolve_press([], [1], None) == (None, None)

    def test_select_deselect_reselect(self, two_points, chart_config):
        chart = DonutChart(two_points, size=240, config=chart_config)
        last_event = None
        states = []

        for points in ([1], [1], [], [], [1]):
            press_index, last_event = resolve_press(points, last_event, chart.selected_index)
            if press_index is not None:
                chart.press(press_index)
            states.append(chart.selected_index)

        assert states == [1, 1, None, None, 1]


class FakeStreamlit:
    def __init__(self):
        self.session_state = {}
        self.errors = []
        self.infos = []

    def error(self, message):
        self.errors.append(message)

    def info(self, message):
        self.infos.append(message)


class TestRenderDonutChart:
    @pytest.fixture
    def fake_st(self, monkeypatch):
        fake = FakeStreamlit()
        monkeypatch.setattr(donut_chart_ui, "st", fake)
        return fake

    def test_rejected_amount_shows_item_message(self, fake_st, reject_config):
        data = [{"name": "Cement", "amount": 10}, {"name": "Refund", "amount": -5}]

        assert render_donut_chart(data, key="chart", config=reject_config) is None
        assert fake_st.errors == ["Item 2 has an invalid amount (negative amount)."]

    def test_empty_data_shows_message(self, fake_st, chart_config):
        assert render_donut_chart([], key="chart", config=chart_config, empty_message="Nothing yet") is None
        assert fake_st.infos == ["Nothing yet"]

    def test_stale_stored_selection_is_cleared(self, fake_st, chart_config):
        fake_st.session_state["chart__selected"] = 7

        assert render_donut_chart([], key="chart", config=chart_config) is None
        assert fake_st.session_state["chart__selected"] is None
