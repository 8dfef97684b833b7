"""
Interactive donut chart component for Streamlit.

Draws the engine's path descriptions as Plotly layout shapes and wires one
invisible marker per hit region so point selections map back to segments.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ..config.settings import ChartConfig
from ..models.chart import DonutRender
from ..services.donut_chart import DonutChart
from ..services.error_handler import get_error_handler
from ..services.exceptions import InvalidDataPointError, InvalidSelectionError
from ..utils.currency_utils import CurrencyUtils
from ..utils.structured_logging import get_structured_logger

logger = get_structured_logger().get_logger(__name__)

HOLE_COLOR = "#f8f9fa"
STROKE_COLOR = "#FFFFFF"


def build_figure(render: DonutRender) -> go.Figure:
    """Build a Plotly figure in surface coordinates (y axis pointing down)."""
    size = render.size
    fig = go.Figure()

    shapes = [
        dict(
            type="path",
            path=slice_.path.to_svg(),
            fillcolor=slice_.color,
            line=dict(color=STROKE_COLOR, width=2),
            opacity=slice_.opacity,
            layer="below",
        )
        for slice_ in render.slices
    ]
    hole = render.inner_radius - 2
    if not render.is_empty and hole > 0:
        shapes.append(
            dict(
                type="circle",
                x0=render.center - hole,
                y0=render.center - hole,
                x1=render.center + hole,
                y1=render.center + hole,
                fillcolor=HOLE_COLOR,
                line=dict(width=0),
                layer="below",
            )
        )

    regions = render.hit_regions
    fig.add_trace(
        go.Scatter(
            x=[r.center_x for r in regions],
            y=[r.center_y for r in regions],
            mode="markers",
            marker=dict(size=[r.size for r in regions], opacity=0),
            customdata=[r.index for r in regions],
            text=[s.name for s in render.slices],
            hovertemplate="<b>%{text}</b><extra></extra>",
            showlegend=False,
        )
    )

    fig.add_annotation(
        text="<br>".join(render.center_label.lines),
        x=render.center,
        y=render.center,
        showarrow=False,
        font_size=16 if render.center_label.is_detail else 14,
    )

    fig.update_layout(
        shapes=shapes,
        width=size,
        height=size,
        margin=dict(l=0, r=0, t=0, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        dragmode=False,
        clickmode="event+select",
    )
    fig.update_xaxes(range=[0, size], visible=False, fixedrange=True)
    fig.update_yaxes(range=[size, 0], visible=False, fixedrange=True, scaleanchor="x", scaleratio=1)
    return fig


def breakdown_frame(render: DonutRender, currency: str = "INR") -> pd.DataFrame:
    """Tabular view of the segments shown under the chart."""
    return pd.DataFrame(
        {
            "Material": [s.segment.name for s in render.slices],
            "Amount": [CurrencyUtils.format_amount(s.segment.amount, currency) for s in render.slices],
            "Percentage": [CurrencyUtils.format_percentage_one_decimal(s.segment.percentage) for s in render.slices],
        }
    )


def _selected_points(event: Any) -> List[int]:
    if not event:
        return []
    try:
        points = event["selection"]["points"]
    except (KeyError, TypeError):
        return []
    return sorted(int(p["customdata"]) for p in points if p.get("customdata") is not None)


def resolve_press(
    points: List[int],
    last_event: Optional[List[int]],
    selected: Optional[int],
) -> Tuple[Optional[int], Optional[List[int]]]:
    """
    Decide which slice a Plotly selection event presses.

    Plotly keeps the last selection across reruns, so only a selection that
    differs from the remembered one counts as a tap. Clicking the selected
    point again clears Plotly's selection; that arrives as an empty event and
    presses the selected slice so the chart toggles back to idle.

    Returns:
        (index to press or None, selection event to remember)
    """
    if points:
        if points != last_event:
            return points[0], points
        return None, last_event
    if last_event and selected is not None:
        return selected, None
    return None, None


def render_donut_chart(
    data: Iterable[Any],
    key: str = "donut_chart",
    size: Optional[float] = None,
    on_slice_press: Optional[Callable] = None,
    empty_message: str = "No expense data available",
    config: Optional[ChartConfig] = None,
) -> Optional[DonutChart]:
    """
    Render an interactive donut chart and keep its selection in session state.

    Args:
        data: Data points (or mappings with name, amount, color)
        key: Streamlit widget key; also namespaces the session state
        size: Outer diameter in pixels
        on_slice_press: Called with (item, index) after each tap
        empty_message: Shown instead of the chart when there is nothing to draw
        config: Chart configuration, defaults to the application settings

    Returns:
        The chart instance, or None when nothing was drawn
    """
    selected_key = f"{key}__selected"
    event_key = f"{key}__last_event"
    points = list(data)

    try:
        try:
            chart = DonutChart(points, size=size, on_slice_press=on_slice_press, config=config,
                               selected_index=st.session_state.get(selected_key))
        except InvalidSelectionError:
            st.session_state[selected_key] = None
            chart = DonutChart(points, size=size, on_slice_press=on_slice_press, config=config)
    except InvalidDataPointError as e:
        error = get_error_handler().handle_data_point_error(e, context=key)
        st.error(error["message"])
        return None

    render = chart.render()
    if render.is_empty:
        st.info(empty_message)
        return None

    event = st.plotly_chart(
        build_figure(render),
        key=key,
        on_select="rerun",
        selection_mode="points",
        use_container_width=False,
        config={"displayModeBar": False},
    )

    press_index, last_event = resolve_press(
        _selected_points(event), st.session_state.get(event_key), chart.selected_index
    )
    st.session_state[event_key] = last_event
    if press_index is not None:
        chart.press(press_index)
        st.session_state[selected_key] = chart.selected_index
        logger.debug("Chart selection changed", operation="render_donut_chart", selected=chart.selected_index)
        st.rerun()

    st.caption("Tap on segments to see details")
    with st.expander("📊 Detailed Breakdown"):
        st.dataframe(breakdown_frame(render, chart.config.currency), use_container_width=True)

    return chart


def render_expense_distribution(points: Sequence[Any], size: Optional[float] = None) -> Optional[DonutChart]:
    """Expense distribution section of the reporting page."""
    st.subheader("Expense Distribution")
    return render_donut_chart(points, key="expense_distribution", size=size)
