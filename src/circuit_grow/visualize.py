"""Plotly rendering of the scrolling circuit board."""

from __future__ import annotations

from pathlib import Path

import plotly.graph_objects as go

from circuit_grow.config import Config
from circuit_grow.scroll import FrameView, RenderedSegment

# Resistor body spans this fraction of the connection, measured from the cell centre.
RESISTOR_START = 0.25
RESISTOR_END = 0.75
# Each colour band fills this part of its slot along the resistor body.
BAND_START = 0.2
BAND_END = 0.8


def _lerp(a: tuple[float, float], b: tuple[float, float], t: float) -> tuple[float, float]:
    return a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t


def _resistor_body(seg: RenderedSegment) -> tuple[tuple[float, float], tuple[float, float]]:
    return _lerp(seg.start, seg.end, RESISTOR_START), _lerp(seg.start, seg.end, RESISTOR_END)


def _line_trace(
    points: list[tuple[tuple[float, float], tuple[float, float]]],
    colour: str,
    width: float,
    name: str,
) -> go.Scatter:
    xs: list[float | None] = []
    ys: list[float | None] = []
    for (x0, y0), (x1, y1) in points:
        xs.extend([x0, x1, None])
        ys.extend([y0, y1, None])
    return go.Scatter(
        x=xs,
        y=ys,
        mode="lines",
        line=dict(color=f"#{colour}", width=width),
        name=name,
        hoverinfo="skip",
        showlegend=False,
    )


def frame_traces(view: FrameView, config: Config) -> list[go.Scatter]:
    """Traces for one frame: wires, resistor bodies, then one trace per colour band.

    The trace count depends only on the configuration so frames of an
    animation line up.
    """
    wire_width = max(config.cell_size * (3 / 50), 1)
    body_width = (0.4 / view.grid_width) * view.canvas_width if view.grid_width else 1

    # Resistors also get a wire stroke underneath their body.
    wires = [(s.start, s.end) for s in view.segments]
    resistors = [_resistor_body(s) for s in view.segments if s.kind == "resistor"]

    traces = [
        _line_trace(wires, config.wire_colour, wire_width, "Wires"),
        _line_trace(resistors, config.resistor_bg_colour, body_width, "Resistors"),
    ]

    n_bands = len(config.resistor_colours)
    for i, colour in enumerate(config.resistor_colours):
        bands = [
            (_lerp(a, b, (i + BAND_START) / n_bands), _lerp(a, b, (i + BAND_END) / n_bands))
            for a, b in resistors
        ]
        traces.append(_line_trace(bands, colour, body_width, f"Band {i + 1}"))
    return traces


def _base_layout(view: FrameView, config: Config, title: str) -> dict:
    axis = dict(visible=False, showgrid=False, zeroline=False, fixedrange=True)
    return dict(
        title=title,
        width=view.canvas_width,
        height=view.canvas_height,
        plot_bgcolor=f"#{config.bg_colour}",
        paper_bgcolor=f"#{config.bg_colour}",
        margin=dict(l=0, r=0, t=40, b=0),
        xaxis=dict(axis, range=[0, view.canvas_width]),
        # Canvas y grows downwards.
        yaxis=dict(axis, range=[view.canvas_height, 0]),
    )


def render_frame(view: FrameView, config: Config) -> go.Figure:
    """Render a single frame view to a figure."""
    fig = go.Figure(data=frame_traces(view, config))
    fig.update_layout(**_base_layout(view, config, "Circuit Board"))
    return fig


def render_animation(
    views: list[FrameView],
    config: Config,
    output_path: str | Path | None,
    fps: float = 30.0,
    open_browser: bool = False,
) -> go.Figure:
    """Render frame views as an animated figure, optionally writing it to HTML."""
    if not views:
        raise ValueError("render_animation needs at least one frame")

    frame_ms = 1000.0 / fps
    frames = [
        go.Frame(data=frame_traces(view, config), name=str(i)) for i, view in enumerate(views)
    ]
    fig = go.Figure(data=frames[0].data, frames=frames)
    fig.update_layout(**_base_layout(views[0], config, f"Circuit Board - {len(views)} frames"))
    fig.update_layout(
        updatemenus=[
            dict(
                type="buttons",
                showactive=False,
                buttons=[
                    dict(
                        label="Play",
                        method="animate",
                        args=[None, dict(frame=dict(duration=frame_ms, redraw=True), fromcurrent=True)],
                    ),
                    dict(
                        label="Pause",
                        method="animate",
                        args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate")],
                    ),
                ],
            )
        ],
        sliders=[
            dict(
                steps=[
                    dict(
                        method="animate",
                        label=f.name,
                        args=[[f.name], dict(frame=dict(duration=0, redraw=True), mode="immediate")],
                    )
                    for f in frames
                ],
            )
        ],
    )

    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(output_path))
        if open_browser:
            import webbrowser

            webbrowser.open(f"file://{output_path.resolve()}")

    return fig
