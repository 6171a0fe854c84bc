"""Paint rendered primitives onto a plotly figure."""

from __future__ import annotations

import plotly.graph_objects as go

from .settings import DEFAULT_SETTINGS, LayoutSettings
from .timeline import RenderResult

__all__ = ["build_figure"]

CURVE_SAMPLES = 24


def build_figure(
    result: RenderResult,
    *,
    settings: LayoutSettings | None = None,
    title: str | None = None,
) -> go.Figure:
    settings = settings or DEFAULT_SETTINGS
    fig = go.Figure()
    if not result.primitives:
        fig.add_annotation(text="No beats yet", showarrow=False, font=dict(color="#94a3b8", size=18))
        fig.update_layout(height=220, xaxis=dict(visible=False), yaxis=dict(visible=False))
        return fig

    # Traces are painted in insertion order, which keeps each halo underneath its line.
    for (beat_index, entity), primitive in zip(result.origins, result.primitives):
        points = primitive.sample(CURVE_SAMPLES if primitive.kind == "bezier" else 2)
        line_trace = not primitive.is_halo
        fig.add_trace(
            go.Scatter(
                x=points[:, 0],
                y=points[:, 1],
                mode="lines",
                line=dict(color=primitive.stroke.color.hex, width=primitive.stroke.width),
                name=entity,
                hovertemplate=f"{entity}<br>Beat {beat_index}<extra></extra>" if line_trace else None,
                hoverinfo=None if line_trace else "skip",
                showlegend=False,
            )
        )

    fig.update_layout(
        title=title,
        height=max(240, int(result.height * 1.5)),
        width=max(480, int(result.width * 1.5)),
        template="plotly_dark",
        plot_bgcolor=settings.background,
        paper_bgcolor=settings.background,
        xaxis=dict(visible=False, range=[0, result.width]),
        yaxis=dict(visible=False, range=[result.height, 0]),
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
    )
    return fig
