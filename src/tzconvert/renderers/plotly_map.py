"""Plotly geo map of the source and target locations.

Natural earth projection centred on the Greenwich meridian; markers carry
the city label and IANA zone as hover text.
"""

import plotly.graph_objects as go

from tzconvert.models import City

_BG = "#0d1b35"
_SOURCE_COLOR = "#f0e0b0"
_TARGET_COLOR = "#7ec8e3"
_LAND_COLOR = "#1a2f55"


def _trace(cities: list[City], color: str, size: int, name: str) -> go.Scattergeo:
    return go.Scattergeo(
        lat=[c.lat for c in cities],
        lon=[c.lng for c in cities],
        text=[f"{c.label} ({c.timezone})" for c in cities],
        mode="markers",
        marker=dict(size=size, color=color, line=dict(width=0)),
        hoverinfo="text",
        name=name,
    )


def render_location_map(source: City | None, targets: list[City]) -> go.Figure:
    """Render the selected locations as a Plotly Scattergeo figure.

    The source city (if any) is drawn larger in gold, targets in cyan. Lines
    connect the source to each target.

    Args:
        source: Source location, or None before one is chosen.
        targets: Target locations in display order.

    Returns:
        Plotly Figure object.
    """
    traces: list[go.Scattergeo] = []

    if source is not None:
        # Connector lines: single trace using None separators
        lat: list[float | None] = []
        lon: list[float | None] = []
        for target in targets:
            lat += [source.lat, target.lat, None]
            lon += [source.lng, target.lng, None]
        traces.append(
            go.Scattergeo(
                lat=lat,
                lon=lon,
                mode="lines",
                line=dict(color=_TARGET_COLOR, width=1),
                opacity=0.5,
                hoverinfo="skip",
                name="routes",
            )
        )

    traces.append(_trace(targets, _TARGET_COLOR, 8, "targets"))
    if source is not None:
        traces.append(_trace([source], _SOURCE_COLOR, 12, "source"))

    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        height=320,
        geo=dict(
            projection_type="natural earth",
            showland=True,
            landcolor=_LAND_COLOR,
            showocean=True,
            oceancolor=_BG,
            showcountries=True,
            countrycolor="#334466",
            coastlinecolor="#334466",
            bgcolor=_BG,
        ),
    )
    return fig
