# =============================================================================
# Choropleth map: boundary loading, visited styling, click/hover forwarding
# =============================================================================
import json
from pathlib import Path

import numpy as np
import plotly.graph_objects as go
import requests
from dash import Patch, no_update

from .config import (BG, FETCH_TIMEOUT, GEOJSON_CACHE, GEOJSON_URL, MAP_BORDER, MAP_BORDER_WEIGHT,
                     MAP_HOVER_WEIGHT, TEXT, TEXT_DIM, UNVISITED_FILL, UNVISITED_OPACITY,
                     VISITED_FILL, VISITED_OPACITY)

MAP_TRACE = 0


class GeoLoadError(RuntimeError):
    """Country boundaries could not be fetched or are not a FeatureCollection."""


# -----------------------------
# LOAD
# -----------------------------
def _read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def _fetch(url: str, cache: Path):
    if cache is not None and cache.exists():
        return _read_json(cache)

    print("Downloading country borders GeoJSON...")
    r = requests.get(url, timeout=FETCH_TIMEOUT)
    r.raise_for_status()
    geojson = r.json()

    if cache is not None:
        try:
            cache.parent.mkdir(parents=True, exist_ok=True)
            cache.write_text(json.dumps(geojson), encoding="utf-8")
            print(f"Saved GeoJSON to {cache}")
        except OSError as e:
            print(f"[WARN] Could not cache GeoJSON at {cache}: {e}")
    return geojson


def load_geojson(source=GEOJSON_URL, cache=GEOJSON_CACHE) -> dict:
    """Return a FeatureCollection whose features all carry a string `properties.name`."""
    try:
        if isinstance(source, str) and source.startswith(("http://", "https://")):
            geojson = _fetch(source, Path(cache) if cache else None)
        else:
            geojson = _read_json(Path(source))
    except (OSError, ValueError, requests.RequestException) as e:
        raise GeoLoadError(f"Could not load boundaries from {source}: {e}") from e

    if not isinstance(geojson, dict) or geojson.get("type") != "FeatureCollection" \
            or not isinstance(geojson.get("features"), list):
        raise GeoLoadError(f"{source} is not a GeoJSON FeatureCollection")

    features = [f for f in geojson["features"]
                if isinstance(f, dict) and isinstance((f.get("properties") or {}).get("name"), str)]
    dropped = len(geojson["features"]) - len(features)
    if dropped:
        print(f"[WARN] Dropping {dropped} boundary features without a properties.name")
    return {**geojson, "features": features}


def feature_names(geojson) -> list:
    return [f["properties"]["name"] for f in geojson["features"]]


# -----------------------------
# STYLE
# -----------------------------
def _rgba(hex_color, alpha):
    return f"rgba({int(hex_color[1:3], 16)},{int(hex_color[3:5], 16)},{int(hex_color[5:7], 16)},{alpha})"


def is_visited(name, resolver, selection) -> bool:
    return name in selection or resolver.is_visited_by_alias(name, selection)


def _style(visited) -> dict:
    return {
        "color": MAP_BORDER,
        "weight": MAP_BORDER_WEIGHT,
        "fillColor": VISITED_FILL if visited else UNVISITED_FILL,
        "fillOpacity": VISITED_OPACITY if visited else UNVISITED_OPACITY,
    }


def feature_style(name, resolver, selection) -> dict:
    return _style(is_visited(name, resolver, selection))


def _unavailable_figure():
    fig = go.Figure()
    fig.add_annotation(text="Map unavailable: country boundaries could not be loaded.",
                       xref="paper", yref="paper", x=0.5, y=0.5, showarrow=False,
                       font=dict(size=14, color=TEXT_DIM))
    fig.update_layout(paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
                      xaxis=dict(visible=False), yaxis=dict(visible=False))
    return fig


def build_map_figure(geojson, resolver, selection):
    """Full restyle: every feature is recoloured from the current selection."""
    if geojson is None:
        return _unavailable_figure()

    names = feature_names(geojson)
    styles = [feature_style(n, resolver, selection) for n in names]
    visited = np.array([s["fillColor"] == VISITED_FILL for s in styles], dtype=bool)
    on, off = _style(True), _style(False)

    fig = go.Figure(go.Choropleth(
        geojson=geojson, locations=names, featureidkey="properties.name",
        z=np.where(visited, 1, 0), zmin=0, zmax=1,
        colorscale=[[0, _rgba(off["fillColor"], off["fillOpacity"])], [1, _rgba(on["fillColor"], on["fillOpacity"])]],
        showscale=False,
        marker_line_color=off["color"], marker_line_width=off["weight"],
        hovertemplate="<b>%{location}</b><extra></extra>",
    ))
    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0), paper_bgcolor="rgba(0,0,0,0)",
        geo_bgcolor="rgba(0,0,0,0)", uirevision="map",
        hoverlabel=dict(bgcolor="#15171c", font=dict(color=TEXT)),
    )
    fig.update_geos(showframe=False, showcoastlines=False, showcountries=False,
                    showland=True, landcolor="#1a1a1d", showocean=True, oceancolor=BG,
                    projection_type="natural earth")
    return fig


# -----------------------------
# EVENTS
# -----------------------------
def click_target(click_data):
    """Feature name under a map click, or None."""
    points = (click_data or {}).get("points") or []
    if not points:
        return None
    return points[0].get("location")


def hovered_locations(hover_data) -> set:
    return {p.get("location") for p in (hover_data or {}).get("points") or []
            if p.get("curveNumber", MAP_TRACE) == MAP_TRACE and p.get("location")}


def hover_line_widths(names, hovered) -> list:
    """Per-feature border widths with the hovered features emphasised."""
    return [MAP_HOVER_WEIGHT if n in hovered else MAP_BORDER_WEIGHT for n in names]


def hover_patch(names, hover_data):
    """Figure patch that only changes border widths; no_update when there is no map."""
    if not names:
        return no_update
    patched = Patch()
    patched["data"][MAP_TRACE]["marker"]["line"]["width"] = hover_line_widths(names, hovered_locations(hover_data))
    return patched


def handle_map_click(store, resolver, feature_name) -> bool:
    """Toggle the country behind a clicked feature. Unknown features change nothing."""
    if not feature_name:
        return False
    return store.toggle(resolver.resolve_canonical(feature_name) or feature_name)
