import json

import pytest
from dash import no_update

from worldtour.config import (MAP_BORDER, MAP_BORDER_WEIGHT, MAP_HOVER_WEIGHT, UNVISITED_FILL, UNVISITED_OPACITY,
                              VISITED_FILL, VISITED_OPACITY)
from worldtour.mapview import (GeoLoadError, build_map_figure, click_target, feature_names, feature_style,
                               handle_map_click, hover_line_widths, hover_patch, hovered_locations, load_geojson)


def test_feature_style_direct_alias_and_unknown(resolver, store):
    for name in ["Brazil", "Russian Federation", "United States of America"]:
        style = feature_style(name, resolver, store)
        assert (style["fillColor"], style["fillOpacity"]) == (VISITED_FILL, VISITED_OPACITY)
    style = feature_style("France", resolver, store)
    assert (style["fillColor"], style["fillOpacity"]) == (UNVISITED_FILL, UNVISITED_OPACITY)
    assert (style["color"], style["weight"]) == (MAP_BORDER, MAP_BORDER_WEIGHT)


def test_map_figure_follows_selection(geojson, resolver, store):
    store.clear()
    store.toggle("Russia")
    fig = build_map_figure(geojson, resolver, store)
    trace = fig.data[0]
    assert list(trace.locations) == ["Brazil", "Russian Federation", "United States of America", "France"]
    assert [int(z) for z in trace.z] == [0, 1, 0, 0]
    assert trace.featureidkey == "properties.name"

    store.select_all()
    fig = build_map_figure(geojson, resolver, store)
    assert [int(z) for z in fig.data[0].z] == [1, 1, 1, 0]


def test_map_unavailable(resolver, store):
    fig = build_map_figure(None, resolver, store)
    assert len(fig.data) == 0
    assert "Map unavailable" in fig.layout.annotations[0].text


def test_click_toggles_through_alias(resolver, store):
    assert handle_map_click(store, resolver, "Russian Federation")
    assert "Russia" not in store
    assert handle_map_click(store, resolver, "Russian Federation")
    assert "Russia" in store


def test_click_on_unmatched_feature_is_noop(resolver, store):
    before = store.to_data()
    assert not handle_map_click(store, resolver, "France")
    assert not handle_map_click(store, resolver, None)
    assert store.to_data() == before


def test_click_and_hover_payloads():
    click = {"points": [{"curveNumber": 0, "location": "Brazil"}]}
    assert click_target(click) == "Brazil"
    assert click_target(None) is None
    assert click_target({"points": []}) is None

    assert hovered_locations(click) == {"Brazil"}
    assert hovered_locations(None) == set()
    assert hover_line_widths(["France", "Brazil"], {"Brazil"}) == [MAP_BORDER_WEIGHT, MAP_HOVER_WEIGHT]


# -----------------------------
# LOAD
# -----------------------------
def test_load_local_geojson_drops_unnamed(tmp_path, geojson, capsys):
    geojson["features"].append({"type": "Feature", "properties": {}, "geometry": None})
    path = tmp_path / "g.json"
    path.write_text(json.dumps(geojson), encoding="utf-8")
    loaded = load_geojson(str(path))
    assert feature_names(loaded) == ["Brazil", "Russian Federation", "United States of America", "France"]
    assert "[WARN] Dropping 1 boundary features" in capsys.readouterr().out


def test_not_a_feature_collection(tmp_path):
    path = tmp_path / "g.json"
    path.write_text(json.dumps({"type": "Feature"}), encoding="utf-8")
    with pytest.raises(GeoLoadError):
        load_geojson(str(path))


def test_url_fetch_is_cached(tmp_path, geojson, fake_get, response):
    url = "https://example.org/countries.geo.json"
    cache = tmp_path / "cache" / "countries.geo.json"
    fake_get.responses[url] = response(geojson)

    first = load_geojson(url, cache)
    second = load_geojson(url, cache)
    assert fake_get.calls == [url]
    assert cache.exists()
    assert feature_names(first) == feature_names(second)


def test_fetch_failure_raises(tmp_path, fake_get, response):
    url = "https://example.org/countries.geo.json"
    fake_get.responses[url] = response(status=500)
    with pytest.raises(GeoLoadError):
        load_geojson(url, tmp_path / "countries.geo.json")


def test_map_trace_uses_feature_styles(geojson, resolver, store):
    trace = build_map_figure(geojson, resolver, store).data[0]
    off = feature_style("France", resolver, store)
    on = feature_style("Brazil", resolver, store)
    assert [list(stop) for stop in trace.colorscale] == [
        [0, f"rgba(11,17,32,{off['fillOpacity']})"],
        [1, f"rgba(52,211,153,{on['fillOpacity']})"],
    ]
    assert (trace.marker.line.color, trace.marker.line.width) == (off["color"], off["weight"])


def test_hover_patch_sets_border_widths():
    names = ["France", "Brazil"]
    ops = hover_patch(names, {"points": [{"curveNumber": 0, "location": "Brazil"}]}).to_plotly_json()["operations"]
    assert len(ops) == 1
    assert ops[0]["location"] == ["data", 0, "marker", "line", "width"]
    assert ops[0]["params"]["value"] == [MAP_BORDER_WEIGHT, MAP_HOVER_WEIGHT]

    cleared = hover_patch(names, None).to_plotly_json()["operations"]
    assert cleared[0]["params"]["value"] == [MAP_BORDER_WEIGHT, MAP_BORDER_WEIGHT]


def test_hover_patch_without_map():
    assert hover_patch([], {"points": [{"location": "Brazil"}]}) is no_update
