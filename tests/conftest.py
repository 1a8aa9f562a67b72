import json

import pytest

from worldtour.aliases import AliasResolver
from worldtour.data import normalize
from worldtour.selection import SelectionStore


@pytest.fixture
def raw_scenario():
    return [
        {"country": "Brazil", "continent": "South America",
         "videos": [{"title": "A", "url": "u1", "publishedAt": "2025-08-01T00:00:00Z"}]},
        {"country": "Japan", "continent": "Asia", "videos": []},
    ]


@pytest.fixture
def dataset(raw_scenario):
    return normalize(raw_scenario)


@pytest.fixture
def raw_tour():
    return [
        {"country": "Russia", "continent": "Europe", "videos": [
            {"title": "Moscow 2", "url": "r2", "publishedAt": "2025-05-12T15:00:00Z"},
            {"title": "Moscow 1", "url": "r1", "publishedAt": "2025-05-10T18:30:00Z"},
        ]},
        {"country": "Brazil", "continent": "South America", "videos": [
            {"title": "Rio", "url": "b1", "publishedAt": "2025-08-01T20:56:00Z"},
        ]},
        {"country": "United States", "continent": "North America", "videos": [
            {"title": "NYC", "url": "us1", "publishedAt": "2025-05-11T09:00:00Z"},
        ]},
        {"country": "Atlantis", "videos": []},
    ]


@pytest.fixture
def tour(raw_tour):
    return normalize(raw_tour)


@pytest.fixture
def store(tour):
    return SelectionStore(tour.names)


@pytest.fixture
def resolver(tour):
    return AliasResolver(tour.names)


def _feature(name):
    return {
        "type": "Feature",
        "properties": {"name": name},
        "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]},
    }


@pytest.fixture
def geojson():
    return {
        "type": "FeatureCollection",
        "features": [_feature(n) for n in ["Brazil", "Russian Federation", "United States of America", "France"]],
    }


@pytest.fixture
def data_file(tmp_path, raw_tour):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_tour), encoding="utf-8")
    return path


@pytest.fixture
def geojson_file(tmp_path, geojson):
    path = tmp_path / "countries.geo.json"
    path.write_text(json.dumps(geojson), encoding="utf-8")
    return path


class FakeResponse:
    def __init__(self, payload=None, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        import requests
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Error")

    def json(self):
        if isinstance(self.payload, str):
            return json.loads(self.payload)
        return self.payload


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; returns the list of requested URLs."""
    calls = []
    responses = {}

    def _get(url, timeout=None):
        calls.append(url)
        return responses[url]

    monkeypatch.setattr("requests.get", _get)
    _get.calls = calls
    _get.responses = responses
    return _get


@pytest.fixture
def response():
    return FakeResponse
