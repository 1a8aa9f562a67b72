"""
Dataset loading and normalisation
=================================

The visitor's log is a JSON array of country objects::

    [
      {
        "country": "Brazil",
        "continent": "South America",
        "videos": [
          {"title": "...", "url": "https://...", "publishedAt": "2025-08-01T20:56:00Z"}
        ]
      }
    ]

`load_dataset` reads it (local path or URL), sorts each country's videos by
publish date and derives one `CountrySummary` per country. Records are frozen:
the dashboard never edits the log, it only filters it.

Timestamps are parsed with pandas; anything unparseable becomes ``NaT``, sorts
after the valid dates and is shown as "–". No attempt is made to repair it.
"""

from __future__ import annotations

import json
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd
import requests

from .config import DATA_PATH, EMPTY_DATE, FETCH_TIMEOUT, UNKNOWN_CONTINENT

VIDEO_COLUMNS = ["country", "title", "url", "publishedAt"]


class DataLoadError(RuntimeError):
    """The dataset could not be fetched or is not a list of country objects."""


@dataclass(frozen=True)
class VideoEntry:
    title: str
    url: str
    published_at: pd.Timestamp   # NaT when the source timestamp is malformed


@dataclass(frozen=True)
class CountryRecord:
    """One country of the log; `videos` is ascending by publish date."""
    country: str
    continent: str
    videos: Tuple[VideoEntry, ...]


@dataclass(frozen=True)
class CountrySummary:
    name: str
    continent: str
    count: int
    first: Optional[pd.Timestamp]
    last: Optional[pd.Timestamp]


@dataclass(frozen=True, eq=False)
class Dataset:
    records: Tuple[CountryRecord, ...]        # alphabetical
    summaries: Tuple[CountrySummary, ...]     # alphabetical
    videos: pd.DataFrame                      # flat, chronological

    @property
    def names(self) -> List[str]:
        return [r.country for r in self.records]

    @property
    def total_videos(self) -> int:
        return sum(len(r.videos) for r in self.records)


# -----------------------------
# HELPERS
# -----------------------------
def name_sort_key(name: str):
    """Accent- and case-insensitive ordering for country names."""
    folded = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return (base.casefold(), name)


def fmt_date(value) -> str:
    if value is None:
        return EMPTY_DATE
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(ts):
        return EMPTY_DATE
    return f"{ts:%b} {ts.day}, {ts.year}"


def _is_url(source) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


# -----------------------------
# LOAD
# -----------------------------
def load_raw_dataset(source: Union[str, Path]) -> list:
    """Read the JSON array from a file path or an http(s) URL."""
    try:
        if _is_url(source):
            r = requests.get(source, timeout=FETCH_TIMEOUT)
            r.raise_for_status()
            raw = r.json()
        else:
            raw = json.loads(Path(source).read_text(encoding="utf-8"))
    except (OSError, ValueError, requests.RequestException) as e:
        raise DataLoadError(f"Could not load dataset from {source}: {e}") from e

    if not isinstance(raw, list):
        raise DataLoadError(f"Dataset {source} must be a JSON array of countries, got {type(raw).__name__}")
    return raw


def normalize(raw: list) -> Dataset:
    seen = set()
    countries = []
    rows = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("country"), str):
            raise DataLoadError(f"Entry {i} has no 'country' string: {item!r}")
        name = item["country"]
        if name in seen:
            print(f"[WARN] Duplicate country '{name}' at entry {i}; keeping the first one.")
            continue
        seen.add(name)
        countries.append((name, item.get("continent") or UNKNOWN_CONTINENT))
        for v in item.get("videos") or []:
            if not isinstance(v, dict):
                raise DataLoadError(f"Country '{name}' has a video that is not an object: {v!r}")
            rows.append({
                "country": name,
                "title": str(v.get("title") or ""),
                "url": str(v.get("url") or ""),
                "publishedAt": v.get("publishedAt"),
            })

    videos = pd.DataFrame(rows, columns=VIDEO_COLUMNS)
    videos["published_at"] = pd.to_datetime(videos["publishedAt"], utc=True, errors="coerce", format="ISO8601")
    # mergesort is stable: equal timestamps keep their source order
    videos = (videos.drop(columns=["publishedAt"])
                    .sort_values("published_at", kind="mergesort", na_position="last")
                    .reset_index(drop=True))

    by_country = {name: grp for name, grp in videos.groupby("country", sort=False)}
    records = []
    for name, continent in countries:
        grp = by_country.get(name)
        entries = () if grp is None else tuple(
            VideoEntry(title=t, url=u, published_at=p)
            for t, u, p in zip(grp["title"], grp["url"], grp["published_at"])
        )
        records.append(CountryRecord(country=name, continent=continent, videos=entries))
    records.sort(key=lambda r: name_sort_key(r.country))

    summaries = tuple(
        CountrySummary(
            name=r.country,
            continent=r.continent,
            count=len(r.videos),
            first=r.videos[0].published_at if r.videos else None,
            last=r.videos[-1].published_at if r.videos else None,
        )
        for r in records
    )
    return Dataset(records=tuple(records), summaries=summaries, videos=videos)


def load_dataset(source: Union[str, Path] = DATA_PATH) -> Dataset:
    dataset = normalize(load_raw_dataset(source))
    print(f"Loaded {source}: {len(dataset.records)} countries, {dataset.total_videos} videos")
    bad = int(dataset.videos["published_at"].isna().sum())
    if bad:
        print(f"  [WARN] {bad} videos with unparseable publishedAt, shown last without a date.")
    return dataset
