# =============================================================================
# Aggregate views - pure derivations of (Dataset, SelectionStore, search text)
# =============================================================================
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pandas as pd

from .config import CONTINENT_ORDER, UNKNOWN_CONTINENT
from .data import CountryRecord, Dataset


@dataclass(frozen=True)
class GlobalStats:
    countries: int
    videos: int
    first: Optional[pd.Timestamp]
    last: Optional[pd.Timestamp]


@dataclass(frozen=True)
class ChecklistItem:
    name: str
    count: int
    checked: bool


def global_stats(dataset: Dataset) -> GlobalStats:
    """Whole-dataset figures; the selection does not affect them."""
    dates = dataset.videos["published_at"].dropna()
    return GlobalStats(
        countries=len(dataset.records),
        videos=dataset.total_videos,
        first=dates.min() if not dates.empty else None,
        last=dates.max() if not dates.empty else None,
    )


def continent_summary(dataset: Dataset) -> List[Tuple[str, int]]:
    continents = pd.Series([r.continent for r in dataset.records], dtype=object)
    continents = continents.where(continents.isin(CONTINENT_ORDER), UNKNOWN_CONTINENT)
    counts = continents.value_counts()
    return [(c, int(counts[c])) for c in CONTINENT_ORDER if counts.get(c, 0) > 0]


def country_checklist(dataset: Dataset, selection, search: Optional[str] = "") -> List[ChecklistItem]:
    needle = (search or "").strip().lower()
    return [
        ChecklistItem(name=s.name, count=s.count, checked=s.name in selection)
        for s in dataset.summaries
        if needle in s.name.lower()
    ]


def filtered_results(dataset: Dataset, selection) -> List[CountryRecord]:
    # records are already alphabetical
    return [r for r in dataset.records if r.country in selection]


def filtered_timeline(dataset: Dataset, selection) -> pd.DataFrame:
    """Videos of the selected countries, merged across countries by publish date."""
    videos = dataset.videos
    picked = videos[videos["country"].isin(list(selection))]
    return picked.sort_values("published_at", kind="mergesort", na_position="last").reset_index(drop=True)
