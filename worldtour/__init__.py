"""
World Tour Dashboard

A traveller's country-by-country video log on a choropleth map, a checklist,
a results list and a timeline, kept in sync through one selection.
"""

__version__ = "0.1.0"

from .aliases import AliasResolver, DEFAULT_ALIASES
from .app import create_app
from .data import DataLoadError, load_dataset, normalize
from .mapview import GeoLoadError
from .selection import SelectionStore

__all__ = [
    "AliasResolver",
    "DEFAULT_ALIASES",
    "DataLoadError",
    "GeoLoadError",
    "SelectionStore",
    "create_app",
    "load_dataset",
    "normalize",
]
