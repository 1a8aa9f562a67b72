# =============================================================================
# Boundary-name -> dataset-name reconciliation
# =============================================================================
import json
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

# GeoJSON feature name -> canonical dataset name
DEFAULT_ALIASES = MappingProxyType({
    "United States of America": "United States",
    "Russian Federation": "Russia",
    "Czechia": "Czech Republic",
    "Côte d'Ivoire": "Ivory Coast",
    "Democratic Republic of the Congo": "DR Congo",
    "Republic of the Congo": "Congo",
    "Viet Nam": "Vietnam",
    "Lao People's Democratic Republic": "Laos",
    "Bolivia (Plurinational State of)": "Bolivia",
    "Iran (Islamic Republic of)": "Iran",
    "Syrian Arab Republic": "Syria",
    "Türkiye": "Turkey",
})


def load_alias_file(path) -> Mapping[str, str]:
    """Read an optional {external name: canonical name} JSON object. Missing file -> empty."""
    path = Path(path)
    if not path.exists():
        return {}
    extra = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(extra, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in extra.items()):
        raise ValueError(f"{path} must be a JSON object mapping names to names")
    print(f"Loaded {len(extra)} aliases from {path}")
    return extra


class AliasResolver:
    """Maps boundary-dataset names onto the dataset's canonical country names.

    Exact names win; otherwise the alias table is consulted. The table is
    read-only once built; `extra` entries override the defaults.
    """

    def __init__(self, known_names: Iterable[str], aliases: Mapping[str, str] = DEFAULT_ALIASES,
                 extra: Optional[Mapping[str, str]] = None):
        self.known = frozenset(known_names)
        table = dict(aliases)
        table.update(extra or {})
        self.aliases = MappingProxyType(table)

    def resolve_canonical(self, external_name) -> Optional[str]:
        if external_name in self.known:
            return external_name
        return self.aliases.get(external_name)

    def is_visited_by_alias(self, external_name, selection) -> bool:
        canonical = self.resolve_canonical(external_name)
        return canonical is not None and canonical in selection
