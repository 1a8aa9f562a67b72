"""Selected-country state shared by the checklist, the map and the filtered views."""

from typing import Iterable, Optional


class SelectionStore:
    """A set of canonical country names, always a subset of `known`.

    The dashboard keeps the set client-side as a sorted list (`to_data`) and
    rebuilds a store from it in each callback. Names outside `known` are
    ignored by every operation.
    """

    def __init__(self, known: Iterable[str], selected: Optional[Iterable[str]] = None):
        self.known = frozenset(known)
        if selected is None:
            self._selected = set(self.known)
        else:
            self._selected = {n for n in selected if n in self.known}

    def __contains__(self, name) -> bool:
        return name in self._selected

    def __iter__(self):
        return iter(sorted(self._selected))

    def __len__(self) -> int:
        return len(self._selected)

    def toggle(self, name) -> bool:
        """Flip membership of `name`. Returns False (and does nothing) for unknown names."""
        if name not in self.known:
            return False
        if name in self._selected:
            self._selected.remove(name)
        else:
            self._selected.add(name)
        return True

    def select_all(self) -> bool:
        changed = self._selected != self.known
        self._selected = set(self.known)
        return changed

    def clear(self) -> bool:
        changed = bool(self._selected)
        self._selected.clear()
        return changed

    def set_from_checkbox(self, name, checked: bool) -> bool:
        """Checkbox state is authoritative. Returns True if membership changed."""
        if name not in self.known or (name in self._selected) == bool(checked):
            return False
        if checked:
            self._selected.add(name)
        else:
            self._selected.discard(name)
        return True

    def sync_visible(self, visible: Iterable[str], checked: Iterable[str]) -> bool:
        """Apply a checklist value: every visible name is checked iff it is in `checked`."""
        checked = set(checked or [])
        changed = False
        for name in visible:
            changed |= self.set_from_checkbox(name, name in checked)
        return changed

    def to_data(self) -> list:
        return sorted(self._selected)
