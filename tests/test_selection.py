from worldtour.selection import SelectionStore

NAMES = ["Brazil", "Japan", "Russia"]


def test_defaults_to_everything():
    store = SelectionStore(NAMES)
    assert store.to_data() == NAMES
    assert len(store) == 3


def test_initial_selection_drops_unknown_names():
    store = SelectionStore(NAMES, ["Japan", "Atlantis"])
    assert store.to_data() == ["Japan"]


def test_toggle_twice_restores_membership():
    store = SelectionStore(NAMES)
    assert store.toggle("Japan")
    assert "Japan" not in store
    assert store.toggle("Japan")
    assert "Japan" in store


def test_toggle_unknown_is_ignored():
    store = SelectionStore(NAMES)
    assert not store.toggle("Atlantis")
    assert store.to_data() == NAMES


def test_select_all_and_clear():
    store = SelectionStore(NAMES, [])
    assert store.select_all()
    assert store.to_data() == NAMES
    assert not store.select_all()
    assert store.clear()
    assert store.to_data() == []
    assert not store.clear()


def test_set_from_checkbox_is_authoritative():
    store = SelectionStore(NAMES)
    assert not store.set_from_checkbox("Brazil", True)
    assert store.set_from_checkbox("Brazil", False)
    assert not store.set_from_checkbox("Brazil", False)
    assert "Brazil" not in store
    assert not store.set_from_checkbox("Atlantis", True)
    assert "Atlantis" not in store


def test_sync_visible_leaves_hidden_names_alone():
    store = SelectionStore(NAMES, ["Brazil", "Russia"])
    # only Japan is visible (search "jap") and the user ticked it
    assert store.sync_visible(["Japan"], ["Japan"])
    assert store.to_data() == NAMES
    assert not store.sync_visible(["Japan"], ["Japan"])
    assert store.sync_visible(["Japan"], None)
    assert store.to_data() == ["Brazil", "Russia"]
