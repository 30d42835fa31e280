import pytest

from core.state_manager import GameStateStore, StoreUnavailable


def test_player_created_on_first_access(store):
    player = store.get_player()
    assert player.location == "start"
    assert player.health == 100
    # Second read returns the same record rather than a new one
    assert store.get_player().id == player.id


def test_set_location(store):
    store.get_player()
    assert store.set_location("hallway")
    assert store.get_player().location == "hallway"


def test_inventory_is_a_set(store):
    assert store.add_item("key")
    assert not store.add_item("key")
    assert store.list_inventory() == ["key"]


def test_inventory_sorted_by_name(store):
    store.add_item("key")
    store.add_item("coin")
    assert store.list_inventory() == ["coin", "key"]


def test_remove_item(store):
    store.add_item("coin")
    assert store.has_item("coin")
    assert store.remove_item("coin")
    assert not store.has_item("coin")
    assert store.list_inventory() == []


def test_recent_log_newest_first(store):
    for cmd in ["look", "help", "go north"]:
        store.log_command(cmd)
    log = store.get_recent_log()
    assert [entry.command_text for entry in log] == ["go north", "help", "look"]
    assert all(entry.created_at for entry in log)


def test_recent_log_limit(store):
    for i in range(12):
        store.log_command(f"cmd {i}")
    assert len(store.get_recent_log()) == 8
    assert len(store.get_recent_log(3)) == 3
    assert store.get_recent_log(1)[0].command_text == "cmd 11"


def test_clear(store):
    store.add_item("key")
    store.log_command("take key")
    assert store.clear_inventory()
    assert store.clear_log()
    assert store.list_inventory() == []
    assert store.get_recent_log() == []


def test_default_player_when_table_unreadable(store):
    store._conn.execute("DROP TABLE player")
    player = store.get_player()
    assert player.location == "start"
    assert player.health == 100


def test_failed_write_returns_false(store):
    store._conn.execute("DROP TABLE inventory")
    assert not store.add_item("key")
    assert not store.has_item("key")
    assert store.list_inventory() == []


def test_unreachable_database(tmp_path):
    with pytest.raises(StoreUnavailable):
        GameStateStore.open(str(tmp_path / "missing" / "game.db"))
