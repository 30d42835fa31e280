"""
Tests for the web page.
"""


def test_get_renders_start_room(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Start Room" in response.data
    assert b"No commands yet." in response.data
    assert b"Empty" in response.data


def test_get_does_not_log(client):
    client.get("/")
    response = client.get("/")
    assert b"No commands yet." in response.data


def test_post_command(client):
    response = client.post("/", data={"command": "take key"})
    assert response.status_code == 200
    assert b"You pick up the key." in response.data
    assert b"take key" in response.data

    response = client.post("/", data={"command": "go north"})
    assert b"Hallway" in response.data
    assert b"You go north." in response.data


def test_echoes_raw_input(client):
    response = client.post("/", data={"command": "  LOOK  "})
    assert b'value="  LOOK  "' in response.data


def test_empty_post(client):
    response = client.post("/", data={"command": "   "})
    assert b"Type a command (try &#39;help&#39;)." in response.data
    assert b"No commands yet." in response.data


def test_missing_field(client):
    response = client.post("/", data={})
    assert response.status_code == 200
    assert b"No commands yet." in response.data


def test_user_text_is_escaped(client):
    response = client.post("/", data={"command": "<script>alert(1)</script>"})
    assert response.status_code == 200
    assert b"<script>" not in response.data
    assert b"&lt;script&gt;" in response.data


def test_unreachable_database(client, tmp_path):
    from app import app
    app.config["DATABASE"] = str(tmp_path / "missing" / "web.db")
    response = client.get("/")
    assert response.status_code == 500
    assert b"Database connection failed." in response.data


def test_winning_message_highlighted(client):
    response = client.post("/", data={"command": "take key"})
    assert b'class="win"' not in response.data
    client.post("/", data={"command": "go north"})
    response = client.post("/", data={"command": "go north"})
    assert b"Treasure Room" in response.data
    assert b'class="win"' in response.data
    assert b"The treasure is yours. You win!" in response.data


def test_recent_log_limit_on_page(client, monkeypatch):
    from app import app
    monkeypatch.setitem(app.config, "RECENT_LOG_LIMIT", 2)
    for cmd in ["alpha", "bravo", "charlie"]:
        response = client.post("/", data={"command": cmd})
    assert b"charlie" in response.data
    assert b"bravo" in response.data
    assert b"alpha" not in response.data


def test_database_path_override(tmp_path):
    from app import resolve_database_path
    environ = {
        "DATABASE_PATH": str(tmp_path / "explicit.db"),
        "PERSISTENT_DISK_PATH": str(tmp_path / "disk"),
    }
    assert resolve_database_path(environ) == str(tmp_path / "explicit.db")
    assert not (tmp_path / "disk").exists()


def test_database_path_on_persistent_disk(tmp_path):
    from app import resolve_database_path
    disk = tmp_path / "disk"
    path = resolve_database_path({"PERSISTENT_DISK_PATH": str(disk)})
    assert path == str(disk / "adventure.db")
    assert disk.is_dir()


def test_database_path_default():
    from app import resolve_database_path
    assert resolve_database_path({}) == "adventure.db"


def test_read_log_limit():
    from app import read_log_limit
    assert read_log_limit(None) == 8
    assert read_log_limit("") == 8
    assert read_log_limit("3") == 3
    assert read_log_limit("lots") == 8
    assert read_log_limit("0") == 8
