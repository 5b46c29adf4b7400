import io
import json
import os

import credstore_cli
from credstore import Entry, EntryStore
from credstore.clipboard import ClipboardError


def seed(path):
    store = EntryStore.open(path)
    store.add_and_persist(Entry("github", "alice", "hunter2"))
    store.add_and_persist(Entry("email", "bob", "abc123"))


def test_init_creates_store(store_path, capsys):
    assert credstore_cli.main(["--path", store_path, "init"]) == 0
    assert os.path.exists(store_path)
    assert "0 entries" in capsys.readouterr().out


def test_list(store_path, capsys):
    seed(store_path)
    assert credstore_cli.main(["--path", store_path, "list"]) == 0
    out = capsys.readouterr().out
    assert out == "Service: email, Username: bob\nService: github, Username: alice\n"


def test_get_copies_password(store_path, mocker, capsys):
    seed(store_path)
    copy = mocker.patch("credstore_cli.copy_to_clipboard")
    assert credstore_cli.main(["--path", store_path, "get", "github"]) == 0
    copy.assert_called_once_with("hunter2")
    assert "hunter2" not in capsys.readouterr().out


def test_get_missing_service(store_path, capsys):
    seed(store_path)
    assert credstore_cli.main(["--path", store_path, "get", "nothing"]) == 1
    assert "Could not find an entry" in capsys.readouterr().err


def test_get_without_service(store_path, capsys):
    assert credstore_cli.main(["--path", store_path, "get"]) == 1
    assert "Usage: get <service>" in capsys.readouterr().err


def test_get_clipboard_unavailable(store_path, mocker, capsys):
    seed(store_path)
    mocker.patch("credstore_cli.copy_to_clipboard", side_effect=ClipboardError("headless"))
    assert credstore_cli.main(["--path", store_path, "get", "github"]) == 1
    assert "Clipboard unavailable: headless" in capsys.readouterr().err


def test_malformed_store_aborts_startup(store_path, capsys):
    with open(store_path, "w") as f:
        f.write("{broken")
    assert credstore_cli.main(["--path", store_path, "list"]) == 1
    assert "not a valid entry document" in capsys.readouterr().err


def test_dialog_is_default_command(store_path, mocker, capsys):
    mocker.patch("sys.stdin", io.StringIO("1\n1\ngithub\nalice\nq\n"))
    assert credstore_cli.main(["--path", store_path]) == 0
    with open(store_path) as f:
        assert json.load(f)["github"]["username"] == "alice"
    assert "Bye!" in capsys.readouterr().out


def test_path_defaults_to_env(store_path, monkeypatch, capsys):
    monkeypatch.setenv("CREDSTORE_PATH", store_path)
    assert credstore_cli.main(["init"]) == 0
    assert os.path.exists(store_path)
    assert store_path in capsys.readouterr().out


def test_path_option_overrides_env(tmp_dir, store_path, monkeypatch):
    other = os.path.join(tmp_dir, "other.json")
    monkeypatch.setenv("CREDSTORE_PATH", other)
    assert credstore_cli.main(["--path", store_path, "init"]) == 0
    assert os.path.exists(store_path)
    assert not os.path.exists(other)
