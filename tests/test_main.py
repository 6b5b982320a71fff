import json
import logging
import os

import pytest

from booky import main as booky_main
from booky.app import BookyApp
from booky.config import settings


@pytest.fixture
def runs(monkeypatch):
    """Replace the event loop; records what each run saw on disk."""
    seen = []

    def fake_run(app):
        path = app.session.store.path
        seen.append({
            "session": app.session,
            "file_existed": os.path.exists(path),
        })

    monkeypatch.setattr(BookyApp, "run", fake_run)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    monkeypatch.setattr(settings, "config_dir", None)
    monkeypatch.setattr(settings, "log_file", None)
    return seen


def test_starts_with_fresh_store(tmp_path, runs):
    config_dir = tmp_path / "cfg"
    assert booky_main.main([str(config_dir)]) == 0

    assert len(runs) == 1
    assert runs[0]["file_existed"]
    assert runs[0]["session"].items == []
    assert runs[0]["session"].status is None
    with open(config_dir / "books.json", encoding="utf-8") as f:
        assert json.load(f) == []


def test_argument_overrides_configured_dir(tmp_path, runs, monkeypatch):
    monkeypatch.setattr(settings, "config_dir", str(tmp_path / "configured"))
    assert booky_main.main([str(tmp_path / "given")]) == 0
    assert runs[0]["session"].store.path == os.path.join(str(tmp_path / "given"), "books.json")
    assert not os.path.exists(tmp_path / "configured")


def test_configured_dir_without_argument(tmp_path, runs, monkeypatch):
    monkeypatch.setattr(settings, "config_dir", str(tmp_path / "configured"))
    assert booky_main.main([]) == 0
    assert runs[0]["session"].store.path == os.path.join(str(tmp_path / "configured"), "books.json")


def test_no_config_dir_exits_with_error(tmp_path, runs, monkeypatch, capsys):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(os.path, "expanduser", lambda p: p)
    monkeypatch.setattr(settings, "log_file", str(tmp_path / "booky.log"))

    assert booky_main.main([]) == 1
    assert "cannot resolve a config directory" in capsys.readouterr().err
    assert runs == []


def test_store_init_failure_warns_and_continues(tmp_path, runs, monkeypatch, capsys):
    # a plain file where the config directory should be
    blocker = tmp_path / "cfg"
    blocker.write_text("")
    monkeypatch.setattr(settings, "log_file", str(tmp_path / "booky.log"))

    assert booky_main.main([str(blocker)]) == 0
    assert "warning" in capsys.readouterr().err
    assert len(runs) == 1
    session = runs[0]["session"]
    assert session.items == []
    assert session.status.startswith("Warning:")
