from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

The real collaborators are replaced by fakes so the controller's exit
codes and reporting can be checked without external tools.
"""

import json

import pytest

from fuzzel_pass.domain.constants import EXIT_CANCELLED, EXIT_FAILURE, EXIT_OK
from fuzzel_pass.interface.cli import app


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def patched_app(monkeypatch, make_collaborators):
    """Route build_collaborators to the shared fakes."""
    def _patch(answers):
        bundle = make_collaborators(answers)
        monkeypatch.setattr(app, "build_collaborators", lambda cfg: bundle[0])
        return bundle
    return _patch


def test_app_delivers_and_exits_zero(patched_app):
    _, _, _, clipboard, _ = patched_app(["Email/work.com", "url"])

    assert app.main(["--use-defaults"]) == EXIT_OK
    assert clipboard.values == ["example.com"]


def test_app_type_flag_uses_type_sink(patched_app):
    _, _, _, clipboard, typer = patched_app(["Email/work.com", "username"])

    assert app.main(["--use-defaults", "--type"]) == EXIT_OK
    assert typer.values == ["alice"]
    assert clipboard.values == []


def test_app_cancel_exit_code(patched_app):
    patched_app([None])

    assert app.main(["--use-defaults"]) == EXIT_CANCELLED


def test_app_policy_violation_exit_code(patched_app, capsys):
    _, _, _, _, typer = patched_app([])

    code = app.main(["--use-defaults", "-t", "-p", "Email/home.org", "-f", "notes"])

    assert code == EXIT_FAILURE
    assert typer.values == []
    assert "multi-line" in capsys.readouterr().err


def test_app_list_only_prints_paths(patched_app, capsys):
    patched_app([])

    assert app.main(["--use-defaults", "--list"]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out == ["Email/work.com", "Email/home.org", "Banking/cards/visa", "wifi"]


def test_app_dump_config_reads_config_file(tmp_path, capsys):
    cfg_file = tmp_path / "config.json"
    cfg_file.write_text(json.dumps({"picker_command": "rofi -dmenu", "type_mode": True}), encoding="utf-8")

    assert app.main(["--config", str(cfg_file), "--dump-config"]) == EXIT_OK
    dumped = json.loads(capsys.readouterr().out)
    assert dumped["picker_command"] == ["rofi", "-dmenu"]
    assert dumped["type_mode"] is True


def test_app_save_config_writes_effective_config(tmp_path):
    cfg_file = tmp_path / "saved" / "config.json"

    code = app.main(["--use-defaults", "--store-dir", "/srv/store", "--config", str(cfg_file), "--save-config"])

    assert code == EXIT_OK
    saved = json.loads(cfg_file.read_text(encoding="utf-8"))
    assert saved["password_store_dir"] == "/srv/store"
    assert saved["pass_command"] == ["pass"]


def test_app_save_config_defaults_to_user_dir(isolated_home):
    assert app.main(["--use-defaults", "--save-config"]) == EXIT_OK
    assert (isolated_home / ".fuzzel_pass" / "config.json").exists()


def test_app_reports_listing_failure(patched_app, capsys):
    collab, store, _, _, _ = patched_app([])
    store.listing = "Password Store\n"

    assert app.main(["--use-defaults", "--list"]) == EXIT_FAILURE
    assert "ERROR" in capsys.readouterr().err


def test_app_interrupt_exits_as_cancelled(monkeypatch):
    def interrupt(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(app, "build_collaborators", interrupt)

    assert app.main(["--use-defaults"]) == EXIT_CANCELLED
