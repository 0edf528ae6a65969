from __future__ import annotations

import logging
import os

import pytest

from maker_bridge.shared.env import load_secret_file_variables


def test_docker_secret_populates_access_token(tmp_path, monkeypatch):
    token_file = tmp_path / "hubitat_token"
    token_file.write_text("abcdef123456\n", encoding="utf-8")
    monkeypatch.setenv("HUBITAT_ACCESS_TOKEN_FILE", str(token_file))
    monkeypatch.delenv("HUBITAT_ACCESS_TOKEN", raising=False)

    resolved = load_secret_file_variables()

    assert "HUBITAT_ACCESS_TOKEN" in resolved
    assert os.environ["HUBITAT_ACCESS_TOKEN"] == "abcdef123456"
    monkeypatch.delenv("HUBITAT_ACCESS_TOKEN")


def test_explicit_mapping_is_updated_in_place(tmp_path):
    auth_file = tmp_path / "workflow_auth"
    auth_file.write_text("bearer", encoding="utf-8")
    environ = {
        "WORKFLOW_AUTH_TOKEN_FILE": str(auth_file),
        "HUBITAT_HOST": "http://192.168.1.100",
    }

    assert load_secret_file_variables(environ) == ["WORKFLOW_AUTH_TOKEN"]
    assert environ["WORKFLOW_AUTH_TOKEN"] == "bearer"


def test_value_already_set_wins_over_file():
    environ = {
        "HUBITAT_APP_ID": "12345",
        "HUBITAT_APP_ID_FILE": "/run/secrets/never-read",
    }

    assert load_secret_file_variables(environ) == []
    assert environ["HUBITAT_APP_ID"] == "12345"


def test_empty_file_path_is_ignored():
    environ = {"WORKFLOW_AUTH_TOKEN_FILE": ""}

    assert load_secret_file_variables(environ) == []
    assert "WORKFLOW_AUTH_TOKEN" not in environ


def _write_binary(path):
    path.write_bytes(b"\xff\xfe\xfd")
    return str(path)


@pytest.mark.parametrize(
    "make_path, expected_event",
    [
        (lambda tmp: str(tmp / "absent"), "env.secret_file.missing"),
        (lambda tmp: _write_binary(tmp / "token.bin"), "env.secret_file.decode_failed"),
        (lambda tmp: str(tmp), "env.secret_file.load_failed"),
    ],
    ids=["missing", "not-utf8", "directory"],
)
def test_unreadable_secret_is_logged_and_skipped(
    tmp_path, caplog, make_path, expected_event
):
    environ = {"HUBITAT_ACCESS_TOKEN_FILE": make_path(tmp_path)}

    with caplog.at_level(logging.WARNING, logger="maker_bridge.shared.env"):
        resolved = load_secret_file_variables(environ)

    assert resolved == []
    assert "HUBITAT_ACCESS_TOKEN" not in environ
    assert [record.message for record in caplog.records] == [expected_event]
