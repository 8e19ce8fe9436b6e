"""Unit tests for the command-line entry point."""

import json
from unittest.mock import AsyncMock

import pytest

import cli
import config
from html_builders import level_anchor, progress_page
from infrastructure.parsers import ProgressPageParser
from services import ProgressService


@pytest.fixture
def http_client(monkeypatch, tmp_path):
    client = AsyncMock()
    monkeypatch.setattr(config, "SESSION_ID", None)
    monkeypatch.setattr(config, "SESSION_FILE", str(tmp_path / "PHPSESSID"))
    monkeypatch.setattr(
        cli,
        "create_progress_service",
        lambda: ProgressService(http_client=client, page_parser=ProgressPageParser()),
    )
    return client


def test_prints_summary(http_client, sample_page, capsys):
    http_client.get_text.return_value = sample_page

    assert cli.main(["abc123"]) == 0

    out = capsys.readouterr().out
    assert "Levels completed: 2/3" in out
    assert "[x] Level 1: Solve 25 problems" in out
    assert "[ ] Level 3: Solve 75 problems" in out
    assert "Problems solved: 3/5" in out
    assert "1, 2, 4" in out


def test_prints_json(http_client, sample_page, capsys):
    http_client.get_text.return_value = sample_page

    assert cli.main(["abc123", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["problems"] == [True, True, False, True, False]
    assert data["levels"][2] == {"number": 3, "description": "Solve 75 problems", "completed": False}


def test_session_from_file(http_client, sample_page, tmp_path):
    (tmp_path / "PHPSESSID").write_text("file-session\n", encoding="utf-8")
    http_client.get_text.return_value = sample_page

    assert cli.main([]) == 0
    assert http_client.get_text.await_args.kwargs["cookies"] == {"PHPSESSID": "file-session"}


def test_missing_session_fails(http_client):
    assert cli.main([]) == 1
    http_client.get_text.assert_not_called()


def test_format_drift_fails(http_client):
    http_client.get_text.return_value = progress_page(level_anchor(2), "")

    assert cli.main(["abc123"]) == 1


def test_too_many_arguments(http_client):
    assert cli.main(["one", "two"]) == 2
