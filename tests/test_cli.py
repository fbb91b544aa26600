"""
Tests for the command-line front end.
"""

import json
from unittest.mock import patch

import pytest
import requests

from mangafire import cli

from conftest import BASE, CATALOG_HTML, DETAIL_HTML, FakeSession, SINGLE_CHAPTER_HTML

pytestmark = pytest.mark.integration


def run_cli(argv, routes):
    session = FakeSession(routes)
    with patch("mangafire.web_scraping.requests.get", side_effect=session.get):
        code = cli.main(argv)
    return code, session


def test_catalog_command_prints_json(capsys):
    code, session = run_cli(["catalog", "2"], {f"{BASE}/home?sort=popular&page=2": CATALOG_HTML})

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert [entry['id'] for entry in output['entries']] == ["one-piece", "naruto"]
    assert output['has_more'] is True


def test_catalog_defaults_to_first_page(capsys):
    code, session = run_cli(["catalog"], {f"{BASE}/home?sort=popular&page=1": CATALOG_HTML})

    assert code == 0
    assert session.requested_urls == [f"{BASE}/home?sort=popular&page=1"]


def test_detail_command(capsys):
    code, _ = run_cli(["--timeout", "2", "detail", "one-piece"], {f"{BASE}/manga/one-piece": DETAIL_HTML})

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output['author'] == "Eiichiro Oda"
    assert output['page_url'] == f"{BASE}/manga/one-piece"


def test_resolve_command_chapter(capsys):
    code, _ = run_cli(
        ["resolve", "https://mangafire.to/chapter/one-piece-ch-5"],
        {f"{BASE}/manga/one-piece-ch-5/chapters": SINGLE_CHAPTER_HTML},
    )

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output['title'] is None
    assert output['chapter']['id'] == "one-piece-ch-5"


def test_fetch_error_exits_with_status_one(capsys):
    code, _ = run_cli(
        ["pages", "broken"],
        {f"{BASE}/chapter/broken": requests.exceptions.ConnectionError("refused")},
    )

    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error:" in captured.err


def test_rejects_page_zero():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["catalog", "0"])


@pytest.mark.parametrize("timeout", ["0", "-1", "soon"])
def test_rejects_bad_timeout(timeout, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--timeout", timeout, "detail", "x"])

    assert excinfo.value.code == 2
    assert "--timeout" in capsys.readouterr().err


def test_accepts_fractional_timeout():
    args = cli.build_parser().parse_args(["--timeout", "0.5", "pages", "c1"])
    assert args.timeout == 0.5
