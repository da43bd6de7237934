"""Tests for the command-line interface."""

import io
import json

import httpx
import pytest
from rich.console import Console

from elibrary_scraper.interfaces.cli import cli

from conftest import search_page

DETAIL_URL = "https://www.gsaelibrary.gsa.gov/ElibMain/contractorInfo.do?id=42"


def _site(request):
    if request.url.path == "/ElibMain/searchResults.do":
        if request.url.params["searchText"] == "GS-35F-0119Y":
            return httpx.Response(200, text=search_page("contractorInfo.do?id=42"))
        return httpx.Response(200, text=search_page())
    return httpx.Response(200, text="<html><body>Acme Corp</body></html>")


@pytest.fixture
def output(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buffer, width=200, color_system=None))
    return buffer


@pytest.fixture
def site(monkeypatch):
    monkeypatch.setattr(
        cli,
        "_create_http_client",
        lambda settings: httpx.AsyncClient(transport=httpx.MockTransport(_site)),
    )


def test_help(output):
    assert cli.main(["--help"]) == 0
    assert "elibrary-scraper" in output.getvalue()


def test_no_arguments_prints_help(output):
    assert cli.main([]) == 0
    assert "Usage" in output.getvalue()


def test_prints_resolved_url(site, output):
    assert cli.main(["GS-35F-0119Y"]) == 0
    text = output.getvalue()
    assert DETAIL_URL in text
    assert "Acme Corp" not in text


def test_html_flag_fetches_page(site, output):
    assert cli.main(["--html", "GS-35F-0119Y"]) == 0
    assert "<html><body>Acme Corp</body></html>" in output.getvalue()


def test_json_output(site, output):
    assert cli.main(["--json", "--html", "GS-35F-0119Y"]) == 0
    payload = json.loads(output.getvalue())
    assert payload == {
        "contract": "GS-35F-0119Y",
        "url": DETAIL_URL,
        "html": "<html><body>Acme Corp</body></html>",
    }


def test_json_output_without_html(site, output):
    assert cli.main(["--json", "GS-35F-0119Y"]) == 0
    assert json.loads(output.getvalue()) == {"contract": "GS-35F-0119Y", "url": DETAIL_URL}


def test_unknown_contract_exits_with_error(site, output):
    assert cli.main(["NOT-A-REAL-CONTRACT"]) == 1
    assert "no results for NOT-A-REAL-CONTRACT" in output.getvalue()


def test_transport_error_exits_with_error(monkeypatch, output):
    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(
        cli,
        "_create_http_client",
        lambda settings: httpx.AsyncClient(transport=httpx.MockTransport(_refuse)),
    )

    assert cli.main(["GS-35F-0119Y"]) == 1
    assert "connection refused" in output.getvalue()


def test_missing_contract_after_flag(output):
    assert cli.main(["--json"]) == 1
    assert "cannot be empty" in output.getvalue()


def test_help_notes_blank_contract_handling(output):
    assert cli.main(["--help"]) == 0
    text = output.getvalue()
    assert "blank contract is rejected" in text
    assert "as-is" in text
