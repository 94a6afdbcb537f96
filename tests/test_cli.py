"""Tests for the ``scrape`` CLI command."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cli.main import app
from pagescraper.scraper.errors import FetchError, ParseError
from pagescraper.scraper.models import ScrapeResult
from pagescraper.scraper.output import render_report

runner = CliRunner()

_RESULT = ScrapeResult(
    links=("http://x.com",),
    texts=("Hi there",),
    images=("a.png",),
)


@pytest.fixture
def output_file(tmp_path, monkeypatch):
    """Point the default save target into the test's tmp dir."""
    target = tmp_path / "output.txt"
    monkeypatch.setattr("cli.main.settings.output_file", target)
    return target


def test_missing_url_fails_before_fetch(output_file):
    with patch("cli.main.scrape_page") as mock_scrape:
        result = runner.invoke(app, ["scrape"])

    assert result.exit_code == 1
    assert "Please provide a URL" in result.output
    mock_scrape.assert_not_called()


def test_empty_url_fails_before_fetch(output_file):
    with patch("cli.main.scrape_page") as mock_scrape:
        result = runner.invoke(app, ["scrape", "--url", ""])

    assert result.exit_code == 1
    mock_scrape.assert_not_called()


def test_prints_report_and_declines_save(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT) as mock_scrape:
        result = runner.invoke(app, ["scrape", "--url", "https://x.com"], input="n\n")

    assert result.exit_code == 0
    mock_scrape.assert_called_once_with("https://x.com")
    assert result.output.startswith(render_report(_RESULT))
    assert "Would you like to save the scraped data to a file? (y/n)" in result.output
    assert not output_file.exists()


def test_answer_y_saves_to_default_file(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com"], input="  Y \n")

    assert result.exit_code == 0
    assert f"Data saved to {output_file}" in result.output
    assert output_file.read_text(encoding="utf-8") == render_report(_RESULT)


def test_other_answers_do_not_save(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com"], input="yes\n")

    assert result.exit_code == 0
    assert not output_file.exists()


def test_closed_stdin_does_not_save(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com"])

    assert result.exit_code == 0
    assert not output_file.exists()


def test_save_flag_skips_prompt(output_file, tmp_path):
    target = tmp_path / "custom.txt"
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(
            app, ["scrape", "--url", "https://x.com", "--save", "--output", str(target)]
        )

    assert result.exit_code == 0
    assert "Would you like" not in result.output
    assert target.read_text(encoding="utf-8") == render_report(_RESULT)
    assert not output_file.exists()


def test_saved_file_matches_console(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com", "--save"])

    printed = result.output.split("Data saved to")[0]
    assert output_file.read_text(encoding="utf-8") == printed


def test_no_save_flag_skips_prompt(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com", "--no-save"])

    assert result.exit_code == 0
    assert "Would you like" not in result.output
    assert not output_file.exists()


def test_json_output(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com", "--json", "--no-save"])

    assert result.exit_code == 0
    assert json.loads(result.output) == _RESULT.to_dict()


def test_fetch_error_exits_without_partial_output(output_file):
    with patch("cli.main.scrape_page", side_effect=FetchError("error: status code 404")):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com/missing"])

    assert result.exit_code == 1
    assert "Failed to scrape: error: status code 404" in result.output
    assert "Scraped Links:" not in result.output


def test_parse_error_exits(output_file):
    with patch("cli.main.scrape_page", side_effect=ParseError("error parsing HTML: bad")):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com"])

    assert result.exit_code == 1
    assert "Failed to scrape: error parsing HTML: bad" in result.output


def test_persistence_error_is_reported_but_not_fatal(output_file, tmp_path):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(
            app, ["scrape", "--url", "https://x.com", "--save", "--output", str(tmp_path)]
        )

    assert result.exit_code == 0
    assert result.output.startswith(render_report(_RESULT))
    assert "Error saving to file:" in result.output
    assert "Data saved to" not in result.output


def test_log_level_option_is_accepted(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(
            app, ["--log-level", "ERROR", "scrape", "--url", "https://x.com", "--no-save"]
        )

    assert result.exit_code == 0


def test_json_mode_never_prompts_and_keeps_stdout_clean(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com", "--json"], input="n\n")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == _RESULT.to_dict()
    assert "Would you like" not in result.output
    assert not output_file.exists()


def test_json_mode_save_status_goes_to_stderr(output_file):
    with patch("cli.main.scrape_page", return_value=_RESULT):
        result = runner.invoke(app, ["scrape", "--url", "https://x.com", "--json", "--save"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == _RESULT.to_dict()
    assert f"Data saved to {output_file}" in result.stderr
    assert output_file.read_text(encoding="utf-8") == render_report(_RESULT)
