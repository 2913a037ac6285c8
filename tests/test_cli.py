"""Tests for the command-line entry point."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from markmap_extractor.__main__ import cli
from markmap_extractor.dom.builder import SnapshotNode
from markmap_extractor.types import DeliveryResult


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def html_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(
        "<html><body><nav>Menu</nav><main><h1>Title</h1>"
        "<div><p>Deep <span>text</span></p></div></main></body></html>",
        encoding="utf-8",
    )
    return path


class TestFileCommand:

    def test_prints_outline(self, runner, html_file):
        result = runner.invoke(cli, ["file", str(html_file), "--no-copy"])

        assert result.exit_code == 0
        assert "# Text extracted from the page: " in result.output
        assert "Title\n Deep text\n" in result.output
        assert "Menu" not in result.output

    def test_max_depth_option(self, runner, html_file):
        result = runner.invoke(cli, ["file", str(html_file), "--no-copy", "--max-depth", "0"])

        assert result.exit_code == 0
        assert "Deep" not in result.output

    def test_copies_to_clipboard(self, runner, html_file):
        clipboard = MagicMock(return_value=DeliveryResult(True, "tkinter"))
        with patch("markmap_extractor.__main__.SystemClipboard", return_value=clipboard):
            result = runner.invoke(cli, ["file", str(html_file)])

        assert result.exit_code == 0
        assert "Text copied to the clipboard." in result.output
        assert "Title" in clipboard.call_args.args[0]

    def test_copy_failure_is_not_fatal(self, runner, html_file):
        clipboard = MagicMock(return_value=DeliveryResult(False, "tkinter", "no display"))
        with patch("markmap_extractor.__main__.SystemClipboard", return_value=clipboard):
            result = runner.invoke(cli, ["file", str(html_file)])

        assert result.exit_code == 0
        assert "Copy failed (tkinter): no display" in result.output

    def test_extraction_failure_exits_nonzero(self, runner, html_file):
        with patch("markmap_extractor.__main__.load_html_file", side_effect=RuntimeError("boom")):
            result = runner.invoke(cli, ["file", str(html_file), "--no-copy"])

        assert result.exit_code == 1
        assert "Extraction failed: boom" in result.output

    def test_invalid_option_value(self, runner, html_file):
        result = runner.invoke(cli, ["file", str(html_file), "--min-text-length", "-1"])
        assert result.exit_code == 2

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["file", str(tmp_path / "missing.html")])
        assert result.exit_code == 2

    def test_environment_settings(self, runner, html_file, monkeypatch):
        monkeypatch.setenv("MARKMAP_MIN_TEXT_LENGTH", "5")
        result = runner.invoke(cli, ["file", str(html_file), "--no-copy"])

        assert result.exit_code == 0
        assert "Title" in result.output
        assert "Deep" not in result.output

    def test_flag_overrides_include_hidden_from_environment(self, runner, tmp_path, monkeypatch):
        path = tmp_path / "hidden.html"
        path.write_text(
            '<body><main><p>Shown</p><p hidden>Secret</p></main></body>',
            encoding="utf-8",
        )
        monkeypatch.setenv("MARKMAP_INCLUDE_HIDDEN", "true")

        from_env = runner.invoke(cli, ["file", str(path), "--no-copy"])
        overridden = runner.invoke(cli, ["file", str(path), "--no-copy", "--no-include-hidden"])

        assert "Secret" in from_env.output
        assert overridden.exit_code == 0
        assert "Shown" in overridden.output
        assert "Secret" not in overridden.output

    def test_min_text_length_env_rejects_none(self, runner, html_file, monkeypatch):
        monkeypatch.setenv("MARKMAP_MIN_TEXT_LENGTH", "none")
        result = runner.invoke(cli, ["file", str(html_file), "--no-copy"])
        assert result.exit_code == 2


class TestUrlCommand:

    @pytest.fixture
    def session(self):
        with patch("markmap_extractor.__main__.MarkmapExtractor") as cls:
            yield cls

    def test_navigation_failure(self, runner, session):
        extractor = session.return_value.__enter__.return_value
        extractor.navigate_to.return_value = False

        result = runner.invoke(cli, ["url", "https://invalid.example"])

        assert result.exit_code == 1
        assert "Could not load https://invalid.example" in result.output

    def test_extracts_and_copies(self, runner, session, make_element):
        extractor = session.return_value.__enter__.return_value
        extractor.navigate_to.return_value = True
        extractor.snapshot_body.return_value = SnapshotNode(
            make_element("body", make_element("main", texts=("Hello",)))
        )
        extractor.copy_to_clipboard.return_value = DeliveryResult(True, "navigator.clipboard")

        result = runner.invoke(cli, ["url", "https://example.com", "--no-headless"])

        assert result.exit_code == 0
        assert "Hello" in result.output
        assert session.call_args.args[0].headless is False
        extractor.copy_to_clipboard.assert_called_once()
