"""
Tests for the pandoc module.
"""

import pytest
import subprocess
from unittest.mock import patch, MagicMock

from canvas_reader.exceptions import PandocError
from canvas_reader.pandoc import is_pandoc_available, html_to_text


class TestIsPandocAvailable:
    """Tests for is_pandoc_available function."""

    def test_pandoc_available(self):
        """Test when pandoc is available."""
        with patch("shutil.which", return_value="/usr/bin/pandoc"):
            assert is_pandoc_available() is True

    def test_pandoc_not_available(self):
        """Test when pandoc is not available."""
        with patch("shutil.which", return_value=None):
            assert is_pandoc_available() is False


class TestHtmlToText:
    """Tests for html_to_text function."""

    def test_converts_basic_html(self):
        """Test converting basic HTML to plain text."""
        with patch("shutil.which", return_value="/usr/bin/pandoc"):
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = MagicMock(returncode=0, stdout="Hello world\n\n")

                result = html_to_text("<p>Hello <strong>world</strong></p>")

                assert result == "Hello world"
                mock_run.assert_called_once()

    def test_uses_plain_writer_with_columns(self):
        with patch("shutil.which", return_value="/usr/bin/pandoc"):
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = MagicMock(returncode=0, stdout="x")

                html_to_text("<p>x</p>", columns=60)

                cmd = mock_run.call_args[0][0]
                assert cmd[:5] == ["pandoc", "-f", "html", "-t", "plain"]
                assert "--columns=60" in cmd

    def test_no_wrap(self):
        with patch("shutil.which", return_value="/usr/bin/pandoc"):
            with patch("subprocess.run") as mock_run:
                mock_run.return_value = MagicMock(returncode=0, stdout="x")

                html_to_text("<p>x</p>", columns=None)

                assert "--wrap=none" in mock_run.call_args[0][0]

    def test_empty_input_skips_pandoc(self):
        with patch("subprocess.run") as mock_run:
            assert html_to_text(None) == ""
            assert html_to_text("   ") == ""

        mock_run.assert_not_called()

    def test_raises_when_pandoc_not_installed(self):
        """Test that PandocError is raised when pandoc is not installed."""
        with patch("shutil.which", return_value=None):
            with pytest.raises(PandocError) as exc_info:
                html_to_text("<p>Some content</p>")

            assert "pandoc is not installed" in str(exc_info.value)

    def test_raises_on_pandoc_failure(self):
        """Test that PandocError is raised when pandoc fails."""
        with patch("shutil.which", return_value="/usr/bin/pandoc"):
            with patch("subprocess.run") as mock_run:
                mock_run.side_effect = subprocess.CalledProcessError(
                    1, "pandoc", stderr="error parsing"
                )

                with pytest.raises(PandocError) as exc_info:
                    html_to_text("<p>Some content</p>")

                assert exc_info.value.stderr == "error parsing"
