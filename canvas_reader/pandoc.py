"""
Pandoc Integration

Provides HTML -> plain text conversion for Canvas rich content using pandoc.
"""

import subprocess
import logging
import shutil
from typing import Optional

from .exceptions import PandocError

logger = logging.getLogger("canvas_reader.pandoc")

DEFAULT_COLUMNS = 78


def _check_pandoc() -> bool:
    """Check if pandoc is available."""
    return shutil.which("pandoc") is not None


def html_to_text(html: Optional[str], columns: Optional[int] = DEFAULT_COLUMNS) -> str:
    """
    Convert HTML to plain text using pandoc.

    Args:
        html: HTML content to convert; empty input returns an empty string
        columns: Line wrap width (None for no wrapping)

    Returns:
        Plain text without trailing whitespace

    Raises:
        PandocError: If pandoc is not installed or conversion fails
    """
    if not html or not html.strip():
        return ""

    if not _check_pandoc():
        raise PandocError("pandoc is not installed. Install it with: apt install pandoc (Linux) or brew install pandoc (macOS)")

    cmd = ["pandoc", "-f", "html", "-t", "plain"]
    if columns is not None:
        cmd.extend(["--wrap=auto", f"--columns={columns}"])
    else:
        cmd.append("--wrap=none")

    try:
        result = subprocess.run(
            cmd,
            input=html,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.rstrip()
    except subprocess.CalledProcessError as e:
        logger.error(f"Pandoc conversion failed: {e.stderr}")
        raise PandocError(f"Pandoc conversion failed: {e.stderr}", stderr=e.stderr)


def is_pandoc_available() -> bool:
    """Check if pandoc is available on the system."""
    return _check_pandoc()
