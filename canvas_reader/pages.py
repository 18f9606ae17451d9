"""
Pages Module

Read operations for Canvas wiki pages.
"""

import logging
from typing import Optional

from .client import get_canvas_client, CanvasClient
from .models import Page

logger = logging.getLogger("canvas_reader.pages")


def get_front_page(course_id: int, client: Optional[CanvasClient] = None) -> Optional[Page]:
    """
    Get the course front page.

    Returns:
        Page, or None when the course has no front page or the request failed
    """
    canvas = client or get_canvas_client()
    data = canvas.request(f"/courses/{course_id}/front_page")
    if not isinstance(data, dict):
        logger.info(f"No front page for course {course_id}")
        return None

    logger.info(f"Retrieved front page for course {course_id}")
    return Page.from_json(data)
