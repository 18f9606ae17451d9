"""
Announcements Module

Read operations for course announcements.
"""

import logging
from datetime import date
from typing import List, Optional

from .client import get_canvas_client, CanvasClient, PER_PAGE
from .datetime_utils import announcement_window
from .models import Announcement, Course

logger = logging.getLogger("canvas_reader.announcements")


def list_announcements(
    course: Course,
    client: Optional[CanvasClient] = None,
    today: Optional[date] = None,
) -> List[Announcement]:
    """
    List announcements posted in a course since it started.

    Args:
        course: Course to list announcements for
        client: Optional CanvasClient instance
        today: End of the date window (default: today)

    Returns:
        Announcements in API order (newest first)
    """
    canvas = client or get_canvas_client()
    start_date, end_date = announcement_window(course.start_at, today)

    records = canvas.request_all("/announcements", {
        "start_date": start_date,
        "end_date": end_date,
        "context_codes[]": f"course_{course.id}",
        "per_page": PER_PAGE,
    })

    result = [Announcement.from_json(record) for record in records]
    logger.info(f"Listed {len(result)} announcements for course {course.id}")
    return result
