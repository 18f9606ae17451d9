"""
Courses Module

Read operations for the current user and their courses.
"""

import logging
from typing import List, Optional

from .client import get_canvas_client, CanvasClient, PER_PAGE
from .models import Course

logger = logging.getLogger("canvas_reader.courses")


def get_self_id(client: Optional[CanvasClient] = None) -> Optional[int]:
    """Return the id of the user owning the token, or None if unavailable."""
    canvas = client or get_canvas_client()
    user = canvas.request("/users/self")
    if not isinstance(user, dict) or "id" not in user:
        logger.error("Could not resolve the current Canvas user")
        return None
    return user["id"]


def list_courses(user_id: int, client: Optional[CanvasClient] = None) -> List[Course]:
    """
    List a user's courses, newest start date first.

    Courses without a start date sort last; ties keep API order.
    """
    canvas = client or get_canvas_client()
    records = canvas.request_all(f"/users/{user_id}/courses", {"per_page": PER_PAGE})

    courses = [Course.from_json(record) for record in records if "id" in record]
    courses.sort(key=lambda course: course.start_at or "", reverse=True)

    logger.info(f"Listed {len(courses)} courses for user {user_id}")
    return courses
