"""
Discussions Module

Read operations for course discussion topics.
"""

import logging
from typing import List, Optional

from .client import get_canvas_client, CanvasClient, PER_PAGE
from .models import Discussion

logger = logging.getLogger("canvas_reader.discussions")


def list_discussions(course_id: int, client: Optional[CanvasClient] = None) -> List[Discussion]:
    """List discussion topics in a course (announcements excluded by Canvas)."""
    canvas = client or get_canvas_client()
    records = canvas.request_all(f"/courses/{course_id}/discussion_topics", {"per_page": PER_PAGE})

    result = [Discussion.from_json(record) for record in records]
    logger.info(f"Listed {len(result)} discussions for course {course_id}")
    return result
