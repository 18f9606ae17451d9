"""
Assignments Module

Read operations for course assignments.
"""

import logging
from typing import List, Optional

from .client import get_canvas_client, CanvasClient, PER_PAGE
from .models import Assignment

logger = logging.getLogger("canvas_reader.assignments")


def list_assignments(course_id: int, client: Optional[CanvasClient] = None) -> List[Assignment]:
    """List all assignments in a course, in API order."""
    canvas = client or get_canvas_client()
    records = canvas.request_all(f"/courses/{course_id}/assignments", {"per_page": PER_PAGE})

    result = [Assignment.from_json(record) for record in records]
    logger.info(f"Listed {len(result)} assignments for course {course_id}")
    return result
