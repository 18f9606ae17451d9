"""
Modules Module

Read operations for course modules and the content behind module items.
"""

import logging
from typing import Any, Dict, List, Optional

from .client import get_canvas_client, CanvasClient, PER_PAGE
from .fields import extract_fields, first_field
from .models import Module

logger = logging.getLogger("canvas_reader.modules")

# Detail payloads differ by item type: pages carry body, assignments
# description, discussions message.
DETAIL_TEXT_FIELDS = ("body", "description", "message")


def list_modules(course_id: int, client: Optional[CanvasClient] = None) -> List[Module]:
    """
    List all modules in a course with their items.

    Returns:
        Modules sorted by position; items keep their module order
    """
    canvas = client or get_canvas_client()
    records = canvas.request_all(f"/courses/{course_id}/modules", {
        "include[]": "items",
        "per_page": PER_PAGE,
    })

    result = [Module.from_json(record) for record in records]
    result.sort(key=lambda module: module.position)

    logger.info(f"Listed {len(result)} modules for course {course_id}")
    return result


def get_item_detail(url: str, client: Optional[CanvasClient] = None) -> Optional[Dict[str, Any]]:
    """
    Fetch the record behind a module item's API URL.

    Returns:
        Dict with the item's "html" (None when the record has no text), or None
        if the request failed or returned something other than a record
    """
    canvas = client or get_canvas_client()
    data = canvas.request(url)
    if not isinstance(data, dict):
        logger.warning(f"No detail record at {url}")
        return None

    fields = extract_fields(DETAIL_TEXT_FIELDS, data)
    return {"html": first_field(DETAIL_TEXT_FIELDS, fields)}
