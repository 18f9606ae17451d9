"""
Course Page Renderer

Builds the Document for one course by fetching each section in turn and
appending it: title, Announcements, Frontpage, Assignments, Modules,
Discussions. A section whose request fails or returns nothing shows a
placeholder; the rest of the page still renders.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from .client import CanvasClient
from .datetime_utils import format_timestamp
from .document import Document, PLACEHOLDER
from .exceptions import PandocError
from .models import Course
from .pandoc import html_to_text
from . import announcements, assignments, discussions, modules, pages

logger = logging.getLogger("canvas_reader.renderer")

HtmlConverter = Callable[[Optional[str]], str]


class CourseRenderer:
    """Fetches a course's sections and writes them into a Document."""

    def __init__(
        self,
        client: CanvasClient,
        html_converter: Optional[HtmlConverter] = None,
        today: Optional[date] = None,
    ):
        self.client = client
        self.html_converter = html_converter or html_to_text
        self.today = today

    def render(self, course: Course, document: Optional[Document] = None) -> Document:
        """
        Render a course from scratch.

        An existing document is cleared and reused; its previous regions,
        including loaded lazy items, are discarded.
        """
        if document is None:
            document = Document()
        document.clear()
        document.loader = self.load_item_detail

        logger.info(f"Rendering course {course.id} ({course.name})")
        document.add_text(course.name)
        self.render_announcements(document, course)
        self.render_front_page(document, course)
        self.render_assignments(document, course)
        self.render_modules(document, course)
        self.render_discussions(document, course)
        return document

    def _html_lines(self, html: Optional[str]) -> List[str]:
        try:
            text = self.html_converter(html)
        except PandocError as e:
            logger.error(f"HTML conversion failed: {e}")
            return [PLACEHOLDER]
        return text.splitlines() if text else []

    def render_announcements(self, document: Document, course: Course) -> None:
        document.add_heading("Announcements")
        items = announcements.list_announcements(course, self.client, today=self.today)
        if not items:
            document.add_text(PLACEHOLDER)
            return
        for item in items:
            body = [f"Posted: {format_timestamp(item.posted_at)}"]
            if item.author:
                body.append(f"Author: {item.author}")
            body.append("")
            body.extend(self._html_lines(item.message))
            document.add_toggle(item.title, body)

    def render_front_page(self, document: Document, course: Course) -> None:
        document.add_heading("Frontpage")
        page = pages.get_front_page(course.id, self.client)
        if page is None:
            document.add_text(PLACEHOLDER)
            return
        body = []
        if page.updated_at:
            body.extend([f"Updated: {format_timestamp(page.updated_at)}", ""])
        body.extend(self._html_lines(page.body) or [PLACEHOLDER])
        document.add_toggle(page.title, body)

    def render_assignments(self, document: Document, course: Course) -> None:
        document.add_heading("Assignments")
        items = assignments.list_assignments(course.id, self.client)
        if not items:
            document.add_text(PLACEHOLDER)
            return
        for item in items:
            due = format_timestamp(item.due_at) if item.due_at else "No due date"
            body = [f"Due: {due}"]
            if item.points_possible is not None:
                body.append(f"Points: {item.points_possible:g}")
            body.append("")
            body.extend(self._html_lines(item.description))
            document.add_toggle(item.name, body)

    def render_modules(self, document: Document, course: Course) -> None:
        document.add_heading("Modules")
        items = modules.list_modules(course.id, self.client)
        if not items:
            document.add_text(PLACEHOLDER)
            return
        for module in items:
            region = document.add_toggle(module.name)
            if not module.items:
                document.add_text(PLACEHOLDER, parent=region.id)
            for item in module.items:
                if item.url:
                    document.add_lazy(item.title, item.url, parent=region.id)
                else:
                    document.add_text(item.title, parent=region.id)

    def render_discussions(self, document: Document, course: Course) -> None:
        document.add_heading("Discussions")
        items = discussions.list_discussions(course.id, self.client)
        if not items:
            document.add_text(PLACEHOLDER)
            return
        for item in items:
            label = item.title
            if item.unread_count:
                label += f" ({item.unread_count} unread)"
            body = [
                f"Posted: {format_timestamp(item.posted_at)}",
                f"Replies: {item.reply_count}",
                "",
            ]
            body.extend(self._html_lines(item.message))
            document.add_toggle(label, body)

    def load_item_detail(self, url: str) -> List[str]:
        """Loader for lazy module items: the item's text, or the placeholder."""
        detail = modules.get_item_detail(url, self.client)
        if not detail:
            return [PLACEHOLDER]
        return self._html_lines(detail["html"]) or [PLACEHOLDER]
