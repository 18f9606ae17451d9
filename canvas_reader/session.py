"""
Reader Session

Holds what one reader session knows: the current user, the cached course
list, the open course and its document. UI front ends talk to it only through
``open_course``, ``reload_page`` and ``dispatch``.
"""

import logging
from typing import Callable, Dict, List, Optional

from .client import CanvasClient
from .courses import get_self_id, list_courses
from .document import Document
from .exceptions import APIError, NavigationError
from .fields import find_by
from .models import Course
from .navigation import Navigator
from .renderer import CourseRenderer

logger = logging.getLogger("canvas_reader.session")

PAGE_SIZE = 20


class Session:
    """Course cache, open document and command dispatch for one user."""

    def __init__(self, client: CanvasClient, renderer: Optional[CourseRenderer] = None):
        self.client = client
        self.renderer = renderer or CourseRenderer(client)
        self.user_id: Optional[int] = None
        self._courses: Optional[List[Course]] = None
        self.course: Optional[Course] = None
        self.document = Document()
        self.navigator = Navigator(self.document)
        self.page_size = PAGE_SIZE
        self._commands: Dict[str, Callable[[], bool]] = {
            "jump-announcements": lambda: self.navigator.jump_to_heading("Announcements"),
            "jump-frontpage": lambda: self.navigator.jump_to_heading("Frontpage", reveal_first=True),
            "jump-assignments": lambda: self.navigator.jump_to_heading("Assignments"),
            "jump-modules": lambda: self.navigator.jump_to_heading("Modules"),
            "jump-discussions": lambda: self.navigator.jump_to_heading("Discussions"),
            "reload-page": self._reload_command,
            "next-control": self.navigator.next_control,
            "previous-control": self.navigator.previous_control,
            "next-item": self.navigator.next_item,
            "previous-item": self.navigator.previous_item,
            "activate": self.activate,
            "up": lambda: self.navigator.move(-1),
            "down": lambda: self.navigator.move(1),
            "page-up": lambda: self.navigator.move(-self.page_size),
            "page-down": lambda: self.navigator.move(self.page_size),
        }

    @property
    def commands(self) -> List[str]:
        return list(self._commands)

    def invalidate(self) -> None:
        """Forget the cached user and course list."""
        self.user_id = None
        self._courses = None

    def courses(self, force_reload: bool = False) -> List[Course]:
        """
        The user's courses, newest start date first.

        Fetched on first use and cached until invalidate() or force_reload.

        Raises:
            AuthenticationError: If no token is configured
            APIError: If the current user cannot be resolved
        """
        if force_reload:
            self.invalidate()
        if self._courses is None:
            if self.user_id is None:
                self.user_id = get_self_id(self.client)
                if self.user_id is None:
                    raise APIError("Could not resolve the current Canvas user")
            self._courses = list_courses(self.user_id, self.client)
        return self._courses

    def refresh(self) -> List[Course]:
        """Invalidate and fetch the course list again."""
        return self.courses(force_reload=True)

    def course_choices(self, force_reload: bool = False) -> List[str]:
        """Course names in prompt order."""
        return [course.name for course in self.courses(force_reload)]

    def find_course(self, key) -> Optional[Course]:
        """Look a course up by id, then by name."""
        records = [{"id": str(course.id), "name": course.name, "course": course}
                   for course in self.courses()]
        record = find_by(records, "id", str(key)) or find_by(records, "name", key)
        return record["course"] if record else None

    def open_course(self, course: Course) -> Document:
        """Render course into a fresh document and put the cursor at the top."""
        self.course = course
        self.renderer.render(course, self.document)
        self.navigator.cursor = 0
        return self.document

    def reload_page(self) -> Document:
        """
        Rebuild the open course's page from scratch.

        Raises:
            NavigationError: If no course is open
        """
        if self.course is None:
            raise NavigationError("reload page")
        logger.info(f"Reloading course {self.course.id}")
        cursor = self.navigator.cursor
        self.open_course(self.course)
        self.navigator.cursor = cursor
        self.navigator.clamp()
        return self.document

    def _reload_command(self) -> bool:
        self.reload_page()
        return True

    def activate(self) -> bool:
        """Activate the label under the cursor; False if the cursor is not on one."""
        line = self.navigator.current()
        if line is None or line.role != "label":
            return False
        self.document.activate(line.region_id)
        return True

    def dispatch(self, command: str) -> bool:
        """
        Run one UI command by name.

        Returns:
            True if the command changed the cursor or the document

        Raises:
            ValueError: If the command is unknown
            NavigationError: If reload-page is requested with no course open
        """
        try:
            handler = self._commands[command]
        except KeyError:
            raise ValueError(f"Unknown command: {command}") from None
        return bool(handler())
