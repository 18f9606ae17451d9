"""
Cursor movement over a laid-out Document.

The cursor is an index into ``Document.lines()``. Every command that cannot
move (missing heading, no further item) leaves the cursor where it was and
returns False.
"""

import logging
from typing import List, Optional

from .document import Document, Line

logger = logging.getLogger("canvas_reader.navigation")

SECTION_HEADINGS = ("Announcements", "Frontpage", "Assignments", "Modules", "Discussions")


class Navigator:
    """Tracks a cursor line in a document and moves it."""

    def __init__(self, document: Document, cursor: int = 0):
        self.document = document
        self.cursor = cursor

    def _lines(self) -> List[Line]:
        return self.document.lines()

    def clamp(self) -> None:
        """Pull the cursor back inside the document after the layout shrank."""
        count = len(self._lines())
        self.cursor = max(0, min(self.cursor, count - 1)) if count else 0

    def current(self) -> Optional[Line]:
        lines = self._lines()
        if 0 <= self.cursor < len(lines):
            return lines[self.cursor]
        return None

    def current_region_id(self) -> Optional[int]:
        line = self.current()
        return line.region_id if line else None

    def move(self, delta: int) -> bool:
        before = self.cursor
        self.cursor += delta
        self.clamp()
        return self.cursor != before

    def jump_to_heading(self, name: str, reveal_first: bool = False) -> bool:
        """
        Put the cursor on the first heading called name.

        With reveal_first, the first clickable region in the heading's section is
        also expanded if it is hidden. A section with none expands nothing.
        """
        heading = self.document.find_heading(name)
        if heading is None:
            logger.debug(f"No heading {name!r} in document")
            return False

        lines = self._lines()
        index = next(i for i, line in enumerate(lines) if line.region_id == heading.id)
        self.cursor = index

        if reveal_first:
            for line in lines[index + 1:]:
                if line.role == "heading":
                    break
                region = self.document.regions[line.region_id]
                if line.role == "label" and region.clickable:
                    if region.hidden:
                        self.document.activate(region.id)
                    break
        return True

    def _labels(self) -> List[int]:
        return [i for i, line in enumerate(self._lines()) if line.role == "label"]

    def next_item(self) -> bool:
        """Move to the next clickable label after the current region."""
        lines = self._lines()
        if not lines:
            return False
        here = self.current_region_id()
        for index in self._labels():
            if index > self.cursor and lines[index].region_id != here:
                self.cursor = index
                return True
        return False

    def previous_item(self) -> bool:
        """Move to the previous clickable label, skipping the one the cursor is on."""
        lines = self._lines()
        if not lines:
            return False
        here = self.current_region_id()
        for index in reversed(self._labels()):
            if index < self.cursor and lines[index].region_id != here:
                self.cursor = index
                return True
        return False

    def next_control(self) -> bool:
        """Move to the next focusable control, wrapping to the first."""
        labels = self._labels()
        if not labels:
            return False
        after = [index for index in labels if index > self.cursor]
        self.cursor = after[0] if after else labels[0]
        return True

    def previous_control(self) -> bool:
        """Move to the previous focusable control, wrapping to the last."""
        labels = self._labels()
        if not labels:
            return False
        before = [index for index in labels if index < self.cursor]
        self.cursor = before[-1] if before else labels[-1]
        return True
