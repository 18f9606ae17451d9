"""
Terminal UI

A thin curses front end over Session: draws the visible lines of the open
document and turns key presses into session commands.
"""

import curses
import logging
from typing import Any, Dict, List, Optional

from .exceptions import CanvasReaderError
from .session import Session

logger = logging.getLogger("canvas_reader.ui")

OPEN_COURSE = "open-course"
OPEN_COURSE_RELOAD = "open-course-reload"
QUIT = "quit"

KEY_BINDINGS: Dict[int, str] = {
    ord("a"): "jump-announcements",
    ord("f"): "jump-frontpage",
    ord("s"): "jump-assignments",
    ord("m"): "jump-modules",
    ord("d"): "jump-discussions",
    ord("g"): "reload-page",
    ord("\t"): "next-control",
    curses.KEY_BTAB: "previous-control",
    ord("n"): "next-item",
    ord("p"): "previous-item",
    ord("\n"): "activate",
    curses.KEY_ENTER: "activate",
    ord(" "): "activate",
    curses.KEY_UP: "up",
    ord("k"): "up",
    curses.KEY_DOWN: "down",
    ord("j"): "down",
    curses.KEY_PPAGE: "page-up",
    curses.KEY_NPAGE: "page-down",
    ord("o"): OPEN_COURSE,
    ord("O"): OPEN_COURSE_RELOAD,
    ord("q"): QUIT,
}

HELP = "a/f/s/m/d sections  n/p items  TAB controls  RET toggle  g reload  o course  q quit"


def resolve_key(key: int) -> Optional[str]:
    """Command bound to a key code, or None."""
    return KEY_BINDINGS.get(key)


class ReaderApp:
    """Main loop: one screen showing the open course page plus a status line."""

    def __init__(self, screen: Any, session: Session):
        self.screen = screen
        self.session = session
        self.top = 0
        self.status = HELP
        self.screen.keypad(1)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

    def _body_height(self) -> int:
        rows, _ = self.screen.getmaxyx()
        return max(rows - 1, 1)

    def _scroll_to_cursor(self) -> None:
        height = self._body_height()
        cursor = self.session.navigator.cursor
        if cursor < self.top:
            self.top = cursor
        elif cursor >= self.top + height:
            self.top = cursor - height + 1

    def draw(self) -> None:
        self.session.page_size = self._body_height()
        self._scroll_to_cursor()
        rows, cols = self.screen.getmaxyx()
        self.screen.erase()

        lines = self.session.document.lines()
        for row, line in enumerate(lines[self.top:self.top + self._body_height()]):
            mode = curses.A_NORMAL
            if line.role == "heading":
                mode = curses.A_BOLD
            elif line.role == "label":
                mode = curses.A_UNDERLINE
            if self.top + row == self.session.navigator.cursor:
                mode |= curses.A_REVERSE
            self.screen.addnstr(row, 0, line.text, cols - 1, mode)

        self.screen.addnstr(rows - 1, 0, self.status, cols - 1, curses.A_DIM)
        self.screen.refresh()

    def choose_course(self, force_reload: bool = False) -> bool:
        """Show the course menu; open the chosen course. False if cancelled."""
        self.status = "Loading courses..."
        self.draw()
        courses = self.session.courses(force_reload)
        if not courses:
            self.status = "No courses found"
            return False

        names = [course.name for course in courses]
        position = 0
        while True:
            self._draw_menu("Open course:", names, position)
            key = self.screen.getch()
            if key == curses.KEY_UP or key == ord("k"):
                position = max(position - 1, 0)
            elif key == curses.KEY_DOWN or key == ord("j"):
                position = min(position + 1, len(names) - 1)
            elif key in [curses.KEY_ENTER, ord("\n")]:
                break
            elif key in [27, ord("q")]:
                self.status = HELP
                return False

        self.status = f"Loading {names[position]}..."
        self.draw()
        self.session.open_course(courses[position])
        self.status = HELP
        return True

    def _draw_menu(self, title: str, names: List[str], position: int) -> None:
        rows, cols = self.screen.getmaxyx()
        self.screen.erase()
        self.screen.addnstr(0, 0, title, cols - 1, curses.A_BOLD)
        height = max(rows - 1, 1)
        first = max(0, position - height + 1)
        for row, name in enumerate(names[first:first + height]):
            mode = curses.A_REVERSE if first + row == position else curses.A_NORMAL
            self.screen.addnstr(1 + row, 2, name, cols - 3, mode)
        self.screen.refresh()

    def handle(self, command: str) -> bool:
        """Run one command; False means quit."""
        if command == QUIT:
            return False
        try:
            if command in (OPEN_COURSE, OPEN_COURSE_RELOAD):
                self.choose_course(force_reload=command == OPEN_COURSE_RELOAD)
            else:
                self.session.dispatch(command)
                self.status = HELP
        except CanvasReaderError as e:
            logger.error(f"{command} failed: {e}")
            self.status = "Error: " + " ".join(str(e).split())
        return True

    def run(self, open_menu: bool = True) -> None:
        if open_menu and self.session.course is None:
            self.handle(OPEN_COURSE)
        while True:
            self.draw()
            command = resolve_key(self.screen.getch())
            if command is None:
                continue
            if not self.handle(command):
                return


def run_ui(session: Session, open_menu: bool = True) -> None:
    """Run the reader in the terminal until the user quits."""
    curses.wrapper(lambda screen: ReaderApp(screen, session).run(open_menu))
