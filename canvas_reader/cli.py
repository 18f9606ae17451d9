#!/usr/bin/env python3
"""
Canvas Reader CLI

Read a Canvas course in the terminal: announcements, front page, assignments,
modules and discussions as one collapsible page.

Usage:
    canvas-reader [browse] [--course ID] [--reload]   # Interactive reader
    canvas-reader list-courses                         # List your courses
    canvas-reader show COURSE_ID [--expand]            # Print a course page

Configuration (environment or .env):
    CANVAS_DOMAIN=canvas.instructure.com    # or CANVAS_BASE_URL=https://.../api/v1
    CANVAS_API_TOKEN=your_token_here
    CANVAS_TIMEZONE=America/New_York        # optional, for displayed times

Keys:
    a f s m d   jump to Announcements, Frontpage, Assignments, Modules, Discussions
    n / p       next / previous item
    TAB / S-TAB next / previous control (wraps)
    RET, SPC    expand or collapse the item under the cursor
    g           reload the page
    o / O       open another course (O refetches the course list)
    q           quit
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .client import get_canvas_client
from .exceptions import CanvasReaderError
from .logger import setup_logger
from .pandoc import is_pandoc_available
from .session import Session

logger = logging.getLogger("canvas_reader.cli")


# Load environment variables from multiple possible locations
def _load_env():
    """Load .env from current dir, parent dirs, or home dir."""
    locations = [
        Path.cwd() / ".env",  # Current directory
    ]

    # Search up directory tree for .env
    current = Path.cwd()
    for _ in range(10):  # Limit to 10 levels up
        parent = current.parent
        if parent == current:
            break
        locations.append(parent / ".env")
        current = parent

    locations.append(Path.home() / ".canvas-reader.env")  # Home directory

    for env_file in locations:
        if env_file.exists():
            load_dotenv(env_file, override=True)
            return


def _require_pandoc() -> bool:
    if not is_pandoc_available():
        print("Error: pandoc is required to display course content.")
        print("Install with: apt install pandoc (Linux) or brew install pandoc (macOS)")
        return False
    return True


def _resolve_course(session: Session, key: str):
    course = session.find_course(key)
    if course is None:
        print(f"Error: no course matching {key!r}. Run 'canvas-reader list-courses'.")
    return course


def cmd_browse(args: argparse.Namespace) -> int:
    """Open the interactive reader."""
    if not _require_pandoc():
        return 1

    from .ui import run_ui

    session = Session(get_canvas_client())
    try:
        if args.reload:
            session.refresh()
        if args.course:
            course = _resolve_course(session, args.course)
            if course is None:
                return 1
            session.open_course(course)
        run_ui(session)
    except CanvasReaderError as e:
        print(f"Error: {e}")
        return 1
    return 0


def cmd_list_courses(args: argparse.Namespace) -> int:
    """List the user's courses, newest first."""
    session = Session(get_canvas_client())
    try:
        courses = session.courses()
    except CanvasReaderError as e:
        print(f"Error: {e}")
        return 1

    if not courses:
        print("No courses found.")
        return 0

    for course in courses:
        start = (course.start_at or "")[:10] or "-"
        print(f"{course.id:>10}  {start:<10}  {course.name}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Render a course page to stdout."""
    if not _require_pandoc():
        return 1

    session = Session(get_canvas_client())
    try:
        course = _resolve_course(session, args.course_id)
        if course is None:
            return 1
        document = session.open_course(course)
        if args.expand:
            document.expand_all()
    except CanvasReaderError as e:
        print(f"Error: {e}")
        return 1

    print(document.text())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canvas-reader",
        description="Canvas Reader - read Canvas courses in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # browse command
    browse_parser = subparsers.add_parser("browse", help="Interactive course reader (default)")
    browse_parser.add_argument("--course", "-c", help="Course id or name to open directly")
    browse_parser.add_argument("--reload", "-r", action="store_true", help="Refetch the course list")

    # list-courses command
    subparsers.add_parser("list-courses", help="List available courses")

    # show command
    show_parser = subparsers.add_parser("show", help="Print a course page")
    show_parser.add_argument("course_id", help="Canvas course id or name")
    show_parser.add_argument("--expand", "-e", action="store_true", help="Expand every item, loading module items")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    _load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    command = args.command or "browse"
    if command == "browse" and args.command is None:
        args.course = None
        args.reload = False

    # curses owns the terminal while browsing, so logs go to the file only
    setup_logger(
        log_file=args.log_file,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        console=command != "browse",
    )
    logger.debug(f"Running command {command}")

    if command == "browse":
        return cmd_browse(args)
    elif command == "list-courses":
        return cmd_list_courses(args)
    elif command == "show":
        return cmd_show(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
