"""
Canvas Reader - read Canvas LMS courses in the terminal.

Fetches a course's announcements, front page, assignments, modules and
discussions and shows them as one page of collapsible items. Uses pandoc for
HTML -> text conversion.
"""

__version__ = "0.1.0"

from .client import get_canvas_client, CanvasClient
from .pandoc import html_to_text, is_pandoc_available
from .exceptions import (
    CanvasReaderError,
    ConfigurationError,
    AuthenticationError,
    ValidationError,
    APIError,
    NavigationError,
    PandocError,
)
from .fields import extract_fields, find_by
from .models import (
    Course,
    Announcement,
    Page,
    Assignment,
    Module,
    ModuleItem,
    Discussion,
)
from .document import Document, Region
from .navigation import Navigator
from .renderer import CourseRenderer
from .session import Session

__all__ = [
    # Client
    "get_canvas_client",
    "CanvasClient",
    # Pandoc
    "html_to_text",
    "is_pandoc_available",
    # Exceptions
    "CanvasReaderError",
    "ConfigurationError",
    "AuthenticationError",
    "ValidationError",
    "APIError",
    "NavigationError",
    "PandocError",
    # Fields
    "extract_fields",
    "find_by",
    # Models
    "Course",
    "Announcement",
    "Page",
    "Assignment",
    "Module",
    "ModuleItem",
    "Discussion",
    # Document
    "Document",
    "Region",
    "Navigator",
    "CourseRenderer",
    "Session",
]
