"""
Pytest fixtures for canvas_reader tests.
"""

import re
import pytest
import requests
from datetime import date
from unittest.mock import MagicMock

from canvas_reader.models import Course
from canvas_reader.renderer import CourseRenderer


class MockCanvasClient:
    """Mock Canvas client serving canned JSON keyed by path."""

    def __init__(self, responses=None):
        self.base_url = "https://canvas.test.edu/api/v1"
        self.token = "test-token"
        self.responses = dict(responses or {})
        self.calls = []

    def request(self, path, params=None, method="GET"):
        """Return the canned response for path, or None like a failed call."""
        self.calls.append((method, path, params))
        return self.responses.get(path)

    def request_all(self, path, params=None, max_pages=50):
        """Return the canned list for path, or [] like a failed call."""
        self.calls.append(("GET", path, params))
        data = self.responses.get(path)
        return list(data) if isinstance(data, list) else []

    def paths(self):
        return [path for _, path, _ in self.calls]


def fake_html_to_text(html):
    """Strip tags well enough for assertions without pandoc."""
    if not html:
        return ""
    return re.sub(r"<[^>]+>", "", html).strip()


def make_response(data=None, status_code=200, headers=None, text=None):
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.headers = headers if headers is not None else {"Content-Type": "application/json; charset=utf-8"}
    response.json.return_value = data
    response.text = text if text is not None else ""
    # Parsed the same way requests.Response.links parses the Link header
    response.links = {
        link.get("rel") or link.get("url"): link
        for link in requests.utils.parse_header_links(response.headers.get("Link", ""))
    }
    return response


COURSE_RECORDS = [
    {"id": 1, "name": "Math", "start_at": "2024-01-01"},
    {"id": 2, "name": "Art", "start_at": "2024-06-01"},
]


@pytest.fixture
def mock_canvas_client():
    """Provide a mock Canvas client with a user and two courses."""
    return MockCanvasClient({
        "/users/self": {"id": 42, "name": "Student"},
        "/users/42/courses": COURSE_RECORDS,
    })


@pytest.fixture
def art_course():
    """Provide the course used by most rendering tests."""
    return Course(id=2, name="Art", start_at="2024-06-01")


@pytest.fixture
def renderer_factory():
    """Build a renderer over a mock client that needs no pandoc."""

    def factory(client):
        return CourseRenderer(client, html_converter=fake_html_to_text, today=date(2024, 9, 1))

    return factory


@pytest.fixture
def sample_course_responses():
    """Canned responses for every section of course 2."""
    return {
        "/announcements": [
            {"title": "Midterm", "posted_at": "2024-03-01", "message": "<p>Info</p>"},
        ],
        "/courses/2/front_page": {
            "title": "Welcome",
            "body": "<h1>Hello</h1><p>Read the syllabus.</p>",
            "updated_at": "2024-05-30",
        },
        "/courses/2/assignments": [
            {"id": 10, "name": "Sketchbook", "due_at": "2024-07-01", "points_possible": 10,
             "description": "<p>Draw daily</p>"},
        ],
        "/courses/2/modules": [
            {"id": 5, "name": "Week 1", "position": 1, "items": [
                {"id": 51, "title": "Intro reading", "type": "Page",
                 "url": "https://canvas.test.edu/api/v1/courses/2/pages/intro"},
                {"id": 52, "title": "Unit header", "type": "SubHeader"},
            ]},
        ],
        "/courses/2/discussion_topics": [
            {"id": 7, "title": "Introductions", "posted_at": "2024-06-02", "unread_count": 3,
             "discussion_subentry_count": 12, "message": "<p>Say hi</p>"},
        ],
        "https://canvas.test.edu/api/v1/courses/2/pages/intro": {
            "title": "Intro reading", "body": "<p>Chapter one</p>",
        },
    }
