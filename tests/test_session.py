"""
Tests for the session module.
"""

import pytest

from canvas_reader.exceptions import APIError, NavigationError
from canvas_reader.session import Session
from conftest import MockCanvasClient, COURSE_RECORDS


@pytest.fixture
def session(mock_canvas_client, renderer_factory, sample_course_responses):
    """Session over a client that knows the user, the courses and course 2."""
    mock_canvas_client.responses.update(sample_course_responses)
    return Session(mock_canvas_client, renderer=renderer_factory(mock_canvas_client))


class TestCourses:
    """Tests for the course list cache."""

    def test_sorted_by_start_date_descending(self, session):
        assert session.course_choices() == ["Art", "Math"]

    def test_courses_without_start_date_last(self, renderer_factory):
        client = MockCanvasClient({
            "/users/self": {"id": 1},
            "/users/1/courses": [{"id": 3, "name": "Undated"}] + COURSE_RECORDS,
        })

        names = Session(client, renderer_factory(client)).course_choices()

        assert names == ["Art", "Math", "Undated"]

    def test_course_list_cached(self, session):
        session.courses()
        session.courses()

        assert session.client.paths().count("/users/42/courses") == 1
        assert session.client.paths().count("/users/self") == 1

    def test_force_reload_refetches(self, session):
        session.courses()
        session.courses(force_reload=True)

        assert session.client.paths().count("/users/42/courses") == 2

    def test_invalidate_then_refetch(self, session):
        session.courses()
        session.invalidate()

        assert session.user_id is None
        session.refresh()
        assert session.client.paths().count("/users/self") == 2

    def test_unknown_user_raises(self, renderer_factory):
        client = MockCanvasClient()

        with pytest.raises(APIError):
            Session(client, renderer_factory(client)).courses()

    def test_find_course_by_id_or_name(self, session):
        assert session.find_course("2").name == "Art"
        assert session.find_course(1).name == "Math"
        assert session.find_course("Math").id == 1
        assert session.find_course("Physics") is None

    def test_find_course_prefers_id_match(self, renderer_factory):
        client = MockCanvasClient({
            "/users/self": {"id": 42},
            "/users/42/courses": [{"id": 1, "name": "2"}, {"id": 2, "name": "Art"}],
        })
        session = Session(client, renderer_factory(client))

        assert session.find_course("2").name == "Art"
        assert session.find_course("Art").id == 2


class TestOpenCourse:
    """Tests for opening and reloading pages."""

    def test_open_selected_course(self, session):
        course = session.find_course("Art")

        document = session.open_course(course)
        lines = [line.text for line in document.lines()]

        assert lines[0] == "Art"
        heading_lines = [line.text for line in document.lines() if line.role == "heading"]
        assert heading_lines == ["Announcements", "Frontpage", "Assignments", "Modules", "Discussions"]
        assert session.navigator.cursor == 0

    def test_reload_without_course_raises(self, session):
        with pytest.raises(NavigationError):
            session.reload_page()

    def test_reload_dispatch_without_course_raises(self, session):
        with pytest.raises(NavigationError):
            session.dispatch("reload-page")

    def test_reload_rebuilds_and_keeps_cursor(self, session):
        session.open_course(session.find_course("Art"))
        session.dispatch("jump-modules")
        cursor = session.navigator.cursor
        before = session.client.paths().count("/courses/2/modules")

        session.dispatch("reload-page")

        assert session.client.paths().count("/courses/2/modules") == before + 1
        assert session.navigator.cursor == cursor

    def test_reload_forgets_loaded_items(self, session):
        session.open_course(session.find_course("Art"))
        item = next(r for r in session.document.regions.values() if r.label == "Intro reading")
        session.document.activate(item.id)

        session.reload_page()

        item = next(r for r in session.document.regions.values() if r.label == "Intro reading")
        assert item.loaded is False


class TestDispatch:
    """Tests for command dispatch."""

    def test_unknown_command(self, session):
        with pytest.raises(ValueError):
            session.dispatch("fly")

    def test_jump_commands(self, session):
        session.open_course(session.find_course("Art"))

        for name in ["announcements", "assignments", "modules", "discussions"]:
            assert session.dispatch(f"jump-{name}") is True
            assert session.navigator.current().text.lower() == name

    def test_jump_frontpage_reveals_first_toggle(self, session):
        session.open_course(session.find_course("Art"))

        session.dispatch("jump-frontpage")

        welcome = next(r for r in session.document.regions.values() if r.label == "Welcome")
        assert welcome.hidden is False

    def test_activate_on_label_toggles(self, session):
        session.open_course(session.find_course("Art"))
        session.dispatch("next-item")

        assert session.dispatch("activate") is True
        midterm = next(r for r in session.document.regions.values() if r.label == "Midterm")
        assert midterm.hidden is False

        session.dispatch("down")  # into the body
        assert session.dispatch("activate") is False
        assert midterm.hidden is False

    def test_activate_on_heading_does_nothing(self, session):
        session.open_course(session.find_course("Art"))
        session.dispatch("jump-modules")

        assert session.dispatch("activate") is False

    def test_item_and_control_commands(self, session):
        session.open_course(session.find_course("Art"))

        assert session.dispatch("next-item") is True
        assert session.navigator.current().text == "+ Midterm"
        assert session.dispatch("previous-item") is False
        assert session.dispatch("previous-control") is True
        assert session.navigator.current().text == "+ Introductions (3 unread)"
        assert session.dispatch("next-control") is True
        assert session.navigator.current().text == "+ Midterm"

    def test_paging(self, session):
        session.open_course(session.find_course("Art"))
        session.page_size = 3

        session.dispatch("page-down")
        assert session.navigator.cursor == 3
        session.dispatch("page-up")
        assert session.navigator.cursor == 0

    def test_commands_listed(self, session):
        assert "reload-page" in session.commands
        assert "next-item" in session.commands
