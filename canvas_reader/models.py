"""
Typed records for the Canvas endpoints the reader consumes.

Each ``from_json`` takes one API record and keeps only the fields the reader
shows; every field the API may omit is Optional.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Course:
    id: int
    name: str
    start_at: Optional[str] = None
    course_code: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Course":
        return cls(
            id=data["id"],
            name=data.get("name") or f"Course {data['id']}",
            start_at=data.get("start_at"),
            course_code=data.get("course_code"),
        )


@dataclass
class Announcement:
    title: str
    message: Optional[str] = None
    posted_at: Optional[str] = None
    author: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Announcement":
        author = data.get("author") or {}
        return cls(
            id=data.get("id"),
            title=data.get("title") or "(untitled)",
            message=data.get("message"),
            posted_at=data.get("posted_at"),
            author=author.get("display_name") if isinstance(author, dict) else None,
        )


@dataclass
class Page:
    title: str
    body: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Page":
        return cls(
            title=data.get("title") or "Front Page",
            body=data.get("body"),
            updated_at=data.get("updated_at"),
            url=data.get("url"),
        )


@dataclass
class Assignment:
    name: str
    description: Optional[str] = None
    due_at: Optional[str] = None
    points_possible: Optional[float] = None
    html_url: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Assignment":
        return cls(
            id=data.get("id"),
            name=data.get("name") or "(untitled)",
            description=data.get("description"),
            due_at=data.get("due_at"),
            points_possible=data.get("points_possible"),
            html_url=data.get("html_url"),
        )


@dataclass
class ModuleItem:
    title: str
    type: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    indent: int = 0
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ModuleItem":
        return cls(
            id=data.get("id"),
            title=data.get("title") or "(untitled)",
            type=data.get("type"),
            url=data.get("url"),
            html_url=data.get("html_url"),
            indent=data.get("indent") or 0,
        )


@dataclass
class Module:
    name: str
    position: int = 0
    items: List[ModuleItem] = field(default_factory=list)
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Module":
        return cls(
            id=data.get("id"),
            name=data.get("name") or "(untitled)",
            position=data.get("position") or 0,
            items=[ModuleItem.from_json(item) for item in data.get("items") or []],
        )


@dataclass
class Discussion:
    title: str
    message: Optional[str] = None
    posted_at: Optional[str] = None
    unread_count: int = 0
    reply_count: int = 0
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Discussion":
        return cls(
            id=data.get("id"),
            title=data.get("title") or "(untitled)",
            message=data.get("message"),
            posted_at=data.get("posted_at"),
            unread_count=data.get("unread_count") or 0,
            reply_count=data.get("discussion_subentry_count") or 0,
        )
