"""
Document Model

A course page is an ordered tree of regions. Headings and plain text are
always shown; toggles show a label and hide their body and children until
activated. Lazy toggles have no body until their first activation, which
fetches it through the document's loader.

The region table lives here, apart from any widget. Widgets read ``lines()``
and send region ids back through ``activate()``.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

logger = logging.getLogger("canvas_reader.document")

HEADING = "heading"
TEXT = "text"
TOGGLE = "toggle"
LAZY = "lazy"

CLICKABLE_KINDS = (TOGGLE, LAZY)

INDENT = "  "
HIDDEN_MARKER = "+ "
VISIBLE_MARKER = "- "

PLACEHOLDER = "no contents"

Loader = Callable[[str], List[str]]


@dataclass
class Region:
    id: int
    kind: str
    label: str
    body: List[str] = field(default_factory=list)
    children: List[int] = field(default_factory=list)
    parent: Optional[int] = None
    hidden: bool = False
    loaded: bool = True
    url: Optional[str] = None

    @property
    def clickable(self) -> bool:
        return self.kind in CLICKABLE_KINDS


@dataclass(frozen=True)
class Line:
    """One visible line of the laid-out document."""

    text: str
    region_id: int
    role: str  # heading, label, content or text


@dataclass(frozen=True)
class Span:
    """A row of the region table: where a visible region sits in the layout."""

    region_id: int
    start: int
    end: int
    kind: str
    hidden: bool
    loaded: bool


class Document:
    """Region table plus layout for one rendered course page."""

    def __init__(self, loader: Optional[Loader] = None):
        self.loader = loader
        self.regions: Dict[int, Region] = {}
        self.roots: List[int] = []
        self._next_id = 0

    def clear(self) -> None:
        """Drop every region; the next render starts from an empty page."""
        self.regions.clear()
        self.roots.clear()
        self._next_id = 0

    def _add(self, kind: str, label: str, parent: Optional[int] = None, **attrs) -> Region:
        region = Region(id=self._next_id, kind=kind, label=label, parent=parent, **attrs)
        self._next_id += 1
        self.regions[region.id] = region
        if parent is None:
            self.roots.append(region.id)
        else:
            self.regions[parent].children.append(region.id)
        return region

    def add_heading(self, name: str) -> Region:
        return self._add(HEADING, name)

    def add_text(self, text: str, parent: Optional[int] = None) -> Region:
        return self._add(TEXT, text, parent)

    def add_toggle(self, label: str, body: Optional[List[str]] = None, parent: Optional[int] = None) -> Region:
        """Add a collapsible region whose body is known now. Starts hidden."""
        return self._add(TOGGLE, label, parent, body=list(body or []), hidden=True)

    def add_lazy(self, label: str, url: str, parent: Optional[int] = None) -> Region:
        """Add a collapsible region whose body is fetched from url on first activation."""
        return self._add(LAZY, label, parent, hidden=True, loaded=False, url=url)

    def activate(self, region_id: int) -> Region:
        """
        Handle a click on a region.

        Toggles flip visibility. A lazy region that was never loaded is loaded
        once and then shown; after that it behaves like any toggle. Other
        regions are left as they are.

        Raises:
            KeyError: If region_id is not in the table
        """
        region = self.regions[region_id]
        if not region.clickable:
            return region

        if region.kind == LAZY and not region.loaded:
            region.body = self._load(region)
            region.loaded = True
            region.hidden = False
            logger.debug(f"Loaded region {region.id} from {region.url}")
            return region

        region.hidden = not region.hidden
        return region

    def _load(self, region: Region) -> List[str]:
        if self.loader is None or not region.url:
            return [PLACEHOLDER]
        return self.loader(region.url) or [PLACEHOLDER]

    def expand_all(self, include_lazy: bool = True) -> None:
        """Show every toggle, loading lazy ones if include_lazy is set."""
        # Loading may add nothing but body lines, so a snapshot of ids is enough.
        for region_id in list(self.regions):
            region = self.regions[region_id]
            if not region.clickable or not region.hidden:
                continue
            if region.kind == LAZY and not region.loaded and not include_lazy:
                continue
            self.activate(region_id)

    def _walk(self, region_id: int, depth: int) -> Iterator[Line]:
        region = self.regions[region_id]
        indent = INDENT * depth

        if region.kind == HEADING:
            yield Line(region.label, region.id, "heading")
            return

        if region.kind == TEXT:
            for text in region.label.splitlines() or [""]:
                yield Line(indent + text, region.id, "text")
        else:
            marker = HIDDEN_MARKER if region.hidden else VISIBLE_MARKER
            yield Line(indent + marker + region.label, region.id, "label")
            if region.hidden:
                return

        content_indent = INDENT * (depth + 1)
        for text in region.body:
            yield Line(content_indent + text if text else "", region.id, "content")
        for child in region.children:
            yield from self._walk(child, depth + 1)

    def lines(self) -> List[Line]:
        """Lay out the currently visible lines."""
        out: List[Line] = []
        for root in self.roots:
            out.extend(self._walk(root, 0))
        return out

    def text(self) -> str:
        return "\n".join(line.text for line in self.lines())

    def spans(self) -> List[Span]:
        """
        Region table for the current layout, in document order.

        A span runs from a region's first line to the last line of its visible
        body and children. Regions inside a hidden toggle have no span.
        """
        lines = self.lines()
        first: Dict[int, int] = {}
        last: Dict[int, int] = {}
        for index, line in enumerate(lines):
            first.setdefault(line.region_id, index)
            # Extend the region and all of its ancestors to this line.
            region_id: Optional[int] = line.region_id
            while region_id is not None:
                last[region_id] = index
                region_id = self.regions[region_id].parent

        spans = []
        for region_id, start in first.items():
            region = self.regions[region_id]
            spans.append(Span(region_id, start, last[region_id], region.kind, region.hidden, region.loaded))
        return spans

    def find_heading(self, name: str) -> Optional[Region]:
        """First heading region with this name, scanning from the top."""
        for root in self.roots:
            region = self.regions[root]
            if region.kind == HEADING and region.label == name:
                return region
        return None
