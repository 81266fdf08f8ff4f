"""
Shared fixtures: rendered OCR documents, a fake clock for notice
timers, and clipboard/applier fakes.
"""

import sched
from typing import Dict, List, Optional, Sequence

import pytest

from ocrdoc.document.xhtml_reader import parse_document_string
from xhtml_controls.navigation.applier import BaseEffectApplier
from xhtml_controls.notify.clipboard import BaseClipboard, ClipboardError

XHTML_NS = "http://www.w3.org/1999/xhtml"


def render_document(
    pages: Sequence[Sequence[Sequence[str]]],
    pages_count: Optional[str] = None,
    page_attrs: Optional[Sequence[Dict[str, str]]] = None,
    with_ids: bool = True,
) -> str:
    """
    Render markup the way the OCR renderer lays it out.

    *pages* is a list of pages, each a list of segments, each a list of
    words.
    """
    head = ""
    if pages_count is not None:
        head = f'<meta name="pagesCount" content="{pages_count}"/>'

    sections = []
    for idx, segments in enumerate(pages):
        attrs = {"class": "win11OneOcrPage"}
        if with_ids:
            attrs["id"] = f"page-{idx + 1}"
        if page_attrs is not None:
            attrs.update(page_attrs[idx])
        attr_text = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        body = "".join(
            "<segment>" + "".join(f"<w>{w}</w>" for w in words) + "</segment>"
            for words in segments
        )
        sections.append(f"<section {attr_text}>{body}</section>")

    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<html xmlns="{XHTML_NS}"><head><title>scan</title>{head}</head>'
        f"<body>{''.join(sections)}</body></html>"
    )


@pytest.fixture
def make_root():
    """Factory: parsed root element for the given page structure."""

    def _make(pages, **kwargs):
        return parse_document_string(render_document(pages, **kwargs))

    return _make


@pytest.fixture
def two_page_root(make_root):
    return make_root([[["Hello", "World"]], [["Foo"]]], pages_count="2")


@pytest.fixture
def three_page_root(make_root):
    return make_root([[["one"]], [["two"]], [["three"]]], pages_count="3")


@pytest.fixture
def two_page_file(tmp_path):
    path = tmp_path / "scan.xhtml"
    path.write_text(
        render_document([[["Hello", "World"]], [["Foo"]]], pages_count="2"),
        encoding="utf-8",
    )
    return path


# ------------------------------------------------------------------
# Time
# ------------------------------------------------------------------


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self):
        self.now = 0.0

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return sched.scheduler(clock.time, clock.sleep)


@pytest.fixture
def advance(clock, scheduler):
    """Move the clock forward and fire whatever became due."""

    def _advance(seconds: float) -> None:
        clock.now += seconds
        scheduler.run(blocking=False)

    return _advance


# ------------------------------------------------------------------
# Fakes
# ------------------------------------------------------------------


class FakeClipboard(BaseClipboard):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.copies: List[str] = []

    def copy(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("no display")
        self.copies.append(text)

    @property
    def backend_name(self) -> str:
        return "fake"


class RecordingApplier(BaseEffectApplier):
    """Applier that records calls; only the given anchors exist."""

    def __init__(self, anchors=()):
        self.anchors = set(anchors)
        self.calls = []

    def set_field_value(self, control_id, value):
        self.calls.append(("field", control_id, value))

    def scroll_into_view(self, anchor_id):
        self.calls.append(("scroll", anchor_id))
        return anchor_id in self.anchors

    def set_control_enabled(self, control_id, enabled):
        self.calls.append(("enabled", control_id, enabled))


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def broken_clipboard():
    return FakeClipboard(fail=True)


@pytest.fixture
def recorder():
    return RecordingApplier(anchors={"page-1", "page-2", "page-3"})
