"""Unit tests for core/render.py"""

import io

import pytest

from mdtypst.core.models import DocumentMetadata, Event, EventKind
from mdtypst.core.parse import iter_events
from mdtypst.core.render import PAGE_SETUP, event_markup, render_events, write_page_setup


def _render(md: str) -> str:
    buf = io.StringIO()
    render_events(buf, iter_events(md))
    return buf.getvalue()


# --- page setup ---

def test_page_setup_without_title(sink):
    """Without a title only the fixed directives and a blank line are written."""
    write_page_setup(sink, DocumentMetadata())
    assert sink.getvalue() == (
        '#set page(paper: "a4")\n'
        '#set text(font: "SimSun", size: 12pt, lang: "zh")\n'
        '#set par(leading: 1.5em, first-line-indent: 2em)\n'
        '\n'
    )


def test_page_setup_with_title(sink):
    """A title adds a binding, a blank line, and a centered bold heading block."""
    write_page_setup(sink, DocumentMetadata(title="T"))
    assert sink.getvalue() == PAGE_SETUP + (
        '#let title = "T"\n'
        '\n'
        '#align(center, text(size: 22pt, weight: "bold")[T])\n'
        '#v(1em)\n'
        '\n'
    )


def test_page_setup_title_unescaped(sink):
    """Quotes in the title are written as-is."""
    write_page_setup(sink, DocumentMetadata(title='A "B"'))
    assert '#let title = "A "B""\n' in sink.getvalue()


# --- single events ---

@pytest.mark.parametrize("event,expected", [
    (Event(EventKind.heading_start, level=2), "#heading(level: 2)["),
    (Event(EventKind.heading_end), "]\n\n"),
    (Event(EventKind.paragraph_start), ""),
    (Event(EventKind.paragraph_end), "\n\n"),
    (Event(EventKind.text, text="a #b [c]"), "a #b [c]"),
    (Event(EventKind.soft_break), "\n"),
    (Event(EventKind.list_start), ""),
    (Event(EventKind.list_end), "\n"),
    (Event(EventKind.item_start), "- "),
    (Event(EventKind.item_end), "\n"),
    (Event(EventKind.emphasis_start), "#emph["),
    (Event(EventKind.emphasis_end), "]"),
    (Event(EventKind.strong_start), "#strong["),
    (Event(EventKind.strong_end), "]"),
    (Event(EventKind.rule), "#line(length: 100%)\n\n"),
    (Event(EventKind.code, text='say "hi"'), '#raw("say "hi"")'),
    (Event(EventKind.code_block_start), "```\n"),
    (Event(EventKind.code_block_end), "```\n\n"),
    (Event(EventKind.other, text="table_open"), ""),
])
def test_event_markup(event, expected):
    assert event_markup(event) == expected


def test_every_event_kind_has_markup():
    """The mapping is total over EventKind."""
    for kind in EventKind:
        assert isinstance(event_markup(Event(kind, level=1)), str)


def test_unrecognised_events_write_nothing(sink):
    """A stream of only unrecognised events produces zero output."""
    events = [Event(EventKind.other, text=t) for t in ("table_open", "html_block", "footnote_ref")]
    render_events(sink, events)
    assert sink.getvalue() == ""


def test_unbalanced_events_are_not_validated(sink):
    """Nesting is trusted: an unmatched end is rendered without complaint."""
    render_events(sink, [Event(EventKind.strong_end), Event(EventKind.heading_end)])
    assert sink.getvalue() == "]]\n\n"


def test_write_failure_propagates():
    """A failing sink aborts the pass; earlier writes are kept."""
    class FailingSink:
        def __init__(self):
            self.written = []

        def write(self, s):
            if len(self.written) == 2:
                raise BrokenPipeError("closed")
            self.written.append(s)

    out = FailingSink()
    with pytest.raises(BrokenPipeError):
        render_events(out, iter_events("a *b* c\n"))
    assert out.written == ["a ", "#emph["]


# --- markdown to markup ---

def test_horizontal_rule_alone():
    assert _render("***\n") == "#line(length: 100%)\n\n"


def test_code_block_verbatim():
    """Code content passes through with no transformation."""
    assert _render("```\nx = 1\n```\n") == "```\nx = 1\n```\n\n"


def test_heading():
    assert _render("## Section\n") == "#heading(level: 2)[Section]\n\n"


def test_paragraph_inline_styles():
    assert _render("Some *italic* and **bold** text.\n") == (
        "Some #emph[italic] and #strong[bold] text.\n\n"
    )


def test_nested_styles():
    assert _render("***both***\n") == "#emph[#strong[both]]\n\n"


def test_tight_list():
    assert _render("- one\n- two\n") == "- one\n- two\n\n"


def test_soft_break_kept():
    assert _render("line one\nline two\n") == "line one\nline two\n\n"


def test_inline_code_unescaped():
    assert _render('Run `echo "x"` now\n') == 'Run #raw("echo "x"") now\n\n'


def test_image_renders_alt_text():
    assert _render("![a cat](cat.png)\n") == "a cat\n\n"


def test_html_block_renders_nothing():
    assert _render("<div>raw</div>\n") == ""
