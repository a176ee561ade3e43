"""Typst emission: fixed page setup and the event-to-markup transcoder

Text runs, inline code and the title are written verbatim. Characters that
are significant in Typst (quotes, brackets, `#`) are not escaped, so such
input can produce invalid markup.
"""

from collections.abc import Iterable
from typing import TextIO

from mdtypst.core.models import DocumentMetadata, Event, EventKind


PAGE_SETUP = (
    '#set page(paper: "a4")\n'
    '#set text(font: "SimSun", size: 12pt, lang: "zh")\n'
    '#set par(leading: 1.5em, first-line-indent: 2em)\n'
    '\n'
)

FENCE = "```"

# Events whose markup does not depend on the event payload.
STATIC_MARKUP: dict[EventKind, str] = {
    EventKind.heading_end:      "]\n\n",
    EventKind.paragraph_start:  "",
    EventKind.paragraph_end:    "\n\n",
    EventKind.soft_break:       "\n",
    EventKind.list_start:       "",
    EventKind.list_end:         "\n",
    EventKind.item_start:       "- ",
    EventKind.item_end:         "\n",
    EventKind.emphasis_start:   "#emph[",
    EventKind.emphasis_end:     "]",
    EventKind.strong_start:     "#strong[",
    EventKind.strong_end:       "]",
    EventKind.rule:             "#line(length: 100%)\n\n",
    EventKind.code_block_start: f"{FENCE}\n",
    EventKind.code_block_end:   f"{FENCE}\n\n",
    EventKind.other:            "",
}


def write_page_setup(out: TextIO, meta: DocumentMetadata) -> None:
    """Write the fixed page/text/paragraph directives, then the title block if any."""
    out.write(PAGE_SETUP)
    if meta.title:
        out.write(f'#let title = "{meta.title}"\n')
        out.write("\n")
        out.write(f'#align(center, text(size: 22pt, weight: "bold")[{meta.title}])\n')
        out.write("#v(1em)\n")
        out.write("\n")


def event_markup(event: Event) -> str:
    """Return the Typst markup for a single event."""
    if event.kind == EventKind.heading_start:
        return f"#heading(level: {event.level})["
    if event.kind == EventKind.text:
        return event.text
    if event.kind == EventKind.code:
        return f'#raw("{event.text}")'
    return STATIC_MARKUP[event.kind]


def render_events(out: TextIO, events: Iterable[Event]) -> None:
    """Transcode events to Typst in a single forward pass.

    Balanced start/end pairs are trusted, not checked. A failed write
    propagates immediately; anything already written stays written.
    """
    for event in events:
        markup = event_markup(event)
        if markup:
            out.write(markup)
