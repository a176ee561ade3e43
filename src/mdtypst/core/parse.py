"""markdown-it tokenization flattened into a lazy event stream"""

import logging
from collections.abc import Iterable, Iterator

from markdown_it import MarkdownIt

from mdtypst.core.models import Event, EventKind
from mdtypst.core.utils.tokens import heading_level


logger = logging.getLogger(__name__)

BLOCK_EVENT_MAP: dict[str, EventKind] = {
    'heading_close':      EventKind.heading_end,
    'paragraph_open':     EventKind.paragraph_start,
    'paragraph_close':    EventKind.paragraph_end,
    'bullet_list_open':   EventKind.list_start,
    'ordered_list_open':  EventKind.list_start,
    'bullet_list_close':  EventKind.list_end,
    'ordered_list_close': EventKind.list_end,
    'list_item_open':     EventKind.item_start,
    'list_item_close':    EventKind.item_end,
    'hr':                 EventKind.rule,
}

INLINE_EVENT_MAP: dict[str, EventKind] = {
    'softbreak':    EventKind.soft_break,
    'em_open':      EventKind.emphasis_start,
    'em_close':     EventKind.emphasis_end,
    'strong_open':  EventKind.strong_start,
    'strong_close': EventKind.strong_end,
}

TEXT_TOKENS = {'text', 'text_special'}
CODE_BLOCK_TOKENS = {'fence', 'code_block'}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _inline_events(children: Iterable) -> Iterator[Event]:
    for tok in children:
        if tok.type in TEXT_TOKENS:
            yield Event(EventKind.text, text=tok.content)
        elif tok.type == 'code_inline':
            yield Event(EventKind.code, text=tok.content)
        elif tok.type == 'image':
            # alt text is carried as children; the image itself has no markup
            yield from _inline_events(tok.children or [])
        elif tok.type in INLINE_EVENT_MAP:
            yield Event(INLINE_EVENT_MAP[tok.type])
        else:
            yield Event(EventKind.other, text=tok.type)


def tokens_to_events(tokens: Iterable) -> Iterator[Event]:
    """Flatten block tokens and their inline children into a single event sequence."""
    for tok in tokens:
        if tok.type == 'heading_open':
            yield Event(EventKind.heading_start, level=heading_level(tok))
        elif tok.type in ('paragraph_open', 'paragraph_close') and tok.hidden:
            # tight list items carry hidden paragraphs
            continue
        elif tok.type == 'inline':
            yield from _inline_events(tok.children or [])
        elif tok.type in CODE_BLOCK_TOKENS:
            yield Event(EventKind.code_block_start)
            yield Event(EventKind.text, text=tok.content)
            yield Event(EventKind.code_block_end)
        elif tok.type in BLOCK_EVENT_MAP:
            yield Event(BLOCK_EVENT_MAP[tok.type])
        else:
            yield Event(EventKind.other, text=tok.type)


def iter_events(body: str, parser_config: str = 'commonmark') -> Iterator[Event]:
    """Parse a markdown body and yield its structural events in document order."""
    logger.debug("Parsing body with markdown-it preset %r", parser_config)
    return tokens_to_events(_make_parser(parser_config).parse(body))
