"""Conversion pipeline: frontmatter -> page setup -> transcoded body"""

import io
from typing import TextIO

from mdtypst.core.frontmatter import decode_frontmatter, split_frontmatter
from mdtypst.core.parse import iter_events
from mdtypst.core.render import render_events, write_page_setup


def run_convert(raw: str, out: TextIO, parser_config: str = 'commonmark') -> None:
    """Convert a raw markdown document (with optional frontmatter) into Typst written to out.

    Raises FrontmatterError before anything is written when the frontmatter
    block is malformed.
    """
    fm, body = split_frontmatter(raw)
    meta = decode_frontmatter(fm)
    write_page_setup(out, meta)
    render_events(out, iter_events(body, parser_config))


def convert(raw: str, parser_config: str = 'commonmark') -> str:
    """Return the Typst source for raw as a string."""
    buf = io.StringIO()
    run_convert(raw, buf, parser_config)
    return buf.getvalue()
