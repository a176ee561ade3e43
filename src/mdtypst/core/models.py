"""Data models for frontmatter metadata and the flat markdown event stream"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class DocumentMetadata(BaseModel):
    """Recognised frontmatter fields; unknown keys are dropped."""
    title: str = ""


class EventKind(str, Enum):
    heading_start    = "heading_start"
    heading_end      = "heading_end"
    paragraph_start  = "paragraph_start"
    paragraph_end    = "paragraph_end"
    text             = "text"
    soft_break       = "soft_break"
    list_start       = "list_start"
    list_end         = "list_end"
    item_start       = "item_start"
    item_end         = "item_end"
    emphasis_start   = "emphasis_start"
    emphasis_end     = "emphasis_end"
    strong_start     = "strong_start"
    strong_end       = "strong_end"
    rule             = "rule"
    code             = "code"
    code_block_start = "code_block_start"
    code_block_end   = "code_block_end"
    other            = "other"


@dataclass(frozen=True)
class Event:
    """A single structural event; start/end pairs arrive balanced and properly nested."""
    kind:  EventKind
    level: Optional[int] = None     # heading level (1-6); None for non-headings
    text:  str = ""                 # text run, inline code, or source token type for `other`
