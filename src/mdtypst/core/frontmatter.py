"""YAML frontmatter splitting and decoding"""

import logging

import yaml
from pydantic import ValidationError

from mdtypst.core.models import DocumentMetadata


logger = logging.getLogger(__name__)

DELIMITER = "---"
CLOSING = "\n" + DELIMITER


class FrontmatterError(ValueError):
    """Raised when a non-empty frontmatter block is not a valid YAML mapping."""


def split_frontmatter(raw: str) -> tuple[str, str]:
    """Return (frontmatter, body); the opener must be the literal first line.

    A missing closing delimiter is not an error: the whole input is treated
    as body so nothing is lost.
    """
    if raw.startswith(DELIMITER + "\r\n"):
        rest = raw[5:]
    elif raw.startswith(DELIMITER + "\n"):
        rest = raw[4:]
    else:
        return "", raw

    idx = rest.find(CLOSING)
    if idx == -1:
        logger.debug("No closing frontmatter delimiter; treating input as body")
        return "", raw

    fm = rest[:idx]
    after = rest[idx + len(CLOSING):]
    if after.startswith("\n"):
        body = after[1:]
    elif after.startswith("\r\n"):
        body = after[2:]
    else:
        body = after
    logger.debug("Split frontmatter: %d chars, body: %d chars", len(fm), len(body))
    return fm, body


def decode_frontmatter(fm: str) -> DocumentMetadata:
    """Decode frontmatter text into DocumentMetadata; empty text yields the defaults."""
    if not fm:
        return DocumentMetadata()

    try:
        data = yaml.safe_load(fm)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML frontmatter: {e}") from e

    if data is None:
        logger.debug("Frontmatter holds no values; using defaults")
        return DocumentMetadata()
    if not isinstance(data, dict):
        raise FrontmatterError(f"Invalid YAML frontmatter: expected a mapping, got {type(data).__name__}")

    try:
        return DocumentMetadata.model_validate(data)
    except ValidationError as e:
        raise FrontmatterError(f"Invalid frontmatter field: {e}") from e
