"""
Document reading for rendered OCR output.

Parses the XHTML written by the OCR renderer and answers the one
question both the page navigator and the text extractor depend on:
how many pages does this document have.
"""

import logging
import re
from pathlib import Path
from typing import Union

import lxml.html
from lxml import etree

from ocrdoc.page.markup import find_page_nodes, find_pages_count_meta, parse_int

logger = logging.getLogger(__name__)

_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)

# lxml refuses str input that still carries an encoding declaration
_RE_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


def parse_document_string(data: Union[str, bytes]):
    """
    Parse rendered OCR markup held in memory.

    Tries a strict XML parse first (the renderer writes XHTML) and falls
    back to the lenient HTML parser when the markup is not well-formed,
    e.g. when it uses HTML-only entities such as ``&nbsp;``.

    Text input is already decoded, so its XML declaration is dropped
    before parsing and the declared encoding is not applied again.

    Returns:
        The root element of the parsed document.

    Raises:
        RuntimeError: If neither parser accepts the input.
    """
    if isinstance(data, str):
        data = _RE_XML_DECLARATION.sub("", data, count=1)

    try:
        return etree.fromstring(data, _XML_PARSER)
    except etree.XMLSyntaxError as e:
        logger.debug("XML parse failed (%s), retrying with HTML parser", e)

    try:
        return lxml.html.document_fromstring(data)
    except (etree.ParserError, ValueError) as e:
        raise RuntimeError(f"Failed to parse document: {e}") from e


def parse_document(path: Union[str, Path]):
    """
    Parse a rendered OCR document from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise RuntimeError(f"Failed to read document '{path}': {e}") from e

    try:
        return parse_document_string(data)
    except RuntimeError as e:
        raise RuntimeError(f"Failed to parse document '{path}': {e}") from e


def resolve_page_count(root) -> int:
    """
    Resolve the page count of a rendered document.

    The ``pagesCount`` meta field is authoritative when present and a
    valid non-negative integer.  Otherwise the page containers in the
    tree are counted.  Never raises.

    Returns:
        Page count (0 when the document has no pages).
    """
    meta = find_pages_count_meta(root)
    if meta is not None:
        content = meta.get("content")
        count = parse_int(content)
        if count is not None and count >= 0:
            return count
        logger.debug(
            "Unusable pagesCount metadata %r, counting page containers", content
        )

    return len(find_page_nodes(root))
