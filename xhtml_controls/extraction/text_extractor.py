"""
Plain-text serialization of a whole rendered OCR document.

Output layout::

    === Page 1 ===
    first segment words
    second segment words

    === Page 2 ===
    ...

Pages are walked in document order; the label comes from the page's
declared ``pageNum`` when it parses, otherwise from its position.
"""

import logging
from typing import List

from ocrdoc.page.markup import declared_page_number, find_page_nodes
from ocrdoc.page.models import PageInfo
from ocrdoc.page.page_model import PageModel

from .models import CopyOutcome, ShowNotice, WriteClipboard

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"
NO_TEXT_MESSAGE = "No text content found to copy"


def copied_message(pages_processed: int) -> str:
    return f"Copied text from {pages_processed} pages to clipboard"


def page_label(page_node, index: int) -> int:
    """Declared ordinal of *page_node*, else ``index + 1``."""
    declared = declared_page_number(page_node)
    return declared if declared is not None else index + 1


def serialize_page(page: PageInfo) -> str:
    """
    Serialize one page: header line, then one line per segment.

    Words are joined with a single space and segments with a single
    newline, so a page without segments is just the header plus a
    newline.
    """
    return page.header + "\n" + page.text


def extract_pages(root) -> List[PageInfo]:
    """Structured text for every page container, in document order."""
    return [PageModel(node, idx).info for idx, node in enumerate(find_page_nodes(root))]


def extract_all_pages_text(root) -> str:
    """
    Serialize every page of the document into one string.

    Consecutive pages are separated by one blank line; there is no
    leading separator and no trailing newline.  The tree is not
    modified.
    """
    return PAGE_SEPARATOR.join(serialize_page(page) for page in extract_pages(root))


def on_copy_requested(root) -> CopyOutcome:
    """
    Decide what the copy-all action should do for the current tree.

    Returns:
        A :class:`CopyOutcome` whose effects are either a clipboard write
        followed by a success notice, or a single error notice when the
        serialized text is empty or whitespace.
    """
    pages = extract_pages(root)
    text = PAGE_SEPARATOR.join(serialize_page(page) for page in pages)
    outcome = CopyOutcome(text=text, pages_processed=len(pages))

    if outcome.has_text:
        outcome.effects.append(WriteClipboard(text))
        outcome.effects.append(ShowNotice(copied_message(len(pages))))
    else:
        logger.debug("Nothing to copy from %d page containers", len(pages))
        outcome.effects.append(ShowNotice(NO_TEXT_MESSAGE, is_error=True))

    return outcome
