"""
File-level adapter for rendered OCR documents.

Provides small functions to open a document and pull page structure
out of it, plus a stateful adapter that keeps the parsed tree around
for several operations (and writes it back when controls are injected).
"""

from pathlib import Path
from typing import Dict, List, Union

import lxml.html
from lxml import etree

from ocrdoc.document.xhtml_reader import parse_document, resolve_page_count
from ocrdoc.page.markup import find_page_nodes
from ocrdoc.page.models import PageInfo
from ocrdoc.page.page_model import PageModel


def open_document(path: Union[str, Path]):
    """
    Parse a rendered OCR document.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read or parsed.
    """
    return parse_document(path)


def get_page_count(path: Union[str, Path]) -> int:
    """Return the resolved page count of the document at *path*."""
    return resolve_page_count(open_document(path))


def extract_all_pages(path: Union[str, Path]) -> Dict[int, PageInfo]:
    """
    Extract structured text for every page container in the document.

    Returns:
        Dict mapping 0-based page position → PageInfo.
    """
    root = open_document(path)
    return {
        idx: PageModel(node, idx).info
        for idx, node in enumerate(find_page_nodes(root))
    }


class XHTMLAdapter:
    """
    Stateful adapter that keeps one parsed document open across
    navigation, extraction and injection.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.root = open_document(self.path)
        self._pages = [
            PageModel(node, idx) for idx, node in enumerate(find_page_nodes(self.root))
        ]

    @property
    def page_count(self) -> int:
        """Resolved page count (metadata first, containers second)."""
        return resolve_page_count(self.root)

    @property
    def pages(self) -> List[PageModel]:
        return list(self._pages)

    def page_structure(self, page_index: int) -> PageInfo:
        """Return the PageInfo for the container at *page_index*."""
        if page_index < 0 or page_index >= len(self._pages):
            raise IndexError(
                f"Page index {page_index} out of range "
                f"(document has {len(self._pages)} page containers)"
            )
        return self._pages[page_index].info

    def to_bytes(self) -> bytes:
        """Serialize the (possibly modified) tree."""
        tree = self.root.getroottree()
        if isinstance(self.root, lxml.html.HtmlElement):
            return etree.tostring(tree, method="html", encoding="utf-8")
        return etree.tostring(tree, xml_declaration=True, encoding="utf-8")

    def write(self, output_path: Union[str, Path]) -> Path:
        """Write the tree to *output_path* and return the path."""
        output_path = Path(output_path)
        output_path.write_bytes(self.to_bytes())
        return output_path

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __repr__(self):
        return f"XHTMLAdapter('{self.path}', pages={self.page_count})"
