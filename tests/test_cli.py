"""
Test the file-level adapter and the ``ocrctl`` command line.

Usage:
    pytest tests/test_cli.py
"""

import logging

import pyperclip
import pytest

import ocrctl
from ocrdoc.document.xhtml_reader import parse_document
from ocrdoc.page.markup import find_by_id
from xhtml_controls.navigation.models import PAGE_INPUT_ID
from xhtml_controls.utils.xhtml_adapter import (
    XHTMLAdapter,
    extract_all_pages,
    get_page_count,
)

from conftest import render_document


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    for name in ("xhtml_controls", "ocrdoc"):
        log = logging.getLogger(name)
        log.handlers.clear()
        log.setLevel(logging.NOTSET)


@pytest.fixture
def html_file(tmp_path):
    path = tmp_path / "scan.html"
    path.write_text(
        "<html><head><meta name='pagesCount' content='2'></head><body>"
        "<section class='win11OneOcrPage'><segment><w>caf&eacute;</w></segment></section>"
        "<section class='win11OneOcrPage'></section>"
        "</body></html>",
        encoding="utf-8",
    )
    return path


# -- adapter ------------------------------------------------------------------


def test_adapter_functions(two_page_file):
    assert get_page_count(two_page_file) == 2

    pages = extract_all_pages(two_page_file)
    assert sorted(pages) == [0, 1]
    assert pages[0].text == "Hello World"
    assert pages[1].header == "=== Page 2 ==="


def test_adapter_page_structure(two_page_file):
    with XHTMLAdapter(two_page_file) as doc:
        assert doc.page_count == 2
        assert doc.page_structure(1).text == "Foo"
        with pytest.raises(IndexError):
            doc.page_structure(2)
        assert "pages=2" in repr(doc)


def test_adapter_write_roundtrip(two_page_file, tmp_path):
    doc = XHTMLAdapter(two_page_file)
    out = doc.write(tmp_path / "copy.xhtml")

    assert out.read_bytes().startswith(b"<?xml")
    assert get_page_count(out) == 2


def test_adapter_html_document(html_file, tmp_path):
    doc = XHTMLAdapter(html_file)
    assert doc.page_count == 2
    assert doc.page_structure(0).text == "café"

    out = doc.write(tmp_path / "out.html")
    assert not out.read_bytes().startswith(b"<?xml")


def test_adapter_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        XHTMLAdapter(tmp_path / "missing.xhtml")


# -- command line -------------------------------------------------------------


def test_cli_count(two_page_file, capsys):
    assert ocrctl.main(["count", str(two_page_file)]) == 0
    assert capsys.readouterr().out == "2\n"


def test_cli_count_list(two_page_file, capsys):
    assert ocrctl.main(["count", "--list", str(two_page_file)]) == 0
    err = capsys.readouterr().err
    assert "anchor=page-1" in err
    assert "anchor=page-2" in err


def test_cli_extract_stdout(two_page_file, capsys):
    assert ocrctl.main(["extract", str(two_page_file)]) == 0
    assert capsys.readouterr().out == "=== Page 1 ===\nHello World\n\n=== Page 2 ===\nFoo\n"


def test_cli_extract_several_files(two_page_file, tmp_path):
    second = tmp_path / "second.xhtml"
    second.write_text(render_document([[["Bar"]]]), encoding="utf-8")
    out = tmp_path / "all.txt"

    code = ocrctl.main(
        ["extract", str(two_page_file), str(second), "--output", str(out), "--no-progress"]
    )

    assert code == 0
    assert out.read_text(encoding="utf-8") == (
        "=== Page 1 ===\nHello World\n\n=== Page 2 ===\nFoo\n\n=== Page 1 ===\nBar"
    )


def test_cli_missing_input(tmp_path):
    with pytest.raises(SystemExit) as exc:
        ocrctl.main(["count", str(tmp_path / "missing.xhtml")])
    assert exc.value.code == 1


def test_cli_navigate(two_page_file, capsys):
    assert ocrctl.main(["navigate", str(two_page_file), "--page", "9"]) == 0
    assert capsys.readouterr().out == "page 2 / 2\n"


def test_cli_navigate_relative(two_page_file, capsys):
    code = ocrctl.main(["navigate", str(two_page_file), "--offset", "-1", "--from", "2"])
    assert code == 0
    assert capsys.readouterr().out == "page 1 / 2\n"


def test_cli_inject(two_page_file, tmp_path):
    out = tmp_path / "with-controls.xhtml"
    assert ocrctl.main(["inject", str(two_page_file), "--output", str(out)]) == 0

    root = parse_document(out)
    assert find_by_id(root, PAGE_INPUT_ID).get("max") == "2"


def test_cli_inject_default_output(two_page_file):
    assert ocrctl.main(["inject", str(two_page_file)]) == 0
    assert (two_page_file.parent / "scan.controls.xhtml").exists()


def test_cli_extract_copy(two_page_file, monkeypatch, capsys):
    copies = []
    monkeypatch.setattr(pyperclip, "copy", copies.append)

    assert ocrctl.main(["extract", "--copy", str(two_page_file)]) == 0
    assert copies == ["=== Page 1 ===\nHello World\n\n=== Page 2 ===\nFoo"]
    assert "Copied text from 2 pages to clipboard" in capsys.readouterr().err
