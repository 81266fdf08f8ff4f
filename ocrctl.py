#!/usr/bin/env python3
"""
OCR XHTML controls: CLI entry point.

Works on documents written by the OCR renderer (page sections holding
segments holding words): resolve the page count, extract the text of
every page, simulate page navigation, or inject the navigation and
copy-all controls into the markup.

Usage::

    python ocrctl.py count scan.xhtml
    python ocrctl.py extract scan.xhtml
    python ocrctl.py extract a.xhtml b.xhtml --output all.txt
    python ocrctl.py extract scan.xhtml --copy
    python ocrctl.py navigate scan.xhtml --page 12
    python ocrctl.py navigate scan.xhtml --offset 1 --from 4
    python ocrctl.py inject scan.xhtml --output scan.controls.xhtml

Verbosity levels::

    -v 0   Quiet: warnings and errors only.
    -v 1   Normal: results and notices (default).
    -v 2   Debug: every navigation effect and notice transition.
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from xhtml_controls.controller import ControlsConfig, OcrControls
from xhtml_controls.extraction.text_extractor import (
    PAGE_SEPARATOR,
    extract_all_pages_text,
    page_label,
)
from xhtml_controls.navigation.models import NavigateCommand
from xhtml_controls.notify.notice import Notice, NoticeState
from xhtml_controls.utils.xhtml_adapter import XHTMLAdapter

logger = logging.getLogger("xhtml_controls")

# Mapping from --verbose integer to logging level
_VERBOSITY_MAP = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


# ------------------------------------------------------------------
# Argument parsing
# ------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser with all sub-commands."""
    p = argparse.ArgumentParser(
        description="Page navigation and copy-all for rendered OCR XHTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  python ocrctl.py count scan.xhtml\n"
            "  python ocrctl.py extract scan.xhtml --copy\n"
            "  python ocrctl.py navigate scan.xhtml --offset -1 --from 3\n"
            "  python ocrctl.py inject scan.xhtml --output out.xhtml\n"
        ),
    )
    p.add_argument(
        "-v",
        "--verbose",
        type=int,
        choices=[0, 1, 2],
        default=1,
        help="Verbosity: 0=quiet, 1=normal (default), 2=debug",
    )
    sub = p.add_subparsers(dest="command", required=True)

    # -- count -------------------------------------------------------------
    count = sub.add_parser("count", help="Print the resolved page count")
    count.add_argument("input", help="Rendered OCR document")
    count.add_argument(
        "--list",
        action="store_true",
        help="Also list every page container with its label",
    )

    # -- extract -----------------------------------------------------------
    extract = sub.add_parser("extract", help="Extract the plain text of every page")
    extract.add_argument("inputs", nargs="+", help="One or more rendered OCR documents")
    extract.add_argument(
        "--output",
        default=None,
        metavar="PATH",
        help="Write the text here instead of stdout",
    )
    extract.add_argument(
        "--copy",
        action="store_true",
        help="Copy the text to the system clipboard and show the notice",
    )
    extract.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )

    # -- navigate ----------------------------------------------------------
    nav = sub.add_parser("navigate", help="Show the result of a navigation request")
    nav.add_argument("input", help="Rendered OCR document")
    target = nav.add_mutually_exclusive_group(required=True)
    target.add_argument("--page", type=int, help="Absolute page to go to")
    target.add_argument("--offset", type=int, help="Relative move (e.g. -1, 1)")
    nav.add_argument(
        "--from",
        dest="from_page",
        default=None,
        metavar="TEXT",
        help="Page-input value before the move (default: 1)",
    )

    # -- inject ------------------------------------------------------------
    inject = sub.add_parser("inject", help="Write the document with controls injected")
    inject.add_argument("input", help="Rendered OCR document")
    inject.add_argument(
        "--output",
        default=None,
        metavar="PATH",
        help="Output path (default: <input>.controls<suffix>)",
    )

    return p


# ------------------------------------------------------------------
# Logging setup
# ------------------------------------------------------------------


def _configure_logging(verbosity: int) -> None:
    """
    Set up the ``xhtml_controls`` and ``ocrdoc`` loggers.

    At verbosity 0 (WARNING), uses a minimal format.  At 2 (DEBUG),
    includes timestamps and module names for traceability.
    """
    level = _VERBOSITY_MAP.get(verbosity, logging.INFO)

    if level <= logging.DEBUG:
        fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
        datefmt = "%H:%M:%S"
    elif level <= logging.INFO:
        fmt = "%(message)s"
        datefmt = None
    else:
        fmt = "%(levelname)s: %(message)s"
        datefmt = None

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    for name in ("xhtml_controls", "ocrdoc"):
        root = logging.getLogger(name)
        root.setLevel(level)
        root.handlers.clear()
        root.addHandler(handler)


def _log_notice(notice: Notice) -> None:
    """Notice renderer for the terminal."""
    if notice.state is NoticeState.VISIBLE:
        if notice.is_error:
            logger.error(notice.message)
        else:
            logger.info(notice.message)


def _open(path: str) -> XHTMLAdapter:
    """Open *path* or exit with status 1."""
    try:
        return XHTMLAdapter(path)
    except (FileNotFoundError, RuntimeError) as e:
        logger.error("%s", e)
        sys.exit(1)


# ------------------------------------------------------------------
# Sub-commands
# ------------------------------------------------------------------


def _cmd_count(parser, args) -> int:
    doc = _open(args.input)
    print(doc.page_count)
    if args.list:
        for page in doc.pages:
            label = page_label(page.node, page.page_index)
            anchor = page.anchor_id or "-"
            logger.info(
                "  #%-4d label=%-6d words=%-6d anchor=%s",
                page.page_index + 1,
                label,
                page.info.word_count,
                anchor,
            )
    return 0


def _cmd_extract(parser, args) -> int:
    config = ControlsConfig(
        copy_to_clipboard=args.copy,
        inject_view=False,
        disable_tqdm=args.no_progress or args.verbose == 0 or len(args.inputs) == 1,
    )

    if args.copy:
        if len(args.inputs) != 1:
            parser.error("--copy works on a single document")
        doc = _open(args.inputs[0])
        controls = OcrControls(doc.root, config)
        controls.notices.add_renderer(_log_notice)
        result = controls.on_copy_requested()
        logger.debug("\n%s", result.summary())
        # Let the notice run its course before the process exits
        controls.notices.wait()
        return 1 if result.is_error else 0

    blobs = []
    pbar = tqdm(args.inputs, desc="Extracting", unit="doc", disable=config.disable_tqdm)
    for path in pbar:
        doc = _open(path)
        text = extract_all_pages_text(doc.root)
        if not text.strip():
            logger.warning("No text content found in %s", path)
        blobs.append(text)

    output = PAGE_SEPARATOR.join(blobs)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Wrote %d chars to %s", len(output), args.output)
    else:
        sys.stdout.write(output)
        if output:
            sys.stdout.write("\n")
    return 0


def _cmd_navigate(parser, args) -> int:
    doc = _open(args.input)
    controls = OcrControls(
        doc.root, ControlsConfig(copy_to_clipboard=False, inject_view=True)
    )
    if args.from_page is not None:
        controls.edit_page_field(args.from_page)

    if args.page is not None:
        command = NavigateCommand.goto(args.page)
    else:
        command = NavigateCommand(args.offset, is_relative=True)

    effects = controls.navigator.dispatch(command)
    state = controls.state

    print(f"page {state.current_page} / {state.page_count}")
    for effect in effects:
        logger.info("  %r", effect)
    if controls.applier.scrolled_to is None:
        logger.info("  (anchor page-%d not in document)", state.current_page)
    return 0


def _cmd_inject(parser, args) -> int:
    doc = _open(args.input)
    OcrControls(doc.root, ControlsConfig(copy_to_clipboard=False, inject_view=True))

    input_path = Path(args.input)
    output = args.output or str(
        input_path.with_name(f"{input_path.stem}.controls{input_path.suffix}")
    )
    doc.write(output)
    logger.info("Wrote %s", output)
    return 0


_COMMANDS = {
    "count": _cmd_count,
    "extract": _cmd_extract,
    "navigate": _cmd_navigate,
    "inject": _cmd_inject,
}


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main(argv=None) -> int:
    """Parse arguments, configure logging, and run the sub-command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Logging must be configured before any logger calls
    _configure_logging(args.verbose)

    return _COMMANDS[args.command](parser, args)


if __name__ == "__main__":
    sys.exit(main())
