"""Command-line entry point: read indented text on stdin, draw the tree on stdout."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, TextIO

from treeviz.tree_builder import tree_from_text
from treeviz.tree_renderer import draw_tree

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def run(source: BinaryIO, sink: TextIO) -> int:
    """Read all of *source*, render it to *sink* and return an exit status."""
    try:
        data = source.read()
    except OSError as exc:
        logger.error("error reading input: %s", exc)
        return EXIT_FAILURE

    text = data.decode("utf-8", errors="replace")

    try:
        root = tree_from_text(text)
        draw_tree(root, sink)
    except MemoryError:
        logger.error("memory allocation failed")
        return EXIT_FAILURE

    return EXIT_SUCCESS


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="treeviz: %(levelname)s: %(message)s",
    )
    # Diagram glyphs are always written as UTF-8, whatever the locale says.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    sys.exit(run(sys.stdin.buffer, sys.stdout))


if __name__ == "__main__":
    main()
