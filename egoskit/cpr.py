"""Copy a text file, dropping sections tagged with given keys.

A line holding ``//<><>KEY`` is dropped.  A line holding ``//<<<<KEY``
starts a dropped section that runs up to and including the next line
holding ``//>>>>KEY``.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, Sequence

_LINE_MARK = "//<><>"
_START_MARK = "//<<<<"
_END_MARK = "//>>>>"


def filter_lines(lines: Iterable[str], keys: Sequence[str]) -> Iterator[str]:
    """Yield the lines that survive removal of the sections tagged by ``keys``."""
    end_marker: Optional[str] = None
    for line in lines:
        if end_marker is not None:
            if end_marker in line:
                end_marker = None
            continue
        if any(_LINE_MARK + key in line for key in keys):
            continue
        start = next((key for key in keys if _START_MARK + key in line), None)
        if start is not None:
            end_marker = _END_MARK + start
            continue
        yield line


def main(argv: Optional[List[str]] = None) -> int:
    """Run ``cpr src dst [keys ...]``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = "cpr"
    if len(args) < 2:
        print(f"Usage: {prog} src dst [keys ...]", file=sys.stderr)
        return 1
    src_path, dst_path, keys = args[0], args[1], args[2:]
    try:
        src = open(src_path, "r", encoding="latin-1", newline="")
    except OSError:
        print(f"{prog}: can't open {src_path}", file=sys.stderr)
        return 1
    with src:
        try:
            dst = open(dst_path, "w", encoding="latin-1", newline="")
        except OSError:
            print(f"{prog}: can't create {dst_path}", file=sys.stderr)
            return 1
        with dst:
            dst.writelines(filter_lines(src, keys))
    return 0


if __name__ == "__main__":
    sys.exit(main())