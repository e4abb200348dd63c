"""Source line reader for pgsl schema files.

Schema files are plain UTF-8 text named ``<schema>.pgl``. Lines are handed
out one at a time so the lexer never needs the whole file in memory, and
the blocking reads happen off the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from pathlib import Path

logger = logging.getLogger(__name__)

SOURCE_EXTENSION = ".pgl"
# utf-8-sig drops a leading BOM so it cannot hide the first line's indent
SOURCE_ENCODING = "utf-8-sig"
# Undecodable bytes become U+FFFD and lex as operators
SOURCE_ERRORS = "replace"


def resolve_source_path(name: str | Path, base_dir: str | Path | None = None) -> Path:
    """Map a schema name to its file path.

    The ``.pgl`` extension is optional on input. Relative names are resolved
    against ``base_dir``, which defaults to the current working directory.
    """
    name = str(name)
    if not name.endswith(SOURCE_EXTENSION):
        name += SOURCE_EXTENSION

    base = Path(base_dir) if base_dir is not None else Path.cwd()
    path = base / name
    logger.debug("Resolved schema %r to %s", name, path)
    return path


async def read_lines(path: str | Path) -> AsyncIterator[str]:
    """Yield the lines of ``path`` without their line breaks.

    ``\\n``, ``\\r\\n`` and a bare ``\\r`` all end a line. Errors from opening
    or reading the file propagate unchanged; undecodable bytes do not raise.
    """
    # newline=None gives universal newlines: every break arrives as "\n"
    handle = await asyncio.to_thread(
        open, path, encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS, newline=None,
    )
    count = 0
    try:
        while True:
            line = await asyncio.to_thread(handle.readline)
            if not line:
                break
            count += 1
            yield line.removesuffix("\n")
    finally:
        handle.close()
        logger.debug("Read %d line(s) from %s", count, path)
