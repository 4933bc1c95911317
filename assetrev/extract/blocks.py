# assetrev/extract/blocks.py
"""
Line-oriented scanner for build blocks.

A build block looks like:

    <!-- build:css css/site.css -->
    <link rel="stylesheet" href="css/normalize.css">
    <link rel="stylesheet" href="css/main.css">
    <!-- endbuild -->

and is returned as:

    Block(type='css', dest='css/site.css',
          src=['css/normalize.css', 'css/main.css'],
          raw=[...the four lines above...], indent='', start_from_root=False)

A marker path that starts with '/' is relative to the site root: the slash
is dropped from `dest` and `start_from_root` is set instead.
"""
from __future__ import annotations

import logging
import posixpath
import re
from typing import Callable, List, Optional, Tuple

from .._logging import resolve_callback, resolve_logger
from ..models.blocks import Block, RequireJSConfig
from ..utils.paths import join_path, to_posix
from ..utils.text import split_lines

# <!-- build:[type] output -->
BUILD_RE = re.compile(r"<!--\s*build:([\w-]+)\s+(\S+)\s*-->")
# anything that starts like a build marker, used to report malformed ones
_ANY_BUILD_RE = re.compile(r"<!--\s*build:")
# <!-- endbuild -->
ENDBUILD_RE = re.compile(r"<!--\s*endbuild\s*-->")

_ASSET_RE = re.compile(r"""(href|src)=["']([^'"]+)["']""")
# RequireJS points at the app's main module with data-main on its script tag.
_MAIN_RE = re.compile(r"""data-main=['"]([^'"]+)['"]""")
_INDENT_RE = re.compile(r"^\s*")


def _open_block(directory: str, match: re.Match, indent: str) -> Block:
    target = match.group(2)
    start_from_root = target.startswith("/")
    if start_from_root:
        target = target[1:]
    return Block(
        type=match.group(1),
        dest=join_path(directory, target),
        start_from_root=start_from_root,
        indent=indent,
    )


def _collect_asset(directory: str, block: Block, line: str) -> None:
    asset = _ASSET_RE.search(line)
    if not asset:
        return
    block.src.append(join_path(directory, asset.group(2)))

    main = _MAIN_RE.search(line)
    if main:
        entry = to_posix(main.group(1))
        block.requirejs = RequireJSConfig(
            dest=block.dest,
            base_url=join_path(directory, posixpath.dirname(entry)),
            name=posixpath.basename(entry),
        )
        # The optimized module bundle is itself an input of the block.
        block.src.append(block.dest)


def scan_blocks(
    directory: str,
    content: str,
    *,
    log_callback: Optional[Callable[[str], None]] = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> Tuple[List[Block], Optional[Block]]:
    """
    Scans `content` and returns (closed_blocks, unclosed_block).

    `directory` is the document's directory relative to the working root
    ('' for the root itself); `dest` and every `src` are joined onto it.
    Only one block can be open at a time. An opening marker seen while a
    block is open discards the open block. A block still open at the end
    of the input is returned as `unclosed_block` instead of being emitted.
    """
    lg = resolve_logger(logger, enabled=log, name=__name__)
    callback = resolve_callback(log_callback)

    def _warn(msg: str) -> None:
        callback(msg)
        lg.warning(msg)

    blocks: List[Block] = []
    current: Optional[Block] = None

    for lineno, line in enumerate(split_lines(content), start=1):
        indent = _INDENT_RE.match(line).group(0)

        build = BUILD_RE.search(line)
        if build:
            if current is not None:
                _warn(
                    f"Line {lineno}: build block '{current.dest}' was never closed; "
                    f"discarding it in favour of '{build.group(0).strip()}'"
                )
            current = _open_block(directory, build, indent)
        elif _ANY_BUILD_RE.search(line):
            _warn(
                f"Line {lineno}: malformed build marker '{line.strip()}' "
                "(expected <!-- build:<type> <path> -->); ignoring it"
            )

        if current is None:
            continue

        if ENDBUILD_RE.search(line):
            current.raw.append(line)
            blocks.append(current)
            current = None
            continue

        _collect_asset(directory, current, line)
        current.raw.append(line)

    if current is not None:
        _warn(f"Build block '{current.dest}' has no matching <!-- endbuild -->; ignoring it")

    return blocks, current


def get_blocks(directory: str, content: str, **kwargs) -> List[Block]:
    """Returns every closed build block of `content`, in document order."""
    blocks, _unclosed = scan_blocks(directory, content, **kwargs)
    return blocks
