# assetrev/processor.py
"""
Processors rewrite asset references in HTML and CSS documents.

HTMLProcessor is given:
  - the path of the document being processed
  - the content of that document
  - a revved-file finder (anything with find(ref, base_dir) -> str)
  - an optional log callback, called as soon as there is something to report

On construction it extracts the document's build blocks. `process()`
then collapses every block into a single tag pointing at its built file
and redirects the remaining references to their revved versions.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from ._logging import resolve_callback, resolve_logger
from .errors import UnknownBlockTypeError
from .extract.blocks import scan_blocks
from .finder import RevvedFinder
from .models.blocks import Block
from .utils.paths import document_directory, is_revvable_reference, relative_path, to_posix
from .utils.text import detect_linefeed

_STYLESHEET_TAG = '<link rel="stylesheet" href="{dest}">'
_SCRIPT_TAG = '<script src="{dest}"></script>'

BLOCK_TAGS = {
    "css": _STYLESHEET_TAG,
    "css-concat": _STYLESHEET_TAG,
    "js": _SCRIPT_TAG,
    "js-concat": _SCRIPT_TAG,
}


@dataclass(frozen=True)
class ReferencePattern:
    """One kind of asset-bearing construct: the regex and the group holding the URL."""

    name: str
    regex: Pattern[str]
    message: str
    group: int = 1

    def sub(
        self,
        content: str,
        resolve: Callable[[str], str],
        on_change: Callable[[str, str], None],
    ) -> str:
        """Replaces the captured reference of every match with resolve(reference)."""

        def _replace(match: re.Match) -> str:
            whole = match.group(0)
            ref = match.group(self.group)
            revved = resolve(ref)
            if revved == ref:
                return whole
            offset = match.start(0)
            start, end = match.start(self.group) - offset, match.end(self.group) - offset
            result = whole[:start] + revved + whole[end:]
            on_change(whole, result)
            return result

        return self.regex.sub(_replace, content)


SCRIPT_PATTERN = ReferencePattern(
    "script",
    re.compile(r"""<script.+src=['"]([^"']+)["'][/>]?><\\?/script>""", re.MULTILINE),
    "Update the HTML to reference our concat/min/revved script files",
)
LINK_PATTERN = ReferencePattern(
    "link",
    re.compile(r"""<link[^>]+href=['"]([^"']+)["']""", re.MULTILINE),
    "Update the HTML with the new css filenames",
)
IMG_PATTERN = ReferencePattern(
    "img",
    re.compile(r"""<img[^>]+src=['"]([^"']+)["']""", re.MULTILINE),
    "Update the HTML with the new img filenames",
)
DATA_PATTERN = ReferencePattern(
    "data",
    re.compile(r"""data-[A-Za-z0-9]*=['"]([^"']+)["']""", re.MULTILINE),
    "Update the HTML with the data tags",
)
URL_PATTERN = ReferencePattern(
    "url",
    re.compile(r"""url\(\s*['"]([^"']+)["']\s*\)""", re.MULTILINE),
    "Update the HTML with background imgs, case there is some inline style",
)
ANCHOR_PATTERN = ReferencePattern(
    "anchor",
    re.compile(r"""<a[^>]+href=['"]([^"']+)["']""", re.MULTILINE),
    "Update the HTML with anchors images",
)
INPUT_PATTERN = ReferencePattern(
    "input",
    re.compile(r"""<input[^>]+src=['"]([^"']+)["']""", re.MULTILINE),
    "Update the HTML with reference in input",
)

# Order matters: each pattern runs on the output of the previous one.
HTML_PATTERNS: Tuple[ReferencePattern, ...] = (
    SCRIPT_PATTERN,
    LINK_PATTERN,
    IMG_PATTERN,
    DATA_PATTERN,
    URL_PATTERN,
    ANCHOR_PATTERN,
    INPUT_PATTERN,
)
CSS_PATTERNS: Tuple[ReferencePattern, ...] = (
    ReferencePattern(
        "url",
        URL_PATTERN.regex,
        "Update the CSS with new img filenames",
    ),
)


class _RevvedReferenceRewriter:
    default_patterns: Tuple[ReferencePattern, ...] = ()

    def __init__(
        self,
        filepath: str,
        content: str,
        revved_finder: RevvedFinder,
        log_callback: Optional[Callable[[str], None]] = None,
        *,
        root: Optional[str] = None,
        logger: logging.Logger | None = None,
        log: bool = False,
        patterns: Optional[Sequence[ReferencePattern]] = None,
    ):
        self.filepath = filepath
        self.relative_path = document_directory(filepath, root)
        self.content = content or ""
        self.revved_finder = revved_finder
        self.linefeed = detect_linefeed(self.content)
        self.patterns = tuple(patterns) if patterns is not None else self.default_patterns
        self.log_callback = resolve_callback(log_callback)
        self._log = resolve_logger(logger, enabled=log, name=__name__)

    def log(self, msg: str) -> None:
        self.log_callback(msg)
        self._log.debug(msg)

    def warn(self, msg: str) -> None:
        self.log_callback(msg)
        self._log.warning(msg)

    def find_revved(self, ref: str) -> str:
        """The revved version of `ref`, or `ref` itself when there is none."""
        if not is_revvable_reference(ref):
            return ref
        return self.revved_finder.find(ref, self.relative_path)

    def replace_with_revved(self, content: Optional[str] = None) -> str:
        """
        Replaces references to scripts, stylesheets, images, ... in `content`
        (default: the content given at construction) with their revved versions.
        """
        result = self.content if content is None else content

        def _changed(before: str, after: str) -> None:
            self.log(f"{before} changed to {after}")

        for pattern in self.patterns:
            self.log(pattern.message)
            result = pattern.sub(result, self.find_revved, _changed)
        return result

    def process(self) -> str:
        return self.replace_with_revved()


class HTMLProcessor(_RevvedReferenceRewriter):
    default_patterns = HTML_PATTERNS

    def __init__(
        self,
        filepath: str,
        content: str,
        revved_finder: RevvedFinder,
        log_callback: Optional[Callable[[str], None]] = None,
        *,
        root: Optional[str] = None,
        logger: logging.Logger | None = None,
        strict: bool = False,
        patterns: Optional[Sequence[ReferencePattern]] = None,
        log: bool = False,
    ):
        super().__init__(
            filepath,
            content,
            revved_finder,
            log_callback,
            root=root,
            logger=logger,
            patterns=patterns,
            log=log,
        )
        self.strict = strict
        self.blocks: List[Block]
        self.blocks, unclosed = scan_blocks(
            self.relative_path,
            self.content,
            log_callback=self.log_callback,
            logger=logger,
            log=log,
        )
        self.has_unclosed_block = unclosed is not None

    def replace_with(self, block: Block) -> str:
        """Returns the line that replaces `block` in the document."""
        tag = BLOCK_TAGS.get(block.type)
        if tag is None:
            if self.strict:
                raise UnknownBlockTypeError(block)
            self.warn(
                f"Unknown build block type '{block.type}' for '{block.dest}'; "
                "the block is removed from the output"
            )
            return ""

        # The built file, seen from the document's directory
        dest = relative_path(self.relative_path, block.dest)
        if block.start_from_root:
            dest = "/" + dest.lstrip("/")
        dest = to_posix(dest)
        return block.indent + tag.format(dest=dest)

    def replace_blocks(self, content: Optional[str] = None) -> str:
        """
        Replaces every build block with its target tag.

        Blocks are consumed left to right: each block replaces the first
        occurrence of its raw text found after the previous replacement.
        """
        if content is None:
            content, linefeed = self.content, self.linefeed
        else:
            linefeed = detect_linefeed(content)

        parts: List[str] = []
        cursor = 0
        for block in self.blocks:
            raw = block.raw_text(linefeed)
            idx = content.find(raw, cursor)
            if idx == -1:
                self.warn(f"Could not locate build block '{block.dest}' in the content; leaving it untouched")
                continue
            parts.append(content[cursor:idx])
            parts.append(self.replace_with(block))
            cursor = idx + len(raw)
        parts.append(content[cursor:])
        return "".join(parts)

    def process(self) -> str:
        """Replaces blocks by their targets, then references by their revved versions."""
        return self.replace_with_revved(self.replace_blocks())


class CSSProcessor(_RevvedReferenceRewriter):
    """Rewrites url("...") references of a stylesheet. Stylesheets have no blocks."""

    default_patterns = CSS_PATTERNS
