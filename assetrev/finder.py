# assetrev/finder.py
"""
Revisioned-file locators.

A locator maps a reference found in a document to the name of its revved
copy, e.g. 'images/test.png' -> 'images/23012.test.png', and returns the
reference unchanged when no revved copy exists.
"""
from __future__ import annotations

import logging
import re
import os
import posixpath
from typing import Callable, Dict, List, Mapping, Optional, Protocol

import pathspec

from ._logging import resolve_callback, resolve_logger
from .utils.paths import is_revvable_reference, join_path, split_suffix

_GLOB_SPECIALS = "\\*?[]"
_FINGERPRINT_RE = re.compile(r"[0-9a-fA-F]+")


class RevvedFinder(Protocol):
    def find(self, ref: str, base_dir: str) -> str:
        ...


class MappingRevvedFinder:
    """Looks references up in a fixed mapping (e.g. a loaded manifest)."""

    def __init__(self, mapping: Mapping[str, str]):
        self.mapping = dict(mapping)

    def find(self, ref: str, base_dir: str = "") -> str:
        return self.mapping.get(ref, ref)


def _escape_glob(name: str) -> str:
    return "".join("\\" + ch if ch in _GLOB_SPECIALS else ch for ch in name)


def revved_pattern(name: str) -> pathspec.PathSpec:
    """Spec matching '<anything>.<name>', the glob every revved copy of `name` falls under."""
    return pathspec.GitIgnoreSpec.from_lines(["*." + _escape_glob(name)])


def is_revved_name(entry: str, name: str) -> bool:
    """True when `entry` is `name` prefixed by a hex fingerprint ('23012.test.png')."""
    suffix = "." + name
    return entry.endswith(suffix) and _FINGERPRINT_RE.fullmatch(entry[: -len(suffix)]) is not None


class FileSystemRevvedFinder:
    """
    Finds revved files on disk next to the file they were made from.

    `root` is the directory that document directories (the `base_dir`
    argument of find) are relative to. References starting with '/' are
    resolved against `site_root` when given, otherwise against `base_dir`.
    """

    def __init__(
        self,
        root: Optional[str] = None,
        *,
        site_root: Optional[str] = None,
        log_callback: Optional[Callable[[str], None]] = None,
        logger: logging.Logger | None = None,
        log: bool = False,
    ):
        self.root = os.path.abspath(root or os.getcwd())
        self.site_root = site_root
        self.log_callback = resolve_callback(log_callback)
        self._logger = resolve_logger(logger, enabled=log, name=__name__)
        self._listings: Dict[str, List[str]] = {}

    def _list_files(self, directory: str) -> List[str]:
        abs_dir = os.path.normpath(os.path.join(self.root, directory))
        cached = self._listings.get(abs_dir)
        if cached is not None:
            return cached
        try:
            entries = sorted(
                e for e in os.listdir(abs_dir)
                if os.path.isfile(os.path.join(abs_dir, e))
            )
        except OSError:
            entries = []
        self._listings[abs_dir] = entries
        return entries

    def candidates(self, directory: str, name: str) -> List[str]:
        """
        Names of the revved copies of `name` inside `directory`, sorted.
        'main.min.css' ends like 'min.css' but is another file, so only a
        hex fingerprint prefix counts.
        """
        spec = revved_pattern(name)
        return [
            entry for entry in self._list_files(directory)
            if spec.match_file(entry) and is_revved_name(entry, name)
        ]

    def find(self, ref: str, base_dir: str = "") -> str:
        if not is_revvable_reference(ref):
            return ref
        path, suffix = split_suffix(ref)
        if not path or path.endswith("/"):
            return ref

        from_root = path.startswith("/")
        if from_root and self.site_root is not None:
            search_base = self.site_root
        else:
            search_base = base_dir or ""
        target = join_path(search_base, path.lstrip("/"))
        directory, name = posixpath.split(target)

        found = self.candidates(directory, name)
        if not found:
            return ref
        if len(found) > 1:
            msg = f"Found multiple revved files for '{ref}': {found}. Using '{found[0]}'."
            self.log_callback(msg)
            self._logger.warning(msg)

        # Keep the reference's own directory part ('../../images', '/images', ...)
        ref_dir = posixpath.dirname(path)
        revved = posixpath.join(ref_dir, found[0]) if ref_dir else found[0]
        return revved + suffix
