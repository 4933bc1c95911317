# assetrev/core.py
import logging
import os
from typing import Callable, Dict, Iterable, Optional

from .errors import ProcessError
from .finder import FileSystemRevvedFinder, RevvedFinder
from .prepare import BuildConfig, prepare_config
from .processor import CSSProcessor, HTMLProcessor

_log = logging.getLogger(__name__)

_CSS_EXTENSIONS = (".css",)


def detect_kind(file_path: str) -> str:
    """'css' for stylesheets, 'html' for anything else."""
    return "css" if file_path.lower().endswith(_CSS_EXTENSIONS) else "html"


def _read(file_path: str) -> str:
    try:
        # newline="" keeps CRLF documents intact
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise ProcessError(file_path, f"could not read file: {e}") from e


def _write(file_path: str, content: str) -> None:
    try:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise ProcessError(file_path, f"could not write file: {e}") from e


def process_file(
    file_path: str,
    finder: Optional[RevvedFinder] = None,
    *,
    kind: Optional[str] = None,
    root: Optional[str] = None,
    write: bool = True,
    log_callback: Optional[Callable[[str], None]] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
    strict: bool = False,
) -> str:
    """
    Rewrites one document on disk and returns its new content.

    HTML documents get their build blocks collapsed and their references
    revved; stylesheets only get their url() references revved. The file
    is only written back when `write` is set and the content changed.
    """
    kind = kind or detect_kind(file_path)
    if kind not in ("html", "css"):
        raise ValueError("kind must be one of {'html','css'}")

    finder = finder if finder is not None else FileSystemRevvedFinder(
        root, log_callback=log_callback, logger=logger, log=log
    )
    original = _read(file_path)

    if kind == "css":
        proc = CSSProcessor(
            file_path, original, finder, log_callback, root=root, logger=logger, log=log
        )
    else:
        proc = HTMLProcessor(
            file_path, original, finder, log_callback, root=root, logger=logger, log=log, strict=strict
        )
    new_content = proc.process()

    if write and new_content != original:
        _write(file_path, new_content)
        _log.debug(f"Rewrote {file_path}")
    return new_content


def process_files(file_paths: Iterable[str], finder: Optional[RevvedFinder] = None, **kwargs) -> Dict[str, str]:
    """Runs process_file on every path and maps each path to its new content."""
    return {path: process_file(path, finder, **kwargs) for path in file_paths}


def prepare_files(
    file_paths: Iterable[str],
    *,
    root: Optional[str] = None,
    log_callback: Optional[Callable[[str], None]] = None,
) -> BuildConfig:
    """Collects the build configuration of every block of the given HTML documents."""
    config = BuildConfig()
    for path in file_paths:
        if not os.path.exists(path):
            _log.warning(f"  - WARNING: '{path}' does not exist. Skipping.")
            continue
        proc = HTMLProcessor(path, _read(path), None, log_callback, root=root)
        prepare_config(proc.blocks, config, log_callback=log_callback)
    return config
