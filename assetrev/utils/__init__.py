# assetrev/utils/__init__.py
from .paths import (
    document_directory,
    is_revvable_reference,
    join_path,
    relative_path,
    to_posix,
)
from .text import detect_linefeed, split_lines

__all__ = [
    "document_directory",
    "is_revvable_reference",
    "join_path",
    "relative_path",
    "to_posix",
    "detect_linefeed",
    "split_lines",
]
