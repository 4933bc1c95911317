from .core import detect_kind, prepare_files, process_file, process_files
from .errors import AssetRevError, ProcessError, UnknownBlockTypeError
from .extract import get_blocks, scan_blocks
from .finder import FileSystemRevvedFinder, MappingRevvedFinder, RevvedFinder
from .models import Block, RequireJSConfig
from .prepare import BuildConfig, prepare_config
from .processor import (
    CSS_PATTERNS,
    HTML_PATTERNS,
    CSSProcessor,
    HTMLProcessor,
    ReferencePattern,
)

__all__ = [
    "HTMLProcessor",
    "CSSProcessor",
    "ReferencePattern",
    "HTML_PATTERNS",
    "CSS_PATTERNS",
    "Block",
    "RequireJSConfig",
    "get_blocks",
    "scan_blocks",
    "RevvedFinder",
    "MappingRevvedFinder",
    "FileSystemRevvedFinder",
    "BuildConfig",
    "prepare_config",
    "prepare_files",
    "process_file",
    "process_files",
    "detect_kind",
    "AssetRevError",
    "UnknownBlockTypeError",
    "ProcessError",
]
