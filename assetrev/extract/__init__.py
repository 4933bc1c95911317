from .blocks import BUILD_RE, ENDBUILD_RE, get_blocks, scan_blocks

__all__ = [
    "BUILD_RE",
    "ENDBUILD_RE",
    "get_blocks",
    "scan_blocks",
]
