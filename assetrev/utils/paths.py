# assetrev/utils/paths.py
import os
import posixpath
import re
from typing import Optional, Tuple

# "http:", "ftp:", "data:", "mailto:", ... (RFC 3986 scheme)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
# <% erb/ejs %>, {{ mustache/jinja }}, {% jinja %}
_TEMPLATE_RE = re.compile(r"<%.*?%>|\{\{.*?\}\}|\{%.*?%\}", re.DOTALL)


def to_posix(path: str) -> str:
    """Converts Windows separators to forward slashes."""
    return path.replace("\\", "/")


def join_path(directory: str, path: str) -> str:
    """
    Joins `path` onto `directory` and normalizes the result.
    A leading '/' on `path` does not discard `directory`; both halves are
    simply concatenated, so ('build', '/a.js') gives 'build/a.js'.
    """
    parts = [p for p in (to_posix(directory), to_posix(path)) if p]
    return posixpath.normpath("/".join(parts)) if parts else "."


def relative_path(start: str, target: str) -> str:
    """Path of `target` relative to the directory `start` (both root-relative)."""
    return posixpath.relpath(to_posix(target) or ".", to_posix(start) or ".")


def document_directory(file_path: str, root: Optional[str] = None) -> str:
    """
    Directory of `file_path` expressed relative to `root` (default: cwd),
    with forward slashes. The root itself is returned as ''.
    """
    base = os.path.abspath(root or os.getcwd())
    directory = os.path.dirname(os.path.abspath(file_path))
    rel = to_posix(os.path.relpath(directory, base))
    return "" if rel == "." else rel


def split_suffix(ref: str) -> Tuple[str, str]:
    """Splits 'a.png?v=1#x' into ('a.png', '?v=1#x')."""
    match = re.search(r"[?#]", ref)
    if not match:
        return ref, ""
    return ref[: match.start()], ref[match.start():]


def is_revvable_reference(ref: str) -> bool:
    """
    True when `ref` may point at a local file that could have a revved copy.
    External URLs (any scheme or protocol-relative '//'), template
    placeholders, fragment-only links, empty values and the bare root '/'
    are never file references.
    """
    if not ref or not ref.strip():
        return False
    if ref == "/" or ref.startswith("//") or ref.startswith("#"):
        return False
    if _SCHEME_RE.match(ref):
        return False
    if _TEMPLATE_RE.search(ref):
        return False
    return True
