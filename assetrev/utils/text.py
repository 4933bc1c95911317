import re
from typing import List

_CRLF_RE = re.compile(r"\r\n")


def detect_linefeed(content: str) -> str:
    """Returns '\\r\\n' when the content uses Windows line endings, '\\n' otherwise."""
    if content and _CRLF_RE.search(content):
        return "\r\n"
    return "\n"


def split_lines(content: str) -> List[str]:
    """
    Splits content on line feeds after folding CRLF into LF.
    Unlike str.splitlines(), a trailing newline yields a final empty line,
    so joining the result gives back the normalized text.
    """
    if not content:
        return [""]
    return content.replace("\r\n", "\n").split("\n")
