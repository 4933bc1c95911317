from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class RequireJSConfig:
    """Module-loader metadata found on a `data-main` script inside a block."""

    dest: str
    base_url: str
    name: str


@dataclass
class Block:
    """A region of markup between `<!-- build:... -->` and `<!-- endbuild -->`."""

    type: str
    dest: str
    start_from_root: bool = False
    indent: str = ""
    src: List[str] = field(default_factory=list)
    raw: List[str] = field(default_factory=list)
    requirejs: Optional[RequireJSConfig] = None

    def raw_text(self, linefeed: str = "\n") -> str:
        """The block's original lines joined back together."""
        return linefeed.join(self.raw)
