# assetrev/prepare.py
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from .models.blocks import Block

log = logging.getLogger(__name__)

_CONCAT_TYPES = ("js", "js-concat", "css", "css-concat")


@dataclass
class BuildConfig:
    """Configuration for the steps that produce the files build blocks point at."""

    concat: Dict[str, List[str]] = field(default_factory=dict)
    min: Dict[str, str] = field(default_factory=dict)
    css: Dict[str, str] = field(default_factory=dict)
    # output path -> {"baseUrl", "name", "out"}
    requirejs: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def merge(self, other: "BuildConfig") -> "BuildConfig":
        """Folds `other` into this config and returns self."""
        for dest, src in other.concat.items():
            self.concat.setdefault(dest, []).extend(src)
        self.min.update(other.min)
        self.css.update(other.css)
        self.requirejs.update(other.requirejs)
        return self

    def to_dict(self) -> Dict[str, Dict]:
        return {
            "concat": {dest: list(src) for dest, src in self.concat.items()},
            "min": dict(self.min),
            "css": dict(self.css),
            "requirejs": {out: dict(cfg) for out, cfg in self.requirejs.items()},
        }


def prepare_config(
    blocks: Iterable[Block],
    config: Optional[BuildConfig] = None,
    *,
    log_callback: Optional[Callable[[str], None]] = None,
) -> BuildConfig:
    """
    Maps build blocks onto concat / min / css / requirejs step configuration.

    - every js, js-concat, css and css-concat block concatenates its sources into its dest;
    - js blocks are then minified, css blocks processed; *-concat blocks stop at concat;
    - a block carrying RequireJS metadata also configures the optimizer, whose
      output is minified like any js block.

    Blocks of any other type are skipped. Pass `config` to accumulate
    several documents into one configuration.
    """
    config = config if config is not None else BuildConfig()

    def _log(msg: str, level: int = logging.DEBUG):
        if log_callback:
            log_callback(msg)
        log.log(level, msg)

    for block in blocks:
        if block.type not in _CONCAT_TYPES:
            _log(f"  - Unknown block type '{block.type}' for '{block.dest}'. Skipping.", logging.WARNING)
            continue

        config.concat.setdefault(block.dest, []).extend(block.src)
        _log(f"  concat: {block.dest} <- {len(block.src)} file(s)")

        if block.requirejs:
            config.requirejs[block.dest] = {
                "baseUrl": block.requirejs.base_url,
                "name": block.requirejs.name,
                "out": block.requirejs.dest,
            }
            _log(f"  requirejs: {block.requirejs.name} -> {block.requirejs.dest}")

        if block.type == "js":
            config.min[block.dest] = block.dest
            _log(f"  min: {block.dest}")
        elif block.type == "css":
            config.css[block.dest] = block.dest
            _log(f"  css: {block.dest}")

    return config
