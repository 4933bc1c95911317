from .base import AssetRevError
from .block import UnknownBlockTypeError
from .process import ProcessError

__all__ = ["AssetRevError", "UnknownBlockTypeError", "ProcessError"]
