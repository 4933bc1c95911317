from .base import AssetRevError


class ProcessError(AssetRevError):
    """A document could not be read or written."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")
