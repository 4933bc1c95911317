from .base import AssetRevError


class UnknownBlockTypeError(AssetRevError):
    """A build block has a type that has no replacement tag."""

    def __init__(self, block):
        self.block = block
        super().__init__(
            f"Unknown build block type '{block.type}' for '{block.dest}'"
        )
