class AssetRevError(Exception):
    """Base class for every error raised by assetrev."""
