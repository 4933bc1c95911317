from .blocks import Block, RequireJSConfig

__all__ = ["Block", "RequireJSConfig"]
