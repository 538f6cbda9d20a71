from .encoder import GLYPHS, TRAILER, encode

__all__ = ["GLYPHS", "TRAILER", "encode"]
