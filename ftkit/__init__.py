"""C-style character, byte-buffer, string, number, output and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "numbers", "output", "printf"]