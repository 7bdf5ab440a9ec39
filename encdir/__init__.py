"""Re-encode text files between code pages and break down directory sizes."""

__version__ = "0.1.0"
__all__ = ["browser", "cli", "codepage", "dirscan", "listview"]