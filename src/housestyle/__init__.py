"""housestyle — rule-based pattern matching and replacement for editorial house style."""

__version__ = "0.1.0"
