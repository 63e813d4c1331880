"""Character-class statistics for text, with a chunked file analyser and a Flask endpoint."""

__version__ = "0.1.0"
__all__ = ["counts", "combine", "chunking", "server"]