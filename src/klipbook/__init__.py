"""Turn a Kindle clippings export into a library of books."""

__version__ = "0.1.0"
