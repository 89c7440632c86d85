"""Shell-style command splitting and executable lookup, with C-style string helpers."""

__version__ = "0.1.0"