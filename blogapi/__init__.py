"""Users and posts REST backend with bearer-token ownership checks."""

__version__ = "0.1.0"
