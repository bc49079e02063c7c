"""Food label verification against the public food product database."""

__version__ = "1.0.0"
