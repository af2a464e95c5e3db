"""State Object Demo - a parent-owned model that loads the 'About' info once."""

__version__ = "0.1.0"
