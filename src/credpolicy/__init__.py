"""credpolicy — credential policy validation for role password changes."""

__version__ = "0.3.0"
