"""studyhub - AI study aids for learning communities."""

__version__ = "1.0.0"
