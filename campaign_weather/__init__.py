"""Campaign regional weather notifications."""

__version__ = "1.0.0"
