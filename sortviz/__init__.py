"""Watch sorting algorithms run as animated bar charts in a pygame window."""

__version__ = "1.0.0"